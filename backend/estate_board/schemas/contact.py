# backend/estate_board/schemas/contact.py
from pydantic import ConfigDict, Field

from .base import BaseSchema, TimestampMixin


class ContactCreate(BaseSchema):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    phone: str = Field(min_length=3)


class Contact(BaseSchema, TimestampMixin):
    id: int
    project_id: int
    name: str
    phone: str
