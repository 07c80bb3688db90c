# backend/estate_board/schemas/assignment.py
from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from .base import BaseSchema, TimestampMixin, OptionalDate
from ..models.enums import AssignmentStatus


class AssignmentBase(BaseSchema):
    title: str = Field(min_length=1)
    notes: Optional[str] = None
    assignee_name: Optional[str] = None
    due_date: OptionalDate = None

    @field_validator("assignee_name")
    @classmethod
    def blank_assignee_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class AssignmentCreate(AssignmentBase):
    status: AssignmentStatus = AssignmentStatus.TODO


class AssignmentUpdate(BaseSchema):
    title: Optional[str] = Field(default=None, min_length=1)
    notes: Optional[str] = None
    assignee_name: Optional[str] = None
    due_date: OptionalDate = None
    status: Optional[AssignmentStatus] = None

    @field_validator("title", "status")
    @classmethod
    def not_nullable(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value

    @field_validator("assignee_name")
    @classmethod
    def blank_assignee_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class Assignment(BaseSchema, TimestampMixin):
    id: int
    project_id: int
    title: str
    notes: Optional[str] = None
    assignee_name: Optional[str] = None
    due_date: Optional[date] = None
    status: AssignmentStatus
