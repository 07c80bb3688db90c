# backend/estate_board/schemas/project_file.py
from typing import Optional

from .base import BaseSchema, TimestampMixin


class ProjectFile(BaseSchema, TimestampMixin):
    id: int
    project_id: int
    original_name: str
    stored_name: str
    mime_type: Optional[str] = None
    size: int
