# backend/estate_board/schemas/project.py
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .assignment import Assignment, AssignmentCreate
from .base import BaseSchema, TimestampMixin, OptionalDate
from .contact import Contact, ContactCreate
from ..models.enums import ListKind, ProjectStatus
from ..utils.standard import normalize_standard


class ProjectFields(BaseSchema):
    developer: Optional[str] = None
    standard: Optional[str] = None
    units: Optional[int] = Field(default=None, ge=0)
    scope_value: Optional[str] = None
    start_date: OptionalDate = None
    execution: Optional[int] = Field(default=None, ge=0, le=100)
    remaining: Optional[str] = None

    @field_validator("standard")
    @classmethod
    def canonical_standard(cls, value: Optional[str]) -> Optional[str]:
        return normalize_standard(value)


class ProjectCreate(ProjectFields):
    name: str = Field(min_length=1)
    list_kind: ListKind = ListKind.NEGOTIATION
    status: ProjectStatus = ProjectStatus.ACTIVE
    initial_assignment: Optional[AssignmentCreate] = None
    initial_contacts: List[ContactCreate] = []


class ProjectUpdate(ProjectFields):
    """Sparse patch: only fields present in the request body are applied"""
    name: Optional[str] = Field(default=None, min_length=1)
    list_kind: Optional[ListKind] = None
    status: Optional[ProjectStatus] = None

    @field_validator("name", "list_kind", "status")
    @classmethod
    def not_nullable(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class Project(BaseSchema, TimestampMixin):
    id: int
    name: str
    developer: Optional[str] = None
    list_kind: ListKind
    status: ProjectStatus
    standard: Optional[str] = None
    units: Optional[int] = None
    scope_value: Optional[str] = None
    start_date: Optional[date] = None
    execution: Optional[int] = None
    remaining: Optional[str] = None


class ProjectDetail(Project):
    assignments: List[Assignment] = []
    contacts: List[Contact] = []


class ProjectListItem(BaseSchema):
    id: int
    name: str
    developer: Optional[str] = None
    list_kind: ListKind
    status: ProjectStatus
    scope_value: Optional[str] = None
    units: Optional[int] = None
    standard: Optional[str] = None
    execution: Optional[int] = None
    remaining: Optional[str] = None
    start_date: Optional[date] = None
    last_task_title: Optional[str] = None
    last_handler_name: Optional[str] = None
    last_task_date: Optional[datetime | date] = None
    created_at: datetime


class ProjectCreateResult(BaseSchema):
    project: Project
    initial_assignment: Optional[Assignment] = None
    initial_contacts: List[Contact] = []
