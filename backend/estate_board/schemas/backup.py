# backend/estate_board/schemas/backup.py
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from .base import BaseSchema, OptionalDate
from .contact import ContactCreate
from .project import ProjectFields
from ..models.enums import AssignmentStatus, ListKind, ProjectStatus


class BackupAssignment(BaseSchema):
    title: str = Field(min_length=1)
    notes: Optional[str] = None
    assignee_name: Optional[str] = None
    due_date: OptionalDate = None
    status: AssignmentStatus = AssignmentStatus.TODO


class BackupContact(ContactCreate):
    pass


class BackupProject(ProjectFields):
    """One project of a snapshot. ids, timestamps and any 'files' key are ignored"""
    name: str = Field(min_length=1)
    list_kind: ListKind = ListKind.NEGOTIATION
    status: ProjectStatus = ProjectStatus.ACTIVE
    assignments: List[BackupAssignment] = []
    contacts: List[BackupContact] = []


class BackupPayload(BaseSchema):
    version: Optional[int] = None
    projects: List[BackupProject]


class BackupAssignmentOut(BackupAssignment):
    id: int
    created_at: datetime
    due_date: Optional[date] = None


class BackupContactOut(BaseSchema):
    id: int
    name: str
    phone: str
    created_at: datetime


class BackupProjectOut(BaseSchema):
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
    created_at: datetime
    updated_at: datetime
    assignments: List[BackupAssignmentOut] = []
    contacts: List[BackupContactOut] = []


class BackupExport(BaseSchema):
    version: int
    exported_at: datetime
    project_count: int
    projects: List[BackupProjectOut]


class BackupImportResult(BaseSchema):
    ok: bool = True
    imported_projects: int
