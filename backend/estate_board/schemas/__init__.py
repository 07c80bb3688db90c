# backend/estate_board/schemas/__init__.py
from .project import (
    Project, ProjectCreate, ProjectUpdate, ProjectDetail, ProjectListItem, ProjectCreateResult
)
from .assignment import Assignment, AssignmentCreate, AssignmentUpdate
from .contact import Contact, ContactCreate
from .project_file import ProjectFile
from .backup import BackupPayload, BackupExport, BackupImportResult
from .auth import LoginRequest, TokenResponse

__all__ = [
    "Project", "ProjectCreate", "ProjectUpdate", "ProjectDetail", "ProjectListItem", "ProjectCreateResult",
    "Assignment", "AssignmentCreate", "AssignmentUpdate",
    "Contact", "ContactCreate",
    "ProjectFile",
    "BackupPayload", "BackupExport", "BackupImportResult",
    "LoginRequest", "TokenResponse"
]
