# backend/estate_board/models/__init__.py
from ..database import Base
from .enums import ListKind, ProjectStatus, AssignmentStatus
from .project import Project
from .assignment import Assignment
from .contact import Contact
from .project_file import ProjectFile

__all__ = [
    "Base",
    "ListKind",
    "ProjectStatus",
    "AssignmentStatus",
    "Project",
    "Assignment",
    "Contact",
    "ProjectFile"
]
