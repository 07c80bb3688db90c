# backend/estate_board/api/__init__.py
from .system import router as system_router
from .projects import router as projects_router
from .assignments import router as assignments_router
from .contacts import router as contacts_router
from .files import router as files_router
from .backup import router as backup_router

__all__ = [
    "system_router", "projects_router", "assignments_router",
    "contacts_router", "files_router", "backup_router"
]
