# backend/estate_board/services/__init__.py
from .cleanup import CleanupService
from .storage import FileStorage, StorageError

__all__ = ["CleanupService", "FileStorage", "StorageError"]
