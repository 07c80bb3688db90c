# backend/estate_board/services/cleanup.py
from typing import Iterable

from .storage import FileStorage
from ..utils.logging import service_logger


class CleanupService:
    """Best-effort removal of durable attachment content; never fails the caller"""

    def __init__(self, storage: FileStorage):
        self.storage = storage

    def delete_stored_file(self, stored_name: str) -> bool:
        try:
            self.storage.delete(stored_name)
            service_logger.info(f"Deleted stored file: {stored_name}")
            return True
        except FileNotFoundError:
            service_logger.warning("Stored file already missing", extra={"stored_name": stored_name})
            return False
        except Exception as e:
            service_logger.warning(f"Error deleting stored file: {str(e)}", extra={
                "stored_name": stored_name
            })
            return False

    def delete_stored_files(self, stored_names: Iterable[str]) -> int:
        """Delete several objects and return how many were actually removed"""
        removed = 0
        for stored_name in stored_names:
            if self.delete_stored_file(stored_name):
                removed += 1
        return removed
