# backend/estate_board/services/storage.py
import os
from pathlib import Path
from typing import BinaryIO

from ..utils.files import copy_limited
from ..utils.logging import service_logger


class StorageError(Exception):
    pass


class FileStorage:
    """Durable object store for attachment bytes, keyed by stored name, rooted in a directory"""

    def __init__(self, root: Path):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        path = (self.root / key).resolve()
        if path.parent != self.root.resolve():
            raise StorageError(f"Invalid storage key: {key}")
        return path

    def save(self, key: str, source: BinaryIO, max_bytes: int) -> int:
        """Write the stream under key and return the byte count.

        The object only becomes visible once fully written; a failed or oversized
        write leaves nothing behind.
        """
        target = self.path_for(key)
        partial = target.with_name(f".{target.name}.part")
        try:
            with partial.open("wb") as buffer:
                size = copy_limited(source, buffer, max_bytes)
                buffer.flush()
                os.fsync(buffer.fileno())
            os.replace(partial, target)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise

        service_logger.debug("Stored object", extra={"key": key, "size": size})
        return size

    def exists(self, key: str) -> bool:
        return self.path_for(key).is_file()

    def open(self, key: str) -> Path:
        path = self.path_for(key)
        if not path.is_file():
            raise FileNotFoundError(key)
        return path

    def delete(self, key: str) -> None:
        self.path_for(key).unlink()
