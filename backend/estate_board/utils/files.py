# backend/estate_board/utils/files.py
import secrets
import time
from pathlib import Path
from typing import BinaryIO

CHUNK_SIZE = 1024 * 1024


class FileTooLargeError(Exception):
    def __init__(self, max_bytes: int):
        super().__init__(f"File exceeds the maximum size of {max_bytes} bytes")
        self.max_bytes = max_bytes


def generate_stored_name(original_name: str) -> str:
    """Opaque unique key: millisecond timestamp, random hex, original extension"""
    extension = Path(original_name or "").suffix.lower()
    if len(extension) > 16 or not extension[1:].isalnum():
        extension = ""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(16)}{extension}"


def copy_limited(source: BinaryIO, target: BinaryIO, max_bytes: int) -> int:
    """Copy in chunks and stop as soon as more than max_bytes have been read"""
    written = 0
    while True:
        chunk = source.read(CHUNK_SIZE)
        if not chunk:
            return written
        written += len(chunk)
        if written > max_bytes:
            raise FileTooLargeError(max_bytes)
        target.write(chunk)
