# ============================================================================
# FILE: audioryx/core/storage.py
# ============================================================================
"""
Local filesystem blob store for uploaded audio.

Blobs are addressed only by their generated storage name; the store never
interprets the bytes it keeps.
"""
import os
import re
import time
import uuid
import logging
from pathlib import Path
from audioryx.core.errors import PersistenceFailure

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_SAFE_NAME = re.compile(r"[A-Za-z0-9_-][A-Za-z0-9._-]*")

# Leaves room for the storage prefix under the common 255-byte name limit
MAX_NAME_LENGTH = 200
MAX_EXTENSION_LENGTH = 16

def sanitize_filename(filename: str) -> str:
    """
    Reduce a client-supplied filename to a single safe path component.

    Directory parts are dropped (both separators), whitespace runs become
    underscores and anything outside [A-Za-z0-9._-] is replaced. Long names
    are cut to MAX_NAME_LENGTH, keeping a short extension.
    """
    name = (filename or "").replace("\\", "/").split("/")[-1]
    name = _WHITESPACE.sub("_", name.strip())
    name = _UNSAFE_CHARS.sub("_", name)
    name = name.lstrip(".")
    if len(name) > MAX_NAME_LENGTH:
        stem, ext = os.path.splitext(name)
        if len(ext) > MAX_EXTENSION_LENGTH:
            stem, ext = name, ""
        name = stem[:MAX_NAME_LENGTH - len(ext)] + ext
    return name or "upload"

def make_storage_name(filename: str) -> str:
    """Epoch-millisecond prefix plus a random tag, then the sanitized name"""
    stamp = int(time.time() * 1000)
    return f"{stamp}-{uuid.uuid4().hex[:8]}-{sanitize_filename(filename)}"

def title_from_filename(filename: str) -> str:
    """Original basename without its last extension"""
    base = (filename or "").replace("\\", "/").split("/")[-1]
    stem, _ext = os.path.splitext(base)
    return stem or base

class LocalUploadStore:
    """Append-only directory of uploaded files"""

    def __init__(self, directory: str, url_prefix: str = "/uploads"):
        self.directory = Path(directory).expanduser().absolute()
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, storage_name: str) -> Path:
        if not _SAFE_NAME.fullmatch(storage_name or ""):
            raise ValueError(f"Unsafe storage name: {storage_name!r}")
        return self.directory / storage_name

    def url_for(self, storage_name: str) -> str:
        return f"{self.url_prefix}/{storage_name}"

    def save(self, storage_name: str, content: bytes) -> Path:
        """Write a new blob. Existing files are never overwritten."""
        path = self.path_for(storage_name)
        try:
            self.ensure_directory()
            with open(path, "xb") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Error storing upload {storage_name}: {e}")
            raise PersistenceFailure() from e
        logger.info(f"Stored upload {storage_name} ({len(content)} bytes)")
        return path

    def delete(self, storage_name: str) -> None:
        """Remove a blob whose track row could not be recorded"""
        try:
            self.path_for(storage_name).unlink()
        except FileNotFoundError:
            pass
