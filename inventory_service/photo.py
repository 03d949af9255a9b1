"""Photo storage on the local cache directory. Swap this module to use cloud storage later."""
import logging
import time
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from inventory_service.errors import PhotoNotFound

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "image/jpeg"

EXT_TO_CONTENT_TYPE = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".bmp": "image/bmp",
    ".heic": "image/heic",
    ".heif": "image/heif",
    ".svg": "image/svg+xml",
}


def make_filename(original_filename: Optional[str], field: str = "photo") -> str:
    """Build ``{field}-{millis}-{random}{ext}``, unique enough for one cache dir."""
    ext = Path(original_filename).suffix.lower() if original_filename else ""
    millis = int(time.time() * 1000)
    return f"{field}-{millis}-{uuid.uuid4().hex[:12]}{ext}"


class PhotoStorage:
    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = Path(cache_dir).resolve()
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def save(self, content: bytes, original_filename: Optional[str], field: str = "photo") -> str:
        """Write the bytes into the cache dir and return the stored filename."""
        filename = make_filename(original_filename, field)
        dest = self.cache_dir / filename
        dest.write_bytes(content)
        logger.debug("Stored %d bytes as %s", len(content), dest)
        return filename

    async def save_upload(self, file: UploadFile, field: str = "photo") -> str:
        content = await file.read()
        return self.save(content, file.filename, field)

    def path_for(self, filename: Optional[str]) -> Path:
        if not filename:
            raise PhotoNotFound()
        path = (self.cache_dir / filename).resolve()
        if path.parent != self.cache_dir or not path.is_file():
            logger.warning("Photo file %s is missing from %s", filename, self.cache_dir)
            raise PhotoNotFound("File missing")
        return path

    def read(self, filename: Optional[str]) -> bytes:
        return self.path_for(filename).read_bytes()

    def discard(self, filename: Optional[str]) -> bool:
        if not filename:
            return False
        path = self.cache_dir / filename
        if path.parent.resolve() != self.cache_dir or not path.is_file():
            return False
        path.unlink()
        logger.info("Removed photo file %s", filename)
        return True

    @staticmethod
    def content_type(filename: str) -> str:
        return EXT_TO_CONTENT_TYPE.get(Path(filename).suffix.lower(), DEFAULT_CONTENT_TYPE)
