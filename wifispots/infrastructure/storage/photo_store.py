from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".bmp"}


class LocalPhotoStore:
    """Copies picked images into the application's image directory."""

    def __init__(self, images_dir: str | Path = "images"):
        self.images_dir = Path(images_dir)

    def store(self, source_path: str | None) -> str:
        if not source_path:
            return ""
        src = Path(source_path)
        if not src.is_file():
            return ""
        if src.suffix.lower() not in IMAGE_SUFFIXES:
            return ""

        self.images_dir.mkdir(parents=True, exist_ok=True)
        dest = self.images_dir / f"{uuid.uuid4()}{src.suffix}"
        shutil.copyfile(src, dest)
        logger.info(f"Stored photo {src.name} -> {dest}")
        return str(dest.resolve())
