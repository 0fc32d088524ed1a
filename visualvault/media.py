"""Media file records, the in-memory file list and image metadata loading."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from PIL import Image

_COLOR_DESCRIPTIONS = {
    "1": "Grayscale 8-bit",
    "L": "Grayscale 8-bit",
    "LA": "Grayscale + Alpha 8-bit",
    "RGB": "RGB 8-bit",
    "RGBA": "RGBA 8-bit",
    "I;16": "Grayscale 16-bit",
    "I;16L": "Grayscale 16-bit",
    "I;16B": "Grayscale 16-bit",
    "I;16N": "Grayscale 16-bit",
}


class FileType(Enum):
    """Broad category of a media file."""

    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"
    OTHER = "other"


@dataclass(frozen=True)
class ImageMetadata:
    """Dimensions, format and colour layout of an image."""

    width: int
    height: int
    format: str
    color_type: str


@dataclass(frozen=True)
class MediaFile:
    """A file found during a scan."""

    path: Path
    name: str
    extension: str
    file_type: FileType
    size: int
    created: datetime
    modified: datetime
    hash: str | None = None
    metadata: ImageMetadata | None = None


class FileManager:
    """Holds the current list of scanned files as a shared, immutable sequence."""

    def __init__(self) -> None:
        self._files: tuple[MediaFile, ...] = ()

    def set_files(self, files) -> None:
        """Replace the held files with the given ones."""
        self._files = tuple(files)

    def get_files(self) -> tuple[MediaFile, ...]:
        """Return the held files; repeated calls return the same object."""
        return self._files

    def __len__(self) -> int:
        return len(self._files)


def _describe_color(img: Image.Image) -> str:
    if img.mode == "P":
        return "RGBA 8-bit" if "transparency" in img.info else "RGB 8-bit"
    return _COLOR_DESCRIPTIONS.get(img.mode, "Unknown")


def load_image_metadata(path: str | os.PathLike[str]) -> ImageMetadata:
    """Decode the image at ``path`` and describe it.

    Raises ``OSError`` if the file cannot be read, and
    ``PIL.UnidentifiedImageError`` (an ``OSError``) if it is not a valid image.
    """
    path = Path(path)
    data = path.read_bytes()
    with Image.open(io.BytesIO(data)) as img:
        img.load()
        width, height = img.size
        color_type = _describe_color(img)
    extension = path.suffix[1:]
    image_format = extension.upper() if extension else "Unknown"
    return ImageMetadata(width=width, height=height, format=image_format, color_type=color_type)