"""Persistent cache of per-file scan data, keyed by path."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar

import platformdirs

from visualvault.media import FileType, ImageMetadata, MediaFile

logger = logging.getLogger(__name__)

APP_DIR_NAME = "visualvault"
CACHE_FILE_NAME = "file_cache.json"


def cache_path(cache_dir: str | os.PathLike[str] | None = None) -> Path:
    """Return the cache file location under the given cache directory."""
    base = Path(cache_dir) if cache_dir is not None else platformdirs.user_cache_path()
    return base / APP_DIR_NAME / CACHE_FILE_NAME


@dataclass
class CacheEntry:
    """What is remembered about a file between scans."""

    path: Path
    name: str
    extension: str
    size: int
    modified: datetime
    hash: str | None = None
    metadata: ImageMetadata | None = None

    @classmethod
    def from_media_file(cls, file: MediaFile) -> CacheEntry:
        """Build an entry from a scanned file."""
        return cls(
            path=Path(file.path),
            name=file.name,
            extension=file.extension,
            size=file.size,
            modified=file.modified,
            hash=file.hash,
            metadata=file.metadata,
        )

    def to_media_file(self, file_type: FileType, created: datetime) -> MediaFile:
        """Rebuild a media file record from this entry."""
        return MediaFile(
            path=self.path,
            name=self.name,
            extension=self.extension,
            file_type=file_type,
            size=self.size,
            created=created,
            modified=self.modified,
            hash=self.hash,
            metadata=self.metadata,
        )

    def _to_json(self) -> dict[str, Any]:
        metadata = None
        if self.metadata is not None:
            metadata = {
                "width": self.metadata.width,
                "height": self.metadata.height,
                "format": self.metadata.format,
                "color_type": self.metadata.color_type,
            }
        return {
            "path": str(self.path),
            "name": self.name,
            "extension": self.extension,
            "size": self.size,
            "modified": self.modified.isoformat(),
            "hash": self.hash,
            "metadata": metadata,
        }

    @classmethod
    def _from_json(cls, data: Any) -> CacheEntry:
        if not isinstance(data, dict):
            raise ValueError("cache entry must be an object")
        try:
            raw_meta = data.get("metadata")
            metadata = None
            if raw_meta is not None:
                metadata = ImageMetadata(
                    width=int(raw_meta["width"]),
                    height=int(raw_meta["height"]),
                    format=str(raw_meta["format"]),
                    color_type=str(raw_meta["color_type"]),
                )
            return cls(
                path=Path(data["path"]),
                name=str(data["name"]),
                extension=str(data["extension"]),
                size=int(data["size"]),
                modified=datetime.fromisoformat(data["modified"]),
                hash=data.get("hash"),
                metadata=metadata,
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed cache entry: {exc}") from exc


@dataclass
class FileCache:
    """Cache entries keyed by file path, versioned for on-disk compatibility."""

    CURRENT_VERSION: ClassVar[int] = 1

    entries: dict[Path, CacheEntry] = field(default_factory=dict)
    version: int = 1

    @classmethod
    def load(cls, cache_dir: str | os.PathLike[str] | None = None) -> FileCache:
        """Read the cache from disk.

        A missing file or a file of another version yields an empty cache;
        a file that is not valid cache JSON raises ``ValueError``.
        """
        path = cache_path(cache_dir)
        if not path.exists():
            return cls()
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict) or "version" not in data or "entries" not in data:
            raise ValueError("malformed cache file")
        if data["version"] != cls.CURRENT_VERSION:
            logger.info("Cache version mismatch, creating new cache")
            return cls()
        raw_entries = data["entries"]
        if not isinstance(raw_entries, dict):
            raise ValueError("cache entries must be an object")
        entries = {Path(key): CacheEntry._from_json(value) for key, value in raw_entries.items()}
        return cls(entries=entries, version=data["version"])

    def save(self, cache_dir: str | os.PathLike[str] | None = None) -> Path:
        """Write the cache to disk, creating its directory if needed."""
        path = cache_path(cache_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        document = {
            "entries": {str(key): entry._to_json() for key, entry in self.entries.items()},
            "version": self.version,
        }
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    def get(self, path: str | os.PathLike[str], size: int, modified: datetime) -> CacheEntry | None:
        """Return the entry for ``path`` if its size and modification time still match."""
        entry = self.entries.get(Path(path))
        if entry is not None and entry.size == size and entry.modified == modified:
            return entry
        return None

    def insert(self, path: str | os.PathLike[str], entry: CacheEntry) -> None:
        """Store ``entry`` under ``path``, replacing any previous one."""
        self.entries[Path(path)] = entry

    def remove_stale_entries(self) -> list[Path]:
        """Drop entries whose files no longer exist; return the dropped paths."""
        stale = [path for path in self.entries if not path.exists()]
        for path in stale:
            del self.entries[path]
            logger.debug("Removed stale cache entry: %s", path)
        return stale

    def __len__(self) -> int:
        return len(self.entries)