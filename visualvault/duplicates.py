"""Detection and removal of duplicate media files by content hash."""

from __future__ import annotations

import hashlib
import logging
import os
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path

from visualvault.media import MediaFile

logger = logging.getLogger(__name__)

_READ_CHUNK = 65536
_QUICK_CHUNK = 4096
_QUICK_TAIL_THRESHOLD = 8192


@dataclass
class DuplicateGroup:
    """Files sharing the same content; all but one are wasted space."""

    files: list[MediaFile]
    wasted_space: int


@dataclass
class DuplicateStats:
    """Summary of a duplicate scan, groups ordered by wasted space (largest first)."""

    groups: list[DuplicateGroup] = field(default_factory=list)
    total_groups: int = 0
    total_duplicates: int = 0
    total_wasted_space: int = 0

    def __len__(self) -> int:
        return len(self.groups)


def file_hash(path: str | os.PathLike[str]) -> str:
    """Return the hex SHA-256 digest of the whole file."""
    hasher = hashlib.sha256()
    with open(path, "rb") as fh:
        while chunk := fh.read(_READ_CHUNK):
            hasher.update(chunk)
    return hasher.hexdigest()


def quick_hash(path: str | os.PathLike[str], size: int) -> str:
    """Hash the size plus the first and (for large files) last 4 KiB of a file.

    An empty file yields the literal ``"empty"`` without being opened.
    """
    if size == 0:
        return "empty"
    hasher = hashlib.sha256()
    hasher.update(size.to_bytes(8, "little"))
    with open(path, "rb") as fh:
        hasher.update(fh.read(_QUICK_CHUNK))
        if size > _QUICK_TAIL_THRESHOLD:
            fh.seek(-_QUICK_CHUNK, os.SEEK_END)
            hasher.update(fh.read(_QUICK_CHUNK))
    return hasher.hexdigest()


class DuplicateDetector:
    """Finds files with identical content and deletes chosen copies."""

    def detect_duplicates(
        self, files: Iterable[MediaFile], use_quick_hash: bool = False
    ) -> DuplicateStats:
        """Group files by size, then by hash, and report the duplicate groups.

        Files that cannot be read are skipped with a warning.
        """
        files = list(files)
        logger.info("Starting duplicate detection for %d files", len(files))

        by_size: dict[int, list[MediaFile]] = defaultdict(list)
        for media in files:
            by_size[media.size].append(media)
        candidates = {size: group for size, group in by_size.items() if len(group) > 1}
        logger.info("Found %d size groups with potential duplicates", len(candidates))

        by_hash: dict[str, list[MediaFile]] = defaultdict(list)
        for size, group in candidates.items():
            for media in group:
                hashed = self._with_hash(media, size, use_quick_hash)
                if hashed is not None:
                    by_hash[hashed.hash].append(hashed)

        stats = self._build_stats(by_hash.values())
        logger.info(
            "Found %d duplicate groups with %d total duplicates wasting %d bytes",
            stats.total_groups,
            stats.total_duplicates,
            stats.total_wasted_space,
        )
        return stats

    @staticmethod
    def _with_hash(media: MediaFile, size: int, use_quick_hash: bool) -> MediaFile | None:
        try:
            digest = quick_hash(media.path, size) if use_quick_hash else file_hash(media.path)
        except OSError as exc:
            logger.warning("Failed to hash file %s: %s", media.path, exc)
            return None
        return replace(media, hash=digest)

    @staticmethod
    def _build_stats(hash_groups: Iterable[list[MediaFile]]) -> DuplicateStats:
        groups = [
            DuplicateGroup(files=group, wasted_space=group[0].size * (len(group) - 1))
            for group in hash_groups
            if len(group) > 1
        ]
        groups.sort(key=lambda g: g.wasted_space, reverse=True)
        return DuplicateStats(
            groups=groups,
            total_groups=len(groups),
            total_duplicates=sum(len(g.files) - 1 for g in groups),
            total_wasted_space=sum(g.wasted_space for g in groups),
        )

    def delete_files(self, paths: Sequence[str | os.PathLike[str]]) -> list[Path]:
        """Delete each path, continuing past failures; return the ones removed."""
        deleted: list[Path] = []
        for raw in paths:
            path = Path(raw)
            try:
                path.unlink()
            except OSError as exc:
                logger.warning("Failed to delete file %s: %s", path, exc)
                continue
            logger.info("Deleted file: %s", path)
            deleted.append(path)
        return deleted