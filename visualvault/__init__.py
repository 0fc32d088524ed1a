"""Media file organizer core: media records, duplicate detection, a file cache and filter parsing."""

__version__ = "0.7.0"

__all__ = ["media", "duplicates", "file_cache", "filter_input"]