# visualvault

This package provides building blocks for organizing photo and video
collections. It covers four jobs:

- media file records and image metadata
- finding and deleting duplicate files
- a cache of per-file data that persists between scans
- parsing the text a user types in as a date or size filter

## Installation

```
pip install visualvault
```

To run the tests, install the `test` extra:

```
pip install "visualvault[test]"
pytest
```

## Media files

`visualvault.media` defines these types:

- `FileType`, an enum with the members `IMAGE`, `VIDEO`, `DOCUMENT` and `OTHER`.
- `ImageMetadata`, which holds `width`, `height`, `format` and `color_type`.
- `MediaFile`, a frozen record of a scanned file. Its fields are `path`, `name`,
  `extension`, `file_type`, `size`, `created`, `modified`, and the optional
  `hash` and `metadata`.
- `FileManager`, which holds the current list of files. `set_files(files)`
  replaces the list. `get_files()` returns it as a tuple, and repeated calls
  return the same object. `len(manager)` gives the number of files.

`load_image_metadata(path)` decodes an image with Pillow and returns its size
and colour type. The format is the file's extension in upper case, or
`"Unknown"` when the file has no extension. It raises `OSError` when the file
cannot be read or is not an image.

```python
from visualvault.media import load_image_metadata

meta = load_image_metadata("holiday.png")
print(meta.width, meta.height, meta.format, meta.color_type)  # e.g. 640 480 PNG RGB 8-bit
```

## Duplicates

```python
from visualvault.duplicates import DuplicateDetector, file_hash, quick_hash

detector = DuplicateDetector()
stats = detector.detect_duplicates(files, use_quick_hash=False)
print(stats.total_groups, stats.total_duplicates, stats.total_wasted_space)
for group in stats.groups:          # largest wasted space first
    print(group.wasted_space, [f.path for f in group.files])

removed = detector.delete_files([group.files[1].path for group in stats.groups])
```

Files are first grouped by size, and only files that share a size are hashed.
A file that cannot be read is skipped with a logged warning.

- `file_hash(path)` returns the hex SHA-256 of the whole file.
- `quick_hash(path, size)` hashes the size, the first 4 KiB and, for files
  larger than 8 KiB, the last 4 KiB. For a size of 0 it returns `"empty"`.
- `delete_files(paths)` keeps going after a failure. It returns the paths it
  removed, as `Path` objects.

## File cache

`visualvault.file_cache.FileCache` maps file paths to `CacheEntry` records. It
stores them as JSON in `visualvault/file_cache.json` under a cache directory.
`cache_path(cache_dir)` gives that file's location. If no directory is given,
the user cache directory from `platformdirs` is used.

```python
from visualvault.file_cache import CacheEntry, FileCache

cache = FileCache.load()                      # empty if missing or of another version
cache.insert(media.path, CacheEntry.from_media_file(media))
entry = cache.get(media.path, media.size, media.modified)
cache.remove_stale_entries()                  # returns the dropped paths
cache.save()                                  # returns the file written
```

- `get` returns an entry only when both the size and the modification time
  still match.
- `CacheEntry.to_media_file(file_type, created)` rebuilds a `MediaFile` from an
  entry.
- `load` raises `ValueError` for a file that is not valid cache JSON.

## Filter input

`visualvault.filter_input` parses filter text. Each parser raises `ValueError`
when it cannot make sense of the input. The messages `DATE_FORMAT_HELP` and
`SIZE_FORMAT_HELP` describe the accepted forms.

- `parse_date_range(text, now=None)` returns `(start, end)` datetimes. It
  accepts these forms:
  - `today` and `yesterday`
  - `last 7 days`, `last week`, `last 30 days`, `last month`, `last year` and
    `last 365 days`
  - `YYYY-MM-DD to YYYY-MM-DD`. Either side may be invalid, and that side
    becomes `None`.
  - a single `YYYY-MM-DD`

  Whole days run from 00:00:00 to 23:59:59 in the time zone of `now`.
- `parse_size_range(text)` accepts `>SIZE`, `<SIZE` and `SIZE-SIZE`. It returns
  `(min, max)` in megabytes, with `None` for an open end.
- `parse_size(text)` parses one size with a unit of `tb`, `gb`, `mb`, `kb` or
  `b`, in any case. A number with no unit is taken as megabytes.

```python
from visualvault.filter_input import parse_size_range

parse_size_range(">10MB")        # (10.0, None)
parse_size_range("1gb-2gb")      # (1024.0, 2048.0)
```

## What this package does not do

The package has no command-line program and no terminal interface. It does not
store user settings or a configuration file. It does not walk folders to scan
or to gather folder statistics, and it does not move or rename files into an
organized layout. Callers build the `MediaFile` records themselves and decide
what to do with the results.