"""Archive naming and the archive-and-rename step of a rotation."""

import logging
import os
from datetime import datetime

logger = logging.getLogger(__name__)

ARCHIVE_DIR_SUFFIX = "-log"
ARCHIVE_TIMESTAMP_FORMAT = "%Y%m%d-%H%M-%S"

_NAME_SEPARATORS = ".-+_@()"


def clean_name(name: str) -> str:
    """Cut name at the earliest first-occurrence of a separator, skipping index 0."""
    end = len(name)
    for sep in _NAME_SEPARATORS:
        i = name.find(sep)
        if 0 < i < end:
            end = i
    return name[:end]


def split_log_path(path: str) -> tuple[str, str, str]:
    """Return (directory, stem, extension) for a log file path."""
    directory = os.path.dirname(path)
    stem, ext = os.path.splitext(os.path.basename(path))
    return directory, stem, ext


def archive_dir_for(path: str) -> str:
    """Sibling directory holding the archives of ``path``, e.g. logs/app-log."""
    directory, stem, _ = split_log_path(path)
    return os.path.join(directory, clean_name(stem) + ARCHIVE_DIR_SUFFIX)


def archive_path_for(path: str, now: datetime) -> str:
    """Archive destination for ``path`` rotated at ``now``.

    Never returns an existing path: a second rotation within the same second
    gets a ``-1``, ``-2``, ... counter after the seconds field.
    """
    _, stem, ext = split_log_path(path)
    base = f"{stem}.{now.strftime(ARCHIVE_TIMESTAMP_FORMAT)}"
    xdir = archive_dir_for(path)
    candidate = os.path.join(xdir, base + ext)
    n = 0
    while os.path.exists(candidate):
        n += 1
        candidate = os.path.join(xdir, f"{base}-{n}{ext}")
    return candidate


def archive_file(path: str, now: datetime) -> str | None:
    """Move a closed log file into its archive directory.

    Best effort: directory and rename failures are logged, never raised.
    Returns the archive path, or None when the rename failed.
    """
    xdir = archive_dir_for(path)
    if not os.path.isdir(xdir):
        try:
            os.makedirs(xdir, exist_ok=True)
        except OSError as e:
            logger.warning("mkdir failed for %s: %s", xdir, e)

    archived = archive_path_for(path, now)
    try:
        os.rename(path, archived)
    except OSError as e:
        logger.error("Failed to archive %s to %s: %s", path, archived, e)
        return None
    return archived


def _split_archive_name(filename: str, path: str) -> tuple[str, int] | None:
    """Return (timestamp text, collision counter) for an archive of ``path``."""
    _, stem, ext = split_log_path(path)
    prefix = stem + "."
    if not filename.startswith(prefix):
        return None
    suffix = filename[len(prefix):]
    if ext:
        if not suffix.endswith(ext):
            return None
        suffix = suffix[:-len(ext)]
    counter = 0
    if suffix.count("-") == 3:
        suffix, raw = suffix.rsplit("-", 1)
        if not raw.isdigit():
            return None
        counter = int(raw)
    return suffix, counter


def parse_rotation_timestamp(filename: str, path: str) -> datetime | None:
    """Extract the rotation time from an archive filename. Returns None on failure."""
    parts = _split_archive_name(filename, path)
    if parts is None:
        return None
    try:
        return datetime.strptime(parts[0], ARCHIVE_TIMESTAMP_FORMAT)
    except ValueError:
        return None


def get_rotated_files(path: str) -> list[str]:
    """List archive filenames of ``path`` sorted oldest-first."""
    try:
        names = os.listdir(archive_dir_for(path))
    except OSError:
        return []
    keyed = []
    for name in names:
        if parse_rotation_timestamp(name, path) is None:
            continue
        keyed.append((_split_archive_name(name, path), name))
    keyed.sort()
    return [name for _, name in keyed]
