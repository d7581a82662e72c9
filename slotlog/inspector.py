"""Inspector logic: list, read, parse and search active and archived logs."""

import os
import re
from dataclasses import dataclass
from datetime import datetime

from slotlog.rotator import archive_dir_for, get_rotated_files

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LINE_PATTERN = re.compile(
    r"^(?:\[([^\]]*)\] )?\[(\d+)\] (\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) (.*)$"
)
ACCESS_LINE_PATTERN = re.compile(
    r"^\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] (.*)$"
)


@dataclass(frozen=True)
class AppLogEntry:
    level: str
    pid: int
    timestamp: datetime
    message: str


@dataclass(frozen=True)
class AccessLogEntry:
    timestamp: datetime
    message: str


def parse_line(line: str) -> AppLogEntry | None:
    """Parse an application log line. Returns None for unparseable lines."""
    match = APP_LINE_PATTERN.match(line.rstrip("\n"))
    if not match:
        return None
    level, pid, ts, message = match.groups()
    try:
        timestamp = datetime.strptime(ts, TIMESTAMP_FORMAT)
    except ValueError:
        return None
    return AppLogEntry(level=level or "", pid=int(pid), timestamp=timestamp, message=message)


def parse_access_line(line: str) -> AccessLogEntry | None:
    """Parse an access log line. Returns None for unparseable lines."""
    match = ACCESS_LINE_PATTERN.match(line.rstrip("\n"))
    if not match:
        return None
    ts, message = match.groups()
    try:
        timestamp = datetime.strptime(ts, TIMESTAMP_FORMAT)
    except ValueError:
        return None
    return AccessLogEntry(timestamp=timestamp, message=message)


def list_log_files(path: str) -> list[str]:
    """Archives of ``path`` oldest-first, then the active file if present."""
    xdir = archive_dir_for(path)
    files = [os.path.join(xdir, name) for name in get_rotated_files(path)]
    if os.path.exists(path):
        files.append(path)
    return files


def read_file(path: str) -> str:
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def search_files(path: str, text: str) -> list[tuple[str, int, str]]:
    """Search for text across a log and its archives. Returns (filename, line_num, line) tuples."""
    results = []
    for filepath in list_log_files(path):
        try:
            with open(filepath, "r", encoding="utf-8", errors="replace") as f:
                for line_num, line in enumerate(f, 1):
                    if text in line:
                        results.append((os.path.basename(filepath), line_num, line.rstrip("\n")))
        except OSError:
            continue
    return results
