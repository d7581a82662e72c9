"""Size-rotating, buffered, thread-safe line appender for a single log file."""

import logging
import os
import threading
from datetime import datetime

from slotlog.formatter import format_access_header, format_header, terminate
from slotlog.rotator import archive_file

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 100 * 1024 * 1024  # 100 MiB
DEFAULT_BUFFER_SIZE = 8192
FILE_MODE = 0o644


class Appender:
    """Appends lines to ``path`` and rotates it once it reaches the threshold.

    The threshold is checked before a write is counted, so the write that
    crosses it still lands in the current file and the next one rotates.
    A failed open leaves the appender disabled: every write is dropped until
    an explicit ``rotate()`` manages to reopen the file.
    """

    def __init__(self, path: str, max_file_size: int = DEFAULT_MAX_FILE_SIZE,
                 pid: int | None = None, time_func=None,
                 buffer_size: int = DEFAULT_BUFFER_SIZE):
        if max_file_size <= 0:
            raise ValueError(f"rotation size must be positive, got {max_file_size}")
        self._path = path
        self._max_file_size = max_file_size
        self._pid = os.getpid() if pid is None else pid
        self._time_func = time_func or datetime.now
        self._buffer_size = buffer_size
        self._lock = threading.Lock()
        self._file = None
        self._written = 0
        self._buf = bytearray()

        # An oversized leftover from a previous run is archived, not extended.
        try:
            existing = os.path.getsize(path)
        except OSError:
            existing = None
        if existing is not None and existing >= max_file_size:
            self._rotate()
        else:
            self._open()

    @property
    def path(self) -> str:
        return self._path

    @property
    def pid(self) -> int:
        return self._pid

    @property
    def threshold_bytes(self) -> int:
        return self._max_file_size

    @property
    def written_bytes(self) -> int:
        return self._written

    def is_enabled(self) -> bool:
        """True while the appender holds an open file."""
        return self._file is not None

    def _open(self):
        self._file = None
        try:
            fd = os.open(self._path, os.O_CREAT | os.O_APPEND | os.O_RDWR, FILE_MODE)
        except OSError as e:
            logger.error("Cannot open %s, appender disabled: %s", self._path, e)
            return
        self._file = os.fdopen(fd, "ab", buffering=self._buffer_size)

    def _close_file(self):
        if self._file is None:
            return
        try:
            self._file.close()
        except OSError as e:
            logger.error("Failed to flush %s on close: %s", self._path, e)
        self._file = None

    def _rotate(self) -> str | None:
        """Close, archive and reopen. Must be called with self._lock held."""
        self._close_file()
        archived = archive_file(self._path, self._time_func())
        self._written = 0
        self._open()
        if archived:
            logger.info("Rotated %s to %s", self._path, archived)
        return archived

    def _write_locked(self, data) -> bool:
        if self._written >= self._max_file_size:
            self._rotate()
            if self._file is None:
                return False
        try:
            self._file.write(data)
        except OSError as e:
            logger.error("Write to %s failed, dropped %d bytes: %s", self._path, len(data), e)
            return False
        self._written += len(data)
        return True

    def write(self, raw: str | bytes) -> bool:
        """Append raw text as is. Returns False when the line was dropped."""
        data = raw.encode("utf-8", "surrogateescape") if isinstance(raw, str) else raw
        with self._lock:
            if self._file is None:
                return False
            return self._write_locked(data)

    def write_with_header(self, prefix: str, message: str) -> bool:
        """Append ``[prefix] [pid] YYYY-MM-DD HH:MM:SS message``."""
        now = self._time_func()
        with self._lock:
            if self._file is None:
                return False
            buf = self._buf
            buf.clear()
            format_header(buf, now, prefix, self._pid)
            terminate(buf, message)
            return self._write_locked(buf)

    def write_access(self, message: str) -> bool:
        """Append ``[YYYY-MM-DD HH:MM:SS] message``."""
        now = self._time_func()
        with self._lock:
            if self._file is None:
                return False
            buf = self._buf
            buf.clear()
            format_access_header(buf, now)
            terminate(buf, message)
            return self._write_locked(buf)

    def rotate(self) -> str | None:
        """Force a rotation. Returns the archive path, None if archiving failed."""
        with self._lock:
            return self._rotate()

    def resize_threshold(self, max_file_size: int):
        if max_file_size <= 0:
            raise ValueError(f"rotation size must be positive, got {max_file_size}")
        with self._lock:
            self._max_file_size = max_file_size

    def flush(self):
        with self._lock:
            if self._file is None:
                return
            try:
                self._file.flush()
            except OSError as e:
                logger.error("Failed to flush %s: %s", self._path, e)

    def close(self):
        with self._lock:
            self._close_file()
