"""Two-channel facade: leveled application log plus nginx-style access log."""

import os
import sys

from slotlog.appender import DEFAULT_BUFFER_SIZE, DEFAULT_MAX_FILE_SIZE, Appender
from slotlog.config import Config


def _safe_str(value) -> str:
    try:
        return str(value)
    except Exception as e:
        return f"%!v(PANIC={type(e).__name__})"


def _format(fmt: str, args: tuple) -> str:
    if not args:
        return fmt
    try:
        return fmt % args
    except Exception:
        return " ".join([fmt] + [_safe_str(a) for a in args])


class Slot:
    """Holds one Appender per channel and nothing else.

    Logging calls never raise: an uninitialized channel or a disabled
    appender silently drops the line.
    """

    def __init__(self, max_file_size: int = DEFAULT_MAX_FILE_SIZE,
                 buffer_size: int = DEFAULT_BUFFER_SIZE,
                 pid: int | None = None, time_func=None):
        if max_file_size <= 0:
            raise ValueError(f"rotation size must be positive, got {max_file_size}")
        self._max_file_size = max_file_size
        self._buffer_size = buffer_size
        self._pid = pid
        self._time_func = time_func
        self._app: Appender | None = None
        self._access: Appender | None = None

    @classmethod
    def from_config(cls, config: Config, **kwargs) -> "Slot":
        slot = cls(max_file_size=config.max_file_size_bytes,
                   buffer_size=config.buffer_size, **kwargs)
        slot.initialize(config.access_log_path, config.app_log_path)
        return slot

    @property
    def app_appender(self) -> Appender | None:
        return self._app

    @property
    def access_appender(self) -> Appender | None:
        return self._access

    def _new_appender(self, path: str) -> Appender:
        return Appender(path, max_file_size=self._max_file_size, pid=self._pid,
                        time_func=self._time_func, buffer_size=self._buffer_size)

    def initialize(self, access_path: str, app_path: str) -> bool:
        """(Re)create both channels. Returns True when both files are open."""
        self.close()
        self._app = self._new_appender(app_path)
        self._access = self._new_appender(access_path)
        return self._app.is_enabled() and self._access.is_enabled()

    def is_enabled(self) -> tuple[bool, bool]:
        """(application channel, access channel) health."""
        return (
            self._app is not None and self._app.is_enabled(),
            self._access is not None and self._access.is_enabled(),
        )

    def set_rotation_size(self, size: int):
        """Apply a new rotation threshold to both channels, and to later ones."""
        if size <= 0:
            raise ValueError(f"rotation size must be positive, got {size}")
        for appender in (self._app, self._access):
            if appender is not None:
                appender.resize_threshold(size)
        self._max_file_size = size

    def output(self, prefix: str, message: str) -> bool:
        if self._app is None:
            return False
        return self._app.write_with_header(prefix, message)

    def log(self, level: str, fmt: str, *args) -> bool:
        return self.output(level, _format(fmt, args))

    def debug(self, fmt: str, *args):
        self.output("DEBUG", _format(fmt, args))

    def info(self, fmt: str, *args):
        self.output("INFO", _format(fmt, args))

    def error(self, fmt: str, *args):
        self.output("ERROR", _format(fmt, args))

    def fatal(self, *args):
        """Write a ``Quit: `` line, close both channels and end the process with status 1.

        Exits the whole process even when called from a worker thread.
        """
        self.output("Quit: ", " ".join(_safe_str(a) for a in args))
        self.close()
        for stream in (sys.stdout, sys.stderr):
            if stream is not None:
                try:
                    stream.flush()
                except (OSError, ValueError):
                    pass
        os._exit(1)

    def access(self, fmt: str, *args):
        if self._access is None:
            return
        self._access.write_access(_format(fmt, args))

    def flush(self):
        for appender in (self._app, self._access):
            if appender is not None:
                appender.flush()

    def close(self):
        for appender in (self._app, self._access):
            if appender is not None:
                appender.close()
