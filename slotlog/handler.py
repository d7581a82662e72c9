"""logging.Handler that writes records through an application-log Appender."""

import logging

from slotlog.appender import Appender


class AppenderHandler(logging.Handler):
    """Routes stdlib log records into a rotating application log.

    The record's level name becomes the header prefix; the appender header
    already carries pid and time, so only the message part of the formatter
    output is written.
    """

    def __init__(self, appender: Appender, level=logging.NOTSET):
        super().__init__(level)
        self.appender = appender

    def emit(self, record: logging.LogRecord):
        # Appender diagnostics are logged while its lock is held.
        if record.name.startswith("slotlog."):
            return
        try:
            msg = self.format(record)
            self.appender.write_with_header(record.levelname, msg)
        except Exception:
            self.handleError(record)

    def flush(self):
        self.appender.flush()
