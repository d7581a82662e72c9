"""Header assembly for the application and access log line formats."""

from datetime import datetime

from slotlog.numfmt import itoa


def _append_timestamp(buf: bytearray, t: datetime):
    itoa(buf, t.year, 4)
    buf += b"-"
    itoa(buf, t.month, 2)
    buf += b"-"
    itoa(buf, t.day, 2)
    buf += b" "
    itoa(buf, t.hour, 2)
    buf += b":"
    itoa(buf, t.minute, 2)
    buf += b":"
    itoa(buf, t.second, 2)


def format_header(buf: bytearray, t: datetime, prefix: str, pid: int) -> None:
    """Append ``[prefix] [pid] YYYY-MM-DD HH:MM:SS `` to buf.

    An empty prefix drops the ``prefix] [`` segment, leaving ``[pid] ...``.
    """
    buf += b"["
    if prefix:
        buf += prefix.encode("utf-8", "surrogateescape")
        buf += b"] ["
    itoa(buf, pid, -1)
    buf += b"] "
    _append_timestamp(buf, t)
    buf += b" "


def format_access_header(buf: bytearray, t: datetime) -> None:
    """Append ``[YYYY-MM-DD HH:MM:SS] `` to buf."""
    buf += b"["
    _append_timestamp(buf, t)
    buf += b"] "


def terminate(buf: bytearray, message: str) -> None:
    """Append the message and a newline unless it already ends in one."""
    buf += message.encode("utf-8", "surrogateescape")
    if not message.endswith("\n"):
        buf += b"\n"
