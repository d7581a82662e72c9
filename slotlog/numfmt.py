"""Integer to fixed-width decimal ASCII, appended in place to a bytearray."""


def itoa(buf: bytearray, value: int, width: int) -> None:
    """Append the decimal digits of ``value`` to ``buf``.

    A positive ``width`` zero-pads to that many digits; zero or negative means
    no padding. Wider numbers are never truncated.
    """
    if value < 0:
        raise ValueError(f"itoa expects a non-negative value, got {value}")
    if width > 0:
        buf += b"%0*d" % (width, value)
    else:
        buf += b"%d" % value
