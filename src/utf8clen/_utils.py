"""Internal shared utilities for utf8clen."""

from __future__ import annotations

#: Longest well-formed UTF-8 sequence, in bytes.
MAX_SEQUENCE_LENGTH: int = 4

#: U+FFFD REPLACEMENT CHARACTER, substituted for each illegal run.
REPLACEMENT_CHARACTER: str = "�"

#: UTF-8 encoding of :data:`REPLACEMENT_CHARACTER`.
REPLACEMENT_BYTES: bytes = b"\xef\xbf\xbd"


def _validate_buffer(data: object) -> None:
    """Raise TypeError if *data* is not a bytes-like buffer we can index."""
    if not isinstance(data, (bytes, bytearray)):
        msg = f"data must be bytes or bytearray, not {type(data).__name__}"
        raise TypeError(msg)


def _validate_cursor(data: bytes | bytearray, cursor: int) -> None:
    """Raise if *cursor* does not point at a byte inside *data*."""
    if isinstance(cursor, bool) or not isinstance(cursor, int):
        msg = f"cursor must be an integer, not {type(cursor).__name__}"
        raise TypeError(msg)
    if not 0 <= cursor < len(data):
        msg = f"cursor {cursor} out of range for buffer of length {len(data)}"
        raise ValueError(msg)


def _validate_replacement(replacement: object, expected: type) -> None:
    """Raise TypeError if *replacement* is not an instance of *expected*."""
    if not isinstance(replacement, expected):
        msg = (
            f"replacement must be {expected.__name__}, "
            f"not {type(replacement).__name__}"
        )
        raise TypeError(msg)
