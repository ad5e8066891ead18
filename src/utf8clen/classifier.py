"""UTF-8 code point classification.

Implements Table 3-7 of the Unicode Core Specification ("Well-Formed UTF-8
Byte Sequences") for a single position in a byte buffer.  Every lead byte
maps to a sequence length and the range its second byte must fall in; that
range is what excludes overlong forms, UTF-16 surrogates and code points
above U+10FFFF.  The remaining bytes are plain continuation bytes.
"""

from __future__ import annotations

from utf8clen._utils import MAX_SEQUENCE_LENGTH, _validate_buffer, _validate_cursor
from utf8clen.results import Classification, Invalid, Valid

# Lead byte ranges: (first, last, sequence length, second byte low, high).
_SEQUENCE_RANGES: tuple[tuple[int, int, int, int, int], ...] = (
    (0xC2, 0xDF, 2, 0x80, 0xBF),
    (0xE0, 0xE0, 3, 0xA0, 0xBF),  # overlong 3-byte forms
    (0xE1, 0xEC, 3, 0x80, 0xBF),
    (0xED, 0xED, 3, 0x80, 0x9F),  # U+D800-U+DFFF
    (0xEE, 0xEF, 3, 0x80, 0xBF),
    (0xF0, 0xF0, 4, 0x90, 0xBF),  # overlong 4-byte forms
    (0xF1, 0xF3, 4, 0x80, 0xBF),
    (0xF4, 0xF4, 4, 0x80, 0x8F),  # above U+10FFFF
)

# Stand-in for a byte past the end of the buffer.  Matches no byte range.
_ABSENT = -1


def _build_rules() -> tuple[tuple[int, int, int] | None, ...]:
    rules: list[tuple[int, int, int] | None] = [None] * 256
    for first, last, length, low, high in _SEQUENCE_RANGES:
        for byte in range(first, last + 1):
            rules[byte] = (length, low, high)
    return tuple(rules)


#: Indexed by byte value; ``None`` for ASCII and for bytes that never lead.
_RULES: tuple[tuple[int, int, int] | None, ...] = _build_rules()

#: Bytes that may start a well-formed sequence (ASCII included).
_LEAD_BYTES: frozenset[int] = frozenset(
    [*range(0x80), *(b for b, rule in enumerate(_RULES) if rule is not None)]
)

_VALID: tuple[Valid, ...] = tuple(Valid(n) for n in range(MAX_SEQUENCE_LENGTH + 1))


def is_lead_byte(byte: int) -> bool:
    """Return True if *byte* can start a well-formed UTF-8 sequence.

    That is ASCII (0x00-0x7F) or one of the multi-byte leads 0xC2-0xF4.
    """
    return byte in _LEAD_BYTES


def is_continuation_byte(byte: int) -> bool:
    """Return True if *byte* matches the bit pattern ``10xxxxxx``."""
    return 0x80 <= byte <= 0xBF


def _byte_at(data: bytes | bytearray, pos: int) -> int:
    return data[pos] if pos < len(data) else _ABSENT


def _illegal_run_length(data: bytes | bytearray, cursor: int, cap: int | None) -> int:
    """Count the bytes of the illegal run that starts at *cursor*.

    The run grows until the next byte that could start a fresh sequence,
    the end of *data*, or *cap* bytes, whichever comes first.  ``None``
    means no cap.
    """
    stop = len(data) if cap is None else min(len(data), cursor + cap)
    pos = cursor + 1
    while pos < stop and data[pos] not in _LEAD_BYTES:
        pos += 1
    return pos - cursor


def _classify(data: bytes | bytearray, cursor: int) -> Classification:
    byte = data[cursor]
    if byte < 0x80:
        return _VALID[1]

    rule = _RULES[byte]
    if rule is None:
        # 0x80-0xC1 and 0xF5-0xFF never start a sequence.
        return Invalid(_illegal_run_length(data, cursor, None))

    length, low, high = rule
    if low <= _byte_at(data, cursor + 1) <= high and all(
        is_continuation_byte(_byte_at(data, cursor + i)) for i in range(2, length)
    ):
        return _VALID[length]
    return Invalid(_illegal_run_length(data, cursor, length))


def classify(data: bytes | bytearray, cursor: int = 0) -> Classification:
    """Classify the UTF-8 sequence that starts at *cursor*.

    Only ``data[cursor:cursor + 4]`` is examined, and nothing past the end
    of *data* is ever read; a sequence cut off by the end of the buffer is
    malformed.  A NUL byte is ordinary ASCII.

    :param data: The buffer to examine.
    :param cursor: Offset of the first byte of the sequence.
    :returns: :class:`Valid` with the sequence length (1-4), or
        :class:`Invalid` with the length of the illegal run to skip.
    :raises TypeError: If *data* is not ``bytes``/``bytearray`` or *cursor*
        is not an integer.
    :raises ValueError: If *cursor* is not inside *data*.
    """
    _validate_buffer(data)
    _validate_cursor(data, cursor)
    return _classify(data, cursor)


def utf8clen(data: bytes | bytearray, cursor: int = 0) -> tuple[int, int]:
    """Return the ``(len, illlen)`` pair for the sequence at *cursor*.

    *len* is the sequence length when it is well-formed and 0 otherwise;
    *illlen* is the illegal run length when it is malformed and 0 otherwise.
    """
    return classify(data, cursor).to_tuple()
