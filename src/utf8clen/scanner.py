"""Walk a buffer one sequence at a time and repair illegal runs."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator

from utf8clen._utils import (
    REPLACEMENT_BYTES,
    REPLACEMENT_CHARACTER,
    _validate_buffer,
    _validate_replacement,
)
from utf8clen.classifier import _classify
from utf8clen.results import Valid

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Segment:
    """One step of a scan: a well-formed sequence or an illegal run."""

    offset: int
    length: int
    valid: bool

    @property
    def end(self) -> int:
        return self.offset + self.length


def iter_segments(data: bytes | bytearray) -> Iterator[Segment]:
    """Yield the segments of *data* from start to end.

    Each well-formed sequence is one segment, and so is each illegal run.
    Segments are contiguous and together cover *data* exactly.

    :param data: The buffer to scan.
    :raises TypeError: If *data* is not ``bytes``/``bytearray``.
    """
    _validate_buffer(data)
    debug = logger.isEnabledFor(logging.DEBUG)
    pos = 0
    length = len(data)
    while pos < length:
        result = _classify(data, pos)
        if isinstance(result, Valid):
            yield Segment(pos, result.length, True)
            pos += result.length
            continue
        if debug:
            logger.debug(
                "illegal sequence at offset %d: %d byte(s) %s",
                pos,
                result.illegal_length,
                bytes(data[pos : pos + result.illegal_length]).hex(" "),
            )
        yield Segment(pos, result.illegal_length, False)
        pos += result.illegal_length


def is_valid_utf8(data: bytes | bytearray) -> bool:
    """Return True if *data* contains no illegal runs."""
    return all(segment.valid for segment in iter_segments(data))


def sanitize(
    data: bytes | bytearray, replacement: bytes = REPLACEMENT_BYTES
) -> bytes:
    """Return *data* with every illegal run replaced by *replacement*.

    Each run is replaced once, however many bytes it spans.  Well-formed
    input comes back unchanged.
    """
    _validate_replacement(replacement, bytes)
    out = bytearray()
    for segment in iter_segments(data):
        if segment.valid:
            out += data[segment.offset : segment.end]
        else:
            out += replacement
    return bytes(out)


def decode(data: bytes | bytearray, replacement: str = REPLACEMENT_CHARACTER) -> str:
    """Decode *data* as UTF-8, substituting *replacement* for each illegal run."""
    _validate_replacement(replacement, str)
    parts: list[str] = []
    for segment in iter_segments(data):
        if segment.valid:
            parts.append(data[segment.offset : segment.end].decode("utf-8"))
        else:
            parts.append(replacement)
    return "".join(parts)
