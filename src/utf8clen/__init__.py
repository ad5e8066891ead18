"""Table-driven UTF-8 sequence classification."""

from __future__ import annotations

from utf8clen._utils import (
    MAX_SEQUENCE_LENGTH,
    REPLACEMENT_BYTES,
    REPLACEMENT_CHARACTER,
)
from utf8clen.classifier import (
    classify,
    is_continuation_byte,
    is_lead_byte,
    utf8clen,
)
from utf8clen.results import Classification, Invalid, Valid
from utf8clen.scanner import Segment, decode, is_valid_utf8, iter_segments, sanitize

__version__ = "1.0.0"
__all__ = [
    "MAX_SEQUENCE_LENGTH",
    "REPLACEMENT_BYTES",
    "REPLACEMENT_CHARACTER",
    "Classification",
    "Invalid",
    "Segment",
    "Valid",
    "classify",
    "decode",
    "is_continuation_byte",
    "is_lead_byte",
    "is_valid_utf8",
    "iter_segments",
    "sanitize",
    "utf8clen",
]
