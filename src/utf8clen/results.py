"""Classification result types."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class Valid:
    """A well-formed UTF-8 sequence of *length* bytes (1-4)."""

    length: int

    @property
    def valid(self) -> bool:
        return True

    def to_tuple(self) -> tuple[int, int]:
        """Return the ``(len, illlen)`` pair, i.e. ``(length, 0)``."""
        return (self.length, 0)


@dataclasses.dataclass(frozen=True, slots=True)
class Invalid:
    """A malformed sequence.

    *illegal_length* is the number of leading bytes that form the illegal
    run.  Callers skip or replace those bytes as a single unit.
    """

    illegal_length: int

    @property
    def valid(self) -> bool:
        return False

    def to_tuple(self) -> tuple[int, int]:
        """Return the ``(len, illlen)`` pair, i.e. ``(0, illegal_length)``."""
        return (0, self.illegal_length)


#: Outcome of :func:`utf8clen.classify`.
Classification = Valid | Invalid
