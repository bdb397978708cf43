"""Id generation for inventory items."""

from __future__ import annotations

from ims.domain.exceptions import ValidationError


class IdSequence:
    """Monotonic id generator.

    Each Inventory owns one sequence, so ids are unique within that
    inventory without any process-wide counter.
    """

    def __init__(self, start: int = 1) -> None:
        if isinstance(start, bool) or not isinstance(start, int) or start < 1:
            raise ValidationError(f"Id sequence must start at a positive integer, got {start!r}")
        self._next = start

    @property
    def peek(self) -> int:
        """The id the next call to ``next()`` will hand out."""
        return self._next

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    def advance_past(self, used_id: int) -> None:
        """Make sure ``used_id`` is never handed out again."""
        if used_id >= self._next:
            self._next = used_id + 1
