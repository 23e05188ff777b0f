"""Candidate values of a single blank cell."""

from __future__ import annotations

from typing import Iterable, Iterator

MIN_VALUE = 1
MAX_VALUE = 9


class Domain:
    """Set over 1..9 stored as a bit mask.

    Bit ``v`` is set when ``v`` is still a legal value for the cell. Iteration
    yields members in ascending order.
    """

    __slots__ = ("_mask",)

    def __init__(self, values: Iterable[int] = ()):
        self._mask = 0
        for value in values:
            self.add(value)

    @staticmethod
    def _bit(value: int) -> int:
        if not MIN_VALUE <= value <= MAX_VALUE:
            raise ValueError(f"Domain value must be in 1..9, got {value!r}")
        return 1 << value

    def add(self, value: int) -> None:
        self._mask |= self._bit(value)

    def remove(self, value: int) -> None:
        """Drop ``value``; removing an absent value does nothing."""
        self._mask &= ~self._bit(value)

    def is_empty(self) -> bool:
        return self._mask == 0

    def copy(self) -> "Domain":
        clone = Domain()
        clone._mask = self._mask
        return clone

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or not MIN_VALUE <= value <= MAX_VALUE:
            return False
        return bool(self._mask & (1 << value))

    def __len__(self) -> int:
        return self._mask.bit_count()

    def __iter__(self) -> Iterator[int]:
        for value in range(MIN_VALUE, MAX_VALUE + 1):
            if self._mask & (1 << value):
                yield value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Domain):
            return self._mask == other._mask
        if isinstance(other, (set, frozenset)):
            return set(self) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Domain({sorted(self)!r})"
