"""Errors raised by field lists."""

from __future__ import annotations


class FieldListError(Exception):
    """Base class for field list errors."""


class OutOfRangeError(FieldListError, IndexError):
    """Raised when an index or range bound lies outside the list."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index {index} out of range for field list of length {length}")
        self.index = index
        self.length = length


class InvalidRangeError(FieldListError, ValueError):
    """Raised when a range starts after it ends."""

    def __init__(self, start: int, stop: int) -> None:
        super().__init__(f"start({start}) > stop({stop})")
        self.start = start
        self.stop = stop


class FieldNotFoundError(FieldListError, KeyError):
    """Raised when no field carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        # KeyError quotes its argument; keep a readable message instead.
        return f"Expected to find a field {self.name!r}"
