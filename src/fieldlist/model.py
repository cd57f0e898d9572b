"""
Ordered, read-only lists of field descriptions.

A ``FieldList`` supports positional access, range slicing and lookup by
name. Three variants share the contract:

* ``ForLoadedFields`` wraps the field handles of a loaded dataclass.
* ``Explicit`` wraps descriptions the caller has already built.
* ``Empty`` is the stateless zero-length list.
"""

from __future__ import annotations

import dataclasses
import operator
from abc import abstractmethod
from collections.abc import Sequence
from typing import Any, Callable, Iterator, Optional, Union, overload

from .description import FieldDescription, LoadedFieldDescription
from .errors import FieldNotFoundError, InvalidRangeError, OutOfRangeError
from .logging import get_logger

logger = get_logger(__name__)


class FieldList(Sequence):
    """Read-only sequence of field descriptions with lookup by name."""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def at(self, index: int) -> FieldDescription:
        """Return the description at ``index``; negative indices are rejected."""

    @abstractmethod
    def named(self, name: str) -> FieldDescription:
        """
        Return the first description called ``name``.

        Raises:
            FieldNotFoundError: If no description carries that name.
        """

    @abstractmethod
    def sub_list(self, start: int, stop: int) -> FieldList:
        """
        Return the descriptions in ``[start, stop)`` as a new field list.

        Raises:
            OutOfRangeError: If ``start < 0`` or ``stop > len(self)``.
            InvalidRangeError: If ``start > stop``.
        """

    @overload
    def __getitem__(self, index: int) -> FieldDescription: ...

    @overload
    def __getitem__(self, index: slice) -> FieldList: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[FieldDescription, FieldList]:
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise ValueError(f"field lists do not support slice step {index.step}")
            start = 0 if index.start is None else operator.index(index.start)
            stop = len(self) if index.stop is None else operator.index(index.stop)
            return self.sub_list(start, stop)
        return self.at(operator.index(index))

    def __iter__(self) -> Iterator[FieldDescription]:
        for i in range(len(self)):
            yield self.at(i)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(description.name for description in self)

    def get(self, name: str, default: Optional[FieldDescription] = None) -> Optional[FieldDescription]:
        """Like ``named`` but returns ``default`` when nothing matches."""
        try:
            return self.named(name)
        except FieldNotFoundError:
            return default

    def filter(self, predicate: Callable[[FieldDescription], bool]) -> FieldList:
        """Return the descriptions matching ``predicate``, order preserved."""
        matching = tuple(description for description in self if predicate(description))
        if not matching:
            return EMPTY
        return Explicit(matching)

    def as_list(self) -> list[FieldDescription]:
        return list(self)

    def _check_range(self, start: int, stop: int) -> None:
        if start < 0:
            raise OutOfRangeError(start, len(self))
        if stop > len(self):
            raise OutOfRangeError(stop, len(self))
        if start > stop:
            raise InvalidRangeError(start, stop)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self):
            raise OutOfRangeError(index, len(self))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FieldList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.names)})"


class ForLoadedFields(FieldList):
    """
    Field list over the handles of a loaded type.

    Handles are wrapped into ``LoadedFieldDescription`` on access; lookup by
    name reads the handles directly and wraps only the match.
    """

    def __init__(self, handles: Sequence[dataclasses.Field]) -> None:
        self._handles = tuple(handles)
        for i, handle in enumerate(self._handles):
            if handle is None:
                raise ValueError(f"Field handle at index {i} is None")

    def __len__(self) -> int:
        return len(self._handles)

    def at(self, index: int) -> FieldDescription:
        self._check_index(index)
        return LoadedFieldDescription(self._handles[index])

    def named(self, name: str) -> FieldDescription:
        for handle in self._handles:
            if handle.name == name:
                return LoadedFieldDescription(handle)
        raise FieldNotFoundError(name)

    def sub_list(self, start: int, stop: int) -> FieldList:
        self._check_range(start, stop)
        return Explicit(tuple(LoadedFieldDescription(h) for h in self._handles[start:stop]))


class Explicit(FieldList):
    """Field list wrapping caller-built descriptions, held by reference."""

    def __init__(self, descriptions: Sequence[FieldDescription]) -> None:
        if not isinstance(descriptions, Sequence):
            descriptions = tuple(descriptions)
        for i, description in enumerate(descriptions):
            if description is None:
                raise ValueError(f"Field description at index {i} is None")
        self._descriptions = descriptions

    def __len__(self) -> int:
        return len(self._descriptions)

    def at(self, index: int) -> FieldDescription:
        self._check_index(index)
        return self._descriptions[index]

    def named(self, name: str) -> FieldDescription:
        for description in self._descriptions:
            if description.name == name:
                return description
        raise FieldNotFoundError(name)

    def sub_list(self, start: int, stop: int) -> FieldList:
        self._check_range(start, stop)
        return Explicit(tuple(self._descriptions[i] for i in range(start, stop)))


class Empty(FieldList):
    """The zero-length field list. ``Empty()`` always returns the same instance."""

    _instance: Optional[Empty] = None

    def __new__(cls) -> Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __len__(self) -> int:
        return 0

    def at(self, index: int) -> FieldDescription:
        raise OutOfRangeError(index, 0)

    def named(self, name: str) -> FieldDescription:
        raise FieldNotFoundError(name)

    def sub_list(self, start: int, stop: int) -> FieldList:
        if start == stop == 0:
            return self
        if start > stop:
            raise InvalidRangeError(start, stop)
        raise OutOfRangeError(start if start != 0 else stop, 0)

    def __iter__(self) -> Iterator[FieldDescription]:
        return iter(())

    def __reduce__(self):
        return (Empty, ())


EMPTY = Empty()


def fields_of(type_or_instance: Any) -> FieldList:
    """
    Build a field list from a loaded dataclass or dataclass instance.

    Args:
        type_or_instance: Dataclass type or instance to read fields from

    Returns:
        ForLoadedFields over the declared fields, or EMPTY if there are none

    Raises:
        TypeError: If the argument is not a dataclass
    """
    handles = dataclasses.fields(type_or_instance)
    owner = type_or_instance if isinstance(type_or_instance, type) else type(type_or_instance)
    logger.debug(f"Loaded {len(handles)} fields from {owner.__qualname__}")
    if not handles:
        return EMPTY
    return ForLoadedFields(handles)
