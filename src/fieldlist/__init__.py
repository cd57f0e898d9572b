"""Immutable, ordered lists of field descriptions with lookup by name."""

from .description import DeclaredField, FieldDescription, LoadedFieldDescription
from .errors import FieldListError, FieldNotFoundError, InvalidRangeError, OutOfRangeError
from .model import EMPTY, Empty, Explicit, FieldList, ForLoadedFields, fields_of

__all__ = [
    "FieldList",
    "ForLoadedFields",
    "Explicit",
    "Empty",
    "EMPTY",
    "fields_of",
    "FieldDescription",
    "LoadedFieldDescription",
    "DeclaredField",
    "FieldListError",
    "OutOfRangeError",
    "InvalidRangeError",
    "FieldNotFoundError",
]
