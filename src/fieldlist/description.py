"""Field descriptions consumed by field lists.

A field list only needs its elements to expose a ``name``. Two concrete
descriptions ship with the package: one wrapping a handle obtained from a
loaded dataclass, one built explicitly by the caller.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FieldDescription(Protocol):
    """Anything with a field name."""

    @property
    def name(self) -> str: ...


@dataclass(frozen=True)
class LoadedFieldDescription:
    """Description backed by a loaded ``dataclasses.Field`` handle."""
    handle: dataclasses.Field

    @property
    def name(self) -> str:
        return self.handle.name

    @property
    def declared_type(self) -> Any:
        return self.handle.type

    @property
    def has_default(self) -> bool:
        return (
            self.handle.default is not dataclasses.MISSING
            or self.handle.default_factory is not dataclasses.MISSING
        )


@dataclass(frozen=True)
class DeclaredField:
    """Description constructed directly by the caller."""
    name: str
    declared_type: Any = None
