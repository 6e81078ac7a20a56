"""
Partial-update wrappers.

An update request is a set of per-attribute changes. Each attribute is either
UNCHANGED or SetTo(value); SetTo(None) is a real change (e.g. clearing a
camera's group) and is distinct from leaving the attribute alone.
"""
# Standard library imports
from dataclasses import dataclass, fields
from typing import Any, Dict, Generic, TypeVar, Union

T = TypeVar("T")


class Unchanged:
    """Marker for an attribute the caller did not supply."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNCHANGED"


UNCHANGED = Unchanged()


@dataclass(frozen=True)
class SetTo(Generic[T]):
    """Replace the attribute with value."""
    value: T


Change = Union[Unchanged, SetTo[T]]


class ChangeSet:
    """
    Mixin for dataclasses whose fields are all Change values.

    Subclasses list their attributes as dataclass fields defaulting to UNCHANGED.
    """

    def supplied(self) -> Dict[str, Any]:
        """Return {attribute: new value} for every attribute wrapped in SetTo."""
        result: Dict[str, Any] = {}
        for item in fields(self):
            change = getattr(self, item.name)
            if isinstance(change, SetTo):
                result[item.name] = change.value
        return result

    def is_empty(self) -> bool:
        return not self.supplied()

    def touches(self, *names: str) -> bool:
        supplied = self.supplied()
        return any(name in supplied for name in names)
