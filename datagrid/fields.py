from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterable, Optional, TypeVar

from .exceptions import ConfigurationError, InvalidColumnError

T = TypeVar("T")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class Field(Generic[T]):
    """A named, typed view onto one attribute of an entity."""

    name: str
    accessor: Callable[[T], Any]
    searchable: bool = True
    orderable: bool = True

    def text(self, record: T) -> str:
        return _as_text(self.accessor(record))

    def contains(self, record: T, term: str) -> bool:
        return term.casefold() in self.text(record).casefold()


class FieldRegistry(Generic[T]):
    """
    Static mapping from column identifiers to accessors for one entity type.

    Column names coming from the grid are matched case-insensitively, so
    ``accountNumber`` and ``AccountNumber`` resolve to the same field.
    Registries are built at import time; a duplicate name fails immediately
    instead of on the first request that happens to use it.
    """

    def __init__(self, entity_name: str, fields: Iterable[Field[T]]):
        self.entity_name = entity_name
        self._fields: Dict[str, Field[T]] = {}
        for field in fields:
            key = field.name.casefold()
            if key in self._fields:
                raise ConfigurationError(
                    f"Duplicate field '{field.name}' registered for {entity_name}"
                )
            self._fields[key] = field

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._fields

    def get(self, name: Optional[str]) -> Optional[Field[T]]:
        if not name:
            return None
        return self._fields.get(name.casefold())

    def resolve(self, name: Optional[str]) -> Field[T]:
        field = self.get(name)
        if field is None:
            raise InvalidColumnError(f"Invalid column for {self.entity_name}: {name}")
        return field

    def accessor(self, name: str) -> Callable[[T], Any]:
        return self.resolve(name).accessor

    def sort_accessor(self, name: str) -> Optional[Callable[[T], Any]]:
        """Like accessor(), but None for fields that can't be ordered."""
        field = self.resolve(name)
        return field.accessor if field.orderable else None

    def matches(self, record: T, term: str) -> bool:
        """Global search: term appears in at least one searchable field."""
        return any(f.contains(record, term) for f in self._fields.values() if f.searchable)

    def matches_field(self, record: T, name: str, term: str) -> bool:
        field = self.resolve(name)
        if not field.searchable:
            return True
        return field.contains(record, term)
