"""
partial/container.py — kontener Partial[R] i protokół rekordu.

Partial[R] przechowuje podzbiór pól rekordu R:
  _data: FieldRef → wartość (bez typu; typ sprawdzany dopiero przy odczycie)

Obecność pola oznacza "zostało przypisane", nie "nie jest None":
  partial.set(F.age, None)  → pole obecne (contains == True)

Akcesory:
  get(field)           wymagany — ValueNotFound gdy brak, FieldTypeError gdy zły typ
  get_optional(field)  nigdy nie rzuca — None gdy brak lub zły typ
  contains(field)      samo członkostwo, bez sprawdzania typu
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Generic, Protocol, Self, TypeVar

from .errors import FieldTypeError, ForeignField, ValueNotFound
from .fields import FieldRef, record_fields

R = TypeVar("R", bound="PartialInitializable")
V = TypeVar("V")


class PartialInitializable(Protocol):
    """
    Możliwości wymagane od typu rekordu:

    - to_partial():        dekompozycja rekordu do Partial
    - from_partial(p):     rekonstrukcja z Partial; rzuca ValueNotFound,
                           gdy brakuje pola wymaganego przez konstruktor
    """

    def to_partial(self) -> Partial[Self]: ...

    @classmethod
    def from_partial(cls, partial: Partial[Self]) -> Self: ...


class Partial(Generic[R]):
    """Częściowo wypełniony rekord typu `record_type`."""

    __slots__ = ("_record_type", "_data")

    def __init__(self, record_type: type[R]) -> None:
        self._record_type = record_type
        self._data: dict[FieldRef[R, Any], Any] = {}

    @classmethod
    def from_mapping(cls, record_type: type[R], data: Mapping[str, Any]) -> Partial[R]:
        """
        Buduje Partial z fragmentów nazwa → wartość (np. pola formularza).

        Nieznana nazwa pola → UnknownField. Wartości nie są walidowane.
        """
        fields = record_fields(record_type)
        partial = cls(record_type)
        for name, value in data.items():
            partial.set(fields[name], value)
        return partial

    @property
    def record_type(self) -> type[R]:
        return self._record_type

    # ------------------------------------------------------------------
    # Zapis
    # ------------------------------------------------------------------

    def set(self, field: FieldRef[R, V], value: V | None) -> None:
        """Zapisuje wartość pola bezwarunkowo (nadpisuje poprzednią)."""
        if field.owner is not self._record_type:
            raise ForeignField(field, self._record_type)
        self._data[field] = value

    # ------------------------------------------------------------------
    # Odczyt
    # ------------------------------------------------------------------

    def get(self, field: FieldRef[R, V]) -> V:
        try:
            value = self._data[field]
        except KeyError:
            raise ValueNotFound(field) from None
        if not field.accepts(value):
            raise FieldTypeError(field, value)
        return value

    def get_optional(self, field: FieldRef[R, V]) -> V | None:
        value = self._data.get(field)
        if value is None or not field.accepts(value):
            return None
        return value

    def contains(self, field: FieldRef[R, Any]) -> bool:
        return field in self._data

    def raw(self, field: FieldRef[R, Any]) -> Any:
        """Zapisana wartość bez sprawdzania typu; ValueNotFound gdy brak."""
        try:
            return self._data[field]
        except KeyError:
            raise ValueNotFound(field) from None

    def fields(self) -> list[FieldRef[R, Any]]:
        """Obecne pola w kolejności pierwszego zapisu."""
        return list(self._data)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: v for f, v in self._data.items()}

    def copy(self) -> Partial[R]:
        clone: Partial[R] = Partial(self._record_type)
        clone._data = dict(self._data)
        return clone

    # ------------------------------------------------------------------
    # Protokoły Pythona
    # ------------------------------------------------------------------

    def __contains__(self, field: object) -> bool:
        return field in self._data

    def __iter__(self) -> Iterator[FieldRef[R, Any]]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        return self._record_type is other._record_type and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"{f.name}={v!r}" for f, v in self._data.items())
        return f"Partial[{self._record_type.__name__}]({items})"
