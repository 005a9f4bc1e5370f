"""
partial/fields.py — referencje pól rekordu.

FieldRef      — identyfikator "pole `name` typu rekordu `owner`"
                (równość i hash wyłącznie po (owner, name))
RecordFields  — przestrzeń nazw FieldRef wyprowadzona z adnotacji dataclassy
record_fields(cls) → RecordFields (cache per klasa)
"""

from __future__ import annotations

import dataclasses
import functools
import types
import typing
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .errors import UnknownField

R = TypeVar("R")
V = TypeVar("V")


# ---------------------------------------------------------------------------
# FieldRef
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FieldRef(Generic[R, V]):
    """
    Referencja pola rekordu.

    - owner:      typ rekordu, do którego należy pole
    - name:       nazwa pola (atrybutu rekordu)
    - value_type: typy runtime akceptowane przy odczycie (krotka)
    - optional:   czy None jest poprawną wartością pola

    value_type i optional nie biorą udziału w porównaniu ani w hashu,
    więc referencje o różnych typach wartości można trzymać w jednym zbiorze.
    """

    owner: type
    name: str
    value_type: tuple[type, ...] = field(default=(object,), compare=False, repr=False)
    optional: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        return f"{self.owner.__name__}.{self.name}"

    def accepts(self, value: Any) -> bool:
        """Sprawdzenie "downcastu": czy zapisana wartość pasuje do typu pola."""
        if value is None:
            return self.optional
        return isinstance(value, self.value_type)


# ---------------------------------------------------------------------------
# Adnotacje → typy runtime
# ---------------------------------------------------------------------------

def _runtime_types(hint: Any) -> tuple[tuple[type, ...], bool]:
    """Zwraca (typy runtime, optional) dla adnotacji pola."""
    if hint is Any:
        return (object,), True

    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        args = typing.get_args(hint)
        optional = type(None) in args
        resolved: list[type] = []
        for arg in args:
            if arg is type(None):
                continue
            sub, sub_optional = _runtime_types(arg)
            resolved.extend(sub)
            optional = optional or sub_optional
        return tuple(resolved), optional

    if origin is typing.Literal:
        # Literal["new", "paid"] → typy wartości literałów
        args = typing.get_args(hint)
        literal_types = tuple(dict.fromkeys(type(a) for a in args if a is not None))
        return literal_types or (object,), None in args

    if origin is not None:
        # list[str], dict[str, int] ... — sprawdzamy tylko kontener
        if isinstance(origin, type):
            return (origin,), False
        return (object,), False
    if isinstance(hint, type):
        return (hint,), False
    return (object,), False


# ---------------------------------------------------------------------------
# RecordFields
# ---------------------------------------------------------------------------

class RecordFields:
    """
    Przestrzeń nazw referencji pól jednego typu rekordu.

    Użycie:
        F = record_fields(User)
        F.first_name          # FieldRef[User, str]
        F["age"]              # FieldRef[User, int | None]
        [f.name for f in F]   # kolejność deklaracji
    """

    def __init__(self, owner: type, refs: list[FieldRef[Any, Any]]) -> None:
        self._owner = owner
        self._by_name: dict[str, FieldRef[Any, Any]] = {r.name: r for r in refs}

    @property
    def owner(self) -> type:
        return self._owner

    def __getattr__(self, name: str) -> FieldRef[Any, Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._by_name[name]
        except KeyError:
            raise AttributeError(
                f"{self._owner.__name__} nie ma pola '{name}'"
            ) from None

    def __getitem__(self, name: str) -> FieldRef[Any, Any]:
        ref = self._by_name.get(name)
        if ref is None:
            raise UnknownField(self._owner, name)
        return ref

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[FieldRef[Any, Any]]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        names = ", ".join(self._by_name)
        return f"RecordFields({self._owner.__name__}: {names})"


@functools.cache
def record_fields(cls: type) -> RecordFields:
    """
    Buduje RecordFields z pól dataclassy `cls`.

    Adnotacje są rozwiązywane przez typing.get_type_hints, więc działają
    również przy `from __future__ import annotations`.
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__name__} nie jest dataclassą")

    hints = typing.get_type_hints(cls)
    refs: list[FieldRef[Any, Any]] = []
    for f in dataclasses.fields(cls):
        runtime, optional = _runtime_types(hints.get(f.name, Any))
        refs.append(FieldRef(cls, f.name, runtime, optional))
    return RecordFields(cls, refs)
