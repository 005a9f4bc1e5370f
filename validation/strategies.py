"""
validation/strategies.py — deklaratywne reguły walidacji.

Required(field)                   — pole musi być obecne w Partial (dowolna wartość)
ValuePredicate(field, predicate)  — pole obecne, wartość pasuje do typu pola
                                    i predicate(wartość) jest prawdą

Reguły o różnych typach wartości trzymane są w jednej krotce; ValuePredicate
sprawdza typ zapisanej wartości przed wywołaniem predykatu. Zły typ liczy
się jak odrzucenie przez predykat (INVALID_VALUE).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from partial import FieldRef, Partial

V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class Required:
    """Pole musi zostać przypisane (również None dla pola opcjonalnego)."""

    field: FieldRef[Any, Any]

    def is_valid(self, partial: Partial[Any]) -> bool:
        return partial.contains(self.field)


@dataclass(frozen=True, slots=True)
class ValuePredicate(Generic[V]):
    """Wartość pola musi istnieć i spełniać predykat."""

    field: FieldRef[Any, V]
    predicate: Callable[[V], bool]

    def is_valid(self, partial: Partial[Any]) -> bool:
        if not partial.contains(self.field):
            return False
        value = partial.raw(self.field)
        if not self.field.accepts(value):
            return False
        return bool(self.predicate(value))


type Strategy = Required | ValuePredicate[Any]


def required(field: FieldRef[Any, Any]) -> Required:
    return Required(field)


def value_validation(field: FieldRef[Any, V], predicate: Callable[[V], bool]) -> ValuePredicate[V]:
    return ValuePredicate(field, predicate)
