"""
validation/types.py — przyczyny niepowodzeń i wynik walidacji.

Reason  — pojedyncza przyczyna: rodzaj (ReasonKind) + pole
Valid   — wszystkie reguły przeszły; niesie odtworzony rekord
Invalid — co najmniej jedna reguła nie przeszła; niesie przyczyny
          w kolejności deklaracji reguł

Przyczyny są danymi, nie wyjątkami — nigdy nie są rzucane.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, TypeVar

from partial import FieldRef

R = TypeVar("R")


class ReasonKind(StrEnum):
    """Rodzaj przyczyny niepowodzenia reguły."""

    MISSING       = "missing"
    INVALID_VALUE = "invalid_value"


@dataclass(frozen=True, slots=True)
class Reason:
    """
    Przyczyna niepowodzenia jednej reguły.

    - kind:  MISSING (Required) albo INVALID_VALUE (ValuePredicate)
    - field: pole, którego dotyczy reguła
    """

    kind: ReasonKind
    field: FieldRef[Any, Any]

    @staticmethod
    def missing(field: FieldRef[Any, Any]) -> Reason:
        return Reason(ReasonKind.MISSING, field)

    @staticmethod
    def invalid_value(field: FieldRef[Any, Any]) -> Reason:
        return Reason(ReasonKind.INVALID_VALUE, field)

    def __str__(self) -> str:
        return f"{self.kind}({self.field})"


# ---------------------------------------------------------------------------
# Wynik
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Valid(Generic[R]):
    """Wynik pozytywny: rekord odtworzony z Partial."""

    record: R

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def value(self) -> R:
        return self.record

    @property
    def reasons(self) -> tuple[Reason, ...]:
        return ()

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Invalid:
    """Wynik negatywny: niepusta lista przyczyn w kolejności reguł."""

    reasons: tuple[Reason, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "reasons", tuple(self.reasons))
        if not self.reasons:
            raise ValueError("Invalid wymaga co najmniej jednej przyczyny")

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    @property
    def fields(self) -> list[FieldRef[Any, Any]]:
        """Pola, których dotyczą przyczyny (bez powtórzeń, w kolejności)."""
        return list(dict.fromkeys(r.field for r in self.reasons))

    def __bool__(self) -> bool:
        return False


type Result[T] = Valid[T] | Invalid
