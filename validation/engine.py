"""
validation/engine.py — zestaw reguł i silnik walidacji.

Validation(*strategies).validate(partial) -> Valid | Invalid

Algorytm:
  1. Każda reguła oceniana w kolejności deklaracji (bez przerywania).
  2. Required nieobecne           → Reason.missing(field)
     ValuePredicate nie spełniony → Reason.invalid_value(field)
  3. Brak przyczyn → record_type.from_partial(partial) → Valid(record)
     Nieudana rekonstrukcja → RuleSetOutOfSync (błąd konfiguracji, nie Invalid)
  4. Są przyczyny → Invalid(przyczyny)

Validation jest niemutowalny i bezstanowy; ten sam obiekt można wywoływać
wielokrotnie (także równolegle) dla różnych Partial.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from partial import Partial, PartialError

from .errors import RuleSetOutOfSync
from .strategies import Required, Strategy, ValuePredicate
from .types import Invalid, Reason, Valid

logger = logging.getLogger(__name__)


class Validation:
    """
    Uporządkowany, niemutowalny zestaw reguł.

    Użycie:
        F = record_fields(User)
        validation = Validation(
            Required(F.first_name),
            ValuePredicate(F.first_name, lambda v: v != ""),
            ValuePredicate(F.age, lambda v: v is not None and v >= 18),
        )
        result = validation.validate(user.to_partial())
        if not result:
            for reason in result.reasons:
                print(reason.kind, reason.field.name)
    """

    __slots__ = ("_strategies",)

    def __init__(self, *strategies: Strategy) -> None:
        for s in strategies:
            if not isinstance(s, (Required, ValuePredicate)):
                raise TypeError(f"Nieznany rodzaj reguły: {s!r}")
        self._strategies: tuple[Strategy, ...] = strategies

    @property
    def strategies(self) -> tuple[Strategy, ...]:
        return self._strategies

    def __iter__(self) -> Iterator[Strategy]:
        return iter(self._strategies)

    def __len__(self) -> int:
        return len(self._strategies)

    def __repr__(self) -> str:
        return f"Validation({len(self._strategies)} rules)"

    # ------------------------------------------------------------------
    # Walidacja
    # ------------------------------------------------------------------

    def validate(self, partial: Partial[Any]) -> Valid[Any] | Invalid:
        reasons = self._collect_reasons(partial)
        record_type = partial.record_type

        if reasons:
            logger.debug(
                "%s: %d/%d reguł nie przeszło: %s",
                record_type.__name__,
                len(reasons),
                len(self._strategies),
                ", ".join(str(r) for r in reasons),
            )
            return Invalid(tuple(reasons))

        try:
            record = record_type.from_partial(partial)
        except PartialError as exc:
            raise RuleSetOutOfSync(record_type, exc) from exc

        logger.debug("%s: %d reguł przeszło", record_type.__name__, len(self._strategies))
        return Valid(record)

    def _collect_reasons(self, partial: Partial[Any]) -> list[Reason]:
        reasons: list[Reason] = []
        for strategy in self._strategies:
            match strategy:
                case Required(field=field) if not strategy.is_valid(partial):
                    reasons.append(Reason.missing(field))
                case ValuePredicate(field=field) if not strategy.is_valid(partial):
                    reasons.append(Reason.invalid_value(field))
        return reasons
