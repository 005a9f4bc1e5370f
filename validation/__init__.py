"""
validation — deklaratywna walidacja częściowo wypełnionych rekordów.

Interfejs publiczny:
    Validation                       — zestaw reguł, validate(partial)
    Required, ValuePredicate         — rodzaje reguł (Strategy)
    required, value_validation       — fabryki reguł
    Valid, Invalid, Result           — wynik walidacji
    Reason, ReasonKind               — przyczyny niepowodzeń
    RuleSetOutOfSync                 — błąd konfiguracji zestawu reguł

Typowe użycie:
    from partial import record_fields
    from validation import Validation, required, value_validation

    F = record_fields(User)
    validation = Validation(
        required(F.first_name),
        value_validation(F.last_name, lambda v: len(v) > 5),
    )

    result = validation.validate(partial)
    if not result.is_valid:
        for reason in result.reasons:
            print(reason.kind, reason.field.name)
"""

from .types import Invalid, Reason, ReasonKind, Result, Valid
from .strategies import Required, Strategy, ValuePredicate, required, value_validation
from .engine import Validation
from .errors import RuleSetOutOfSync

__all__ = [
    "Validation",
    "Required",
    "ValuePredicate",
    "Strategy",
    "required",
    "value_validation",
    "Valid",
    "Invalid",
    "Result",
    "Reason",
    "ReasonKind",
    "RuleSetOutOfSync",
]
