"""
Przykładowy rekord User i zestaw reguł formularza rejestracji.

Pola:
  first_name  str           (wymagane przez konstruktor)
  last_name   str           (wymagane przez konstruktor)
  age         int | None    (opcjonalne; None jest poprawną, obecną wartością)
"""

from __future__ import annotations

from dataclasses import dataclass

from partial import Partial, record_fields
from validation import Validation, required, value_validation


@dataclass(frozen=True, slots=True)
class User:
    first_name: str
    last_name: str
    age: int | None = None

    def to_partial(self) -> Partial[User]:
        F = record_fields(User)
        partial: Partial[User] = Partial(User)
        partial.set(F.first_name, self.first_name)
        partial.set(F.last_name, self.last_name)
        partial.set(F.age, self.age)
        return partial

    @classmethod
    def from_partial(cls, partial: Partial[User]) -> User:
        F = record_fields(User)
        return cls(
            first_name=partial.get(F.first_name),
            last_name=partial.get(F.last_name),
            age=partial.get_optional(F.age),
        )


UserFields = record_fields(User)


# ---------------------------------------------------------------------------
# Reguły formularza rejestracji
# ---------------------------------------------------------------------------

MIN_LAST_NAME_LEN = 5
ADULT_AGE         = 18

SIGNUP_RULES = Validation(
    required(UserFields.first_name),
    value_validation(UserFields.first_name, lambda v: v != ""),
    required(UserFields.last_name),
    value_validation(UserFields.last_name, lambda v: len(v) > MIN_LAST_NAME_LEN),
    value_validation(UserFields.age, lambda v: v is not None and v >= ADULT_AGE),
)
