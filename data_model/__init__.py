"""
data_model — przykładowe rekordy walidowane przez bibliotekę.

Użycie:
  from data_model import User, UserFields, SIGNUP_RULES

Moduły:
  user — User (PartialInitializable), UserFields, SIGNUP_RULES

Mapowanie pól formularza rejestracji:
  first_name → str
  last_name  → str          (dłuższe niż MIN_LAST_NAME_LEN znaków)
  age        → int | None   (co najmniej ADULT_AGE)
"""

from .user import (
    ADULT_AGE,
    MIN_LAST_NAME_LEN,
    SIGNUP_RULES,
    User,
    UserFields,
)

__all__ = [
    "User",
    "UserFields",
    "SIGNUP_RULES",
    "MIN_LAST_NAME_LEN",
    "ADULT_AGE",
]
