"""validation/errors.py — błąd konfiguracji zestawu reguł."""

from __future__ import annotations


class RuleSetOutOfSync(RuntimeError):
    """
    Wszystkie reguły przeszły, ale rekonstrukcja rekordu z Partial nie powiodła się.

    Oznacza błąd programisty: zestaw reguł nie pokrywa wymagań konstruktora
    rekordu (np. brakuje Required dla pola wymaganego przez from_partial).
    Poprawnie napisany zestaw reguł nigdy tego nie wywoła. Nie jest zamieniany
    na wynik Invalid.
    """

    def __init__(self, record_type: type, cause: Exception) -> None:
        super().__init__(
            f"Reguły walidacji {record_type.__name__} nie pokrywają wymagań "
            f"rekonstrukcji rekordu: {cause}"
        )
        self.record_type = record_type
