"""
partial/errors.py — wyjątki kontenera Partial.

PartialError     — baza wszystkich błędów kontenera
ValueNotFound    — odczyt wymaganym akcesorem pola, które nie zostało ustawione
FieldTypeError   — zapisana wartość nie pasuje do zadeklarowanego typu pola
ForeignField     — referencja pola innego typu rekordu niż rekord kontenera
UnknownField     — nazwa pola nie istnieje w rekordzie
"""

from __future__ import annotations

from typing import Any


class PartialError(Exception):
    """Bazowy wyjątek kontenera Partial."""


class ValueNotFound(PartialError, LookupError):
    def __init__(self, field: Any) -> None:
        super().__init__(f"Brak wartości pola {field}")
        self.field = field


class FieldTypeError(PartialError, TypeError):
    def __init__(self, field: Any, value: Any) -> None:
        super().__init__(
            f"Wartość pola {field} ma typ {type(value).__name__}, "
            f"oczekiwano {' | '.join(t.__name__ for t in field.value_type)}"
        )
        self.field = field
        self.value = value


class ForeignField(PartialError, TypeError):
    def __init__(self, field: Any, record_type: type) -> None:
        super().__init__(
            f"Pole {field} nie należy do rekordu {record_type.__name__}"
        )
        self.field = field
        self.record_type = record_type


class UnknownField(PartialError, LookupError):
    def __init__(self, record_type: type, name: str) -> None:
        super().__init__(f"{record_type.__name__} nie ma pola '{name}'")
        self.record_type = record_type
        self.name = name
