"""
partial — częściowo wypełnione rekordy z typowanym dostępem do pól.

Interfejs publiczny:
    FieldRef, RecordFields, record_fields  — referencje pól
    Partial, PartialInitializable          — kontener i protokół rekordu
    PartialError, ValueNotFound, FieldTypeError,
    ForeignField, UnknownField             — wyjątki

Typowe użycie:
    from partial import Partial, record_fields

    F = record_fields(User)
    partial = Partial(User)
    partial.set(F.first_name, "Jan")
    partial.get(F.first_name)        # "Jan"
    partial.get_optional(F.age)      # None — pole nieustawione
"""

from .errors import (
    FieldTypeError,
    ForeignField,
    PartialError,
    UnknownField,
    ValueNotFound,
)
from .fields import FieldRef, RecordFields, record_fields
from .container import Partial, PartialInitializable

__all__ = [
    "FieldRef",
    "RecordFields",
    "record_fields",
    "Partial",
    "PartialInitializable",
    "PartialError",
    "ValueNotFound",
    "FieldTypeError",
    "ForeignField",
    "UnknownField",
]
