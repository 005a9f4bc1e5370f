"""Testy referencji pól: równość, hash, sprawdzanie typu, record_fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional

import pytest

from data_model import User, UserFields
from partial import FieldRef, FieldTypeError, Partial, UnknownField, record_fields


@dataclass
class Article:
    title: str
    tags: list[str]
    score: float | int
    subtitle: Optional[str] = None
    extra: Any = None


def test_equality_ignores_value_type() -> None:
    a = FieldRef(User, "age", (int,), optional=True)
    b = FieldRef(User, "age", (str,), optional=False)
    assert a == b
    assert hash(a) == hash(b)


def test_refs_of_different_records_differ() -> None:
    assert FieldRef(User, "first_name") != FieldRef(Article, "first_name")


def test_heterogeneous_refs_as_keys() -> None:
    keys = {UserFields.first_name: "imię", UserFields.age: "wiek"}
    assert keys[FieldRef(User, "age")] == "wiek"
    assert len({UserFields.first_name, UserFields.last_name, UserFields.age}) == 3


def test_record_fields_declaration_order() -> None:
    assert [f.name for f in record_fields(User)] == ["first_name", "last_name", "age"]


def test_record_fields_is_cached() -> None:
    assert record_fields(User) is record_fields(User)


def test_optional_and_runtime_types() -> None:
    F = record_fields(Article)
    assert F.title.value_type == (str,)
    assert not F.title.optional
    assert F.tags.value_type == (list,)
    assert F.score.value_type == (float, int)
    assert F.subtitle.optional
    assert F.subtitle.value_type == (str,)
    assert F.extra.accepts(object())
    assert F.extra.accepts(None)


def test_accepts() -> None:
    assert UserFields.first_name.accepts("x")
    assert not UserFields.first_name.accepts(1)
    assert not UserFields.first_name.accepts(None)
    assert UserFields.age.accepts(None)
    assert UserFields.age.accepts(18)
    assert not UserFields.age.accepts("18")


def test_lookup_by_name() -> None:
    assert UserFields["age"] is UserFields.age
    assert "age" in UserFields
    assert "email" not in UserFields
    assert len(UserFields) == 3


def test_unknown_field() -> None:
    with pytest.raises(UnknownField) as exc_info:
        UserFields["email"]
    assert exc_info.value.name == "email"
    with pytest.raises(AttributeError):
        UserFields.email


def test_record_fields_requires_dataclass() -> None:
    class Plain:
        pass

    with pytest.raises(TypeError):
        record_fields(Plain)


def test_str() -> None:
    assert str(UserFields.first_name) == "User.first_name"


@dataclass
class Order:
    status: Literal["new", "paid"]
    priority: Literal[1, 2, None] = None


def test_literal_field_types() -> None:
    F = record_fields(Order)
    assert F.status.value_type == (str,)
    assert not F.status.optional
    assert F.priority.value_type == (int,)
    assert F.priority.optional


def test_literal_field_accessors_never_fail() -> None:
    F = record_fields(Order)
    partial: Partial[Order] = Partial(Order)
    partial.set(F.status, "new")
    partial.set(F.priority, "pilne")

    assert partial.get_optional(F.status) == "new"
    assert partial.get(F.status) == "new"
    assert partial.get_optional(F.priority) is None
    with pytest.raises(FieldTypeError):
        partial.get(F.priority)
