"""Testy silnika walidacji: scenariusze formularza, kolejność przyczyn, obecność."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Literal

import pytest

from data_model import SIGNUP_RULES, User, UserFields as F
from partial import Partial, record_fields
from validation import (
    Invalid,
    Reason,
    ReasonKind,
    Required,
    RuleSetOutOfSync,
    Valid,
    Validation,
    ValuePredicate,
    required,
    value_validation,
)


def _not_empty(v: str) -> bool:
    return v != ""


# ---------------------------------------------------------------------------
# Scenariusze formularza rejestracji
# ---------------------------------------------------------------------------

def test_invalid_values() -> None:
    partial = User(first_name="foo", last_name="bar", age=17).to_partial()

    result = SIGNUP_RULES.validate(partial)

    assert isinstance(result, Invalid)
    assert result.reasons == (
        Reason.invalid_value(F.last_name),
        Reason.invalid_value(F.age),
    )
    assert all(r.kind is ReasonKind.INVALID_VALUE for r in result.reasons)


def test_empty_names_and_explicit_none_age() -> None:
    partial = User(first_name="", last_name="", age=None).to_partial()
    validation = Validation(
        value_validation(F.first_name, _not_empty),
        value_validation(F.last_name, _not_empty),
        required(F.age),
    )

    assert partial.get_optional(F.age) is None

    result = validation.validate(partial)
    assert result.reasons == (
        Reason.invalid_value(F.first_name),
        Reason.invalid_value(F.last_name),
    )


def test_valid() -> None:
    partial = User(first_name="Test", last_name="Test 123", age=18).to_partial()

    result = SIGNUP_RULES.validate(partial)

    assert isinstance(result, Valid)
    assert result.value == User(first_name="Test", last_name="Test 123", age=18)
    assert result.reasons == ()
    assert result


# ---------------------------------------------------------------------------
# Właściwości silnika
# ---------------------------------------------------------------------------

def test_missing_fields_reported_in_declaration_order() -> None:
    partial: Partial[User] = Partial(User)

    result = SIGNUP_RULES.validate(partial)

    assert result.reasons == (
        Reason.missing(F.first_name),
        Reason.invalid_value(F.first_name),
        Reason.missing(F.last_name),
        Reason.invalid_value(F.last_name),
        Reason.invalid_value(F.age),
    )
    assert result.fields == [F.first_name, F.last_name, F.age]
    assert result.value is None
    assert not result


def test_every_rule_evaluated() -> None:
    calls: list[str] = []

    def track(name: str):
        def predicate(_value: object) -> bool:
            calls.append(name)
            return False
        return predicate

    validation = Validation(
        ValuePredicate(F.first_name, track("first_name")),
        ValuePredicate(F.last_name, track("last_name")),
    )
    validation.validate(User(first_name="a", last_name="b").to_partial())

    assert calls == ["first_name", "last_name"]


def test_idempotent() -> None:
    partial = User(first_name="foo", last_name="bar", age=17).to_partial()
    assert SIGNUP_RULES.validate(partial) == SIGNUP_RULES.validate(partial)


def test_required_counts_explicit_none_as_present() -> None:
    partial: Partial[User] = Partial(User)
    partial.set(F.age, None)

    assert Required(F.age).is_valid(partial)


def test_predicate_runs_on_explicit_none() -> None:
    seen: list[object] = []

    def predicate(value: int | None) -> bool:
        seen.append(value)
        return True

    partial: Partial[User] = Partial(User)
    partial.set(F.age, None)

    assert ValuePredicate(F.age, predicate).is_valid(partial)
    assert seen == [None]


def test_predicate_not_called_when_absent() -> None:
    def predicate(_value: object) -> bool:
        raise AssertionError("predykat nie powinien być wywołany")

    partial: Partial[User] = Partial(User)
    assert not ValuePredicate(F.age, predicate).is_valid(partial)


def test_wrong_type_counts_as_invalid_value() -> None:
    partial = Partial.from_mapping(
        User, {"first_name": "Test", "last_name": "Test 123", "age": "18"}
    )

    result = SIGNUP_RULES.validate(partial)

    assert result.reasons == (Reason.invalid_value(F.age),)


def test_predicate_exception_propagates() -> None:
    validation = Validation(ValuePredicate(F.first_name, lambda v: 1 / 0 > 0))
    with pytest.raises(ZeroDivisionError):
        validation.validate(User(first_name="a", last_name="b").to_partial())


def test_empty_rule_set_reconstructs_record() -> None:
    partial = User(first_name="a", last_name="b").to_partial()
    assert Validation().validate(partial) == Valid(User(first_name="a", last_name="b"))


def test_rule_set_is_reusable_collection() -> None:
    rules = [required(F.first_name), required(F.last_name)]
    validation = Validation(*rules)

    assert len(validation) == 2
    assert list(validation) == rules
    assert validation.strategies == tuple(rules)


def test_unknown_strategy_rejected() -> None:
    with pytest.raises(TypeError):
        Validation("first_name")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Błąd konfiguracji zestawu reguł
# ---------------------------------------------------------------------------

@dataclass
class Account:
    login: str
    email: str

    def to_partial(self) -> Partial[Account]:
        A = record_fields(Account)
        partial: Partial[Account] = Partial(Account)
        partial.set(A.login, self.login)
        partial.set(A.email, self.email)
        return partial

    @classmethod
    def from_partial(cls, partial: Partial[Account]) -> Account:
        A = record_fields(Account)
        return cls(login=partial.get(A.login), email=partial.get(A.email))


def test_rule_set_out_of_sync_is_fatal() -> None:
    A = record_fields(Account)
    validation = Validation(required(A.login))

    partial: Partial[Account] = Partial(Account)
    partial.set(A.login, "jan")

    with pytest.raises(RuleSetOutOfSync) as exc_info:
        validation.validate(partial)
    assert exc_info.value.record_type is Account


def test_invalid_requires_reasons() -> None:
    with pytest.raises(ValueError):
        Invalid(())


def test_outcome_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="validation.engine")

    SIGNUP_RULES.validate(User(first_name="foo", last_name="bar", age=17).to_partial())

    assert "User: 2/5" in caplog.text
    assert "invalid_value(User.age)" in caplog.text


# ---------------------------------------------------------------------------
# Pola Literal i współbieżność
# ---------------------------------------------------------------------------

@dataclass
class Shipment:
    status: Literal["new", "sent"]

    def to_partial(self) -> Partial[Shipment]:
        partial: Partial[Shipment] = Partial(Shipment)
        partial.set(record_fields(Shipment).status, self.status)
        return partial

    @classmethod
    def from_partial(cls, partial: Partial[Shipment]) -> Shipment:
        return cls(status=partial.get(record_fields(Shipment).status))


def test_literal_field_validates() -> None:
    S = record_fields(Shipment)
    validation = Validation(
        required(S.status),
        value_validation(S.status, lambda v: v in ("new", "sent")),
    )

    assert validation.validate(Shipment("new").to_partial()) == Valid(Shipment("new"))

    partial: Partial[Shipment] = Partial(Shipment)
    partial.set(S.status, 7)
    assert validation.validate(partial).reasons == (Reason.invalid_value(S.status),)


def test_shared_rule_set_across_threads() -> None:
    partials = [
        User(first_name="foo", last_name="bar", age=17).to_partial()
        if i % 2
        else User(first_name="Test", last_name="Test 123", age=18).to_partial()
        for i in range(64)
    ]
    expected = [SIGNUP_RULES.validate(p.copy()) for p in partials]
    strategies = SIGNUP_RULES.strategies

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(SIGNUP_RULES.validate, partials))

    assert results == expected
    assert SIGNUP_RULES.strategies == strategies
