"""Tests for the shared Outcome type."""

import dataclasses

import pytest

from vacation_manager.core.outcome import (
    AuthorizationResult,
    FailureCode,
    Outcome,
    ValidationResult,
)


def test_success_has_no_reason_or_code():
    outcome = Outcome.success()
    assert outcome.succeeded is True
    assert outcome.reason is None
    assert outcome.code is None
    assert outcome.is_authorized and outcome.is_valid
    assert bool(outcome) is True


def test_success_is_shared_instance():
    assert Outcome.success() is Outcome.success()


def test_failure_carries_reason_and_code():
    outcome = Outcome.failure("Only managers can perform this operation", FailureCode.MANAGER_ROLE_REQUIRED)
    assert outcome.succeeded is False
    assert outcome.reason == "Only managers can perform this operation"
    assert outcome.code == "MANAGER_ROLE_REQUIRED"
    assert not outcome.is_authorized
    assert not outcome.is_valid
    assert bool(outcome) is False


def test_failure_code_is_optional():
    outcome = Outcome.failure("nope")
    assert outcome.code is None


def test_failure_accepts_plain_string_code():
    assert Outcome.failure("custom", "CUSTOM_CODE").code == "CUSTOM_CODE"


def test_outcome_is_immutable():
    outcome = Outcome.failure("x", FailureCode.VACATION_OVERLAP)
    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.reason = "y"


def test_authorization_and_validation_results_are_the_same_type():
    assert AuthorizationResult is Outcome
    assert ValidationResult is Outcome


def test_failure_code_str_is_value():
    assert str(FailureCode.USER_NOT_FOUND) == "USER_NOT_FOUND"
