from __future__ import annotations

import pytest

from parsebench.generator import is_malformed
from parsebench.orchestrator import resolve_strategy
from parsebench.strategies import (
    ConversionStrategy,
    ExceptionGuardedStrategy,
    MalformedNumberError,
    StatusReturnStrategy,
    parse_int,
    try_parse_int,
)
from parsebench.strategies import exception_guarded as exception_guarded_module

PRIMITIVE_FALLBACK = -1
RECORD_FALLBACK = 0

WELL_FORMED = [
    ("0", 0),
    ("42", 42),
    ("-17", -17),
    ("+8", 8),
    (" 12 ", 12),
    ("007", 7),
    ("2147483646", 2_147_483_646),
    ("99999999999999999999", 99_999_999_999_999_999_999),
]

MALFORMED = [
    None,
    "",
    "   ",
    "X534011718",
    "12a",
    "1_000",
    "1.5",
    "0x10",
    "+",
    "- 5",
    "٣",  # ARABIC-INDIC DIGIT THREE
]


@pytest.mark.parametrize(("text", "expected"), WELL_FORMED)
def test_parse_int_accepts_base10_integers(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", MALFORMED)
def test_parse_int_raises_on_malformed_input(text):
    with pytest.raises(MalformedNumberError) as excinfo:
        parse_int(text)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.text == text


@pytest.mark.parametrize(("text", "expected"), WELL_FORMED)
def test_try_parse_int_reports_success(text, expected):
    assert try_parse_int(text) == (True, expected)


@pytest.mark.parametrize("text", MALFORMED)
def test_try_parse_int_reports_failure_without_raising(text):
    assert try_parse_int(text) == (False, 0)


@pytest.mark.parametrize("strategy_cls", [ExceptionGuardedStrategy, StatusReturnStrategy])
@pytest.mark.parametrize(("text", "expected"), WELL_FORMED)
def test_strategies_match_strict_parse_on_well_formed_input(strategy_cls, text, expected):
    assert strategy_cls(PRIMITIVE_FALLBACK).convert(text) == expected


@pytest.mark.parametrize("strategy_cls", [ExceptionGuardedStrategy, StatusReturnStrategy])
@pytest.mark.parametrize("fallback", [PRIMITIVE_FALLBACK, RECORD_FALLBACK, 12345])
@pytest.mark.parametrize("text", MALFORMED)
def test_strategies_return_configured_fallback_on_malformed_input(strategy_cls, fallback, text):
    assert strategy_cls(fallback).convert(text) == fallback


def test_strategies_agree_on_generated_input(mixed_records):
    guarded = ExceptionGuardedStrategy(PRIMITIVE_FALLBACK)
    status = StatusReturnStrategy(PRIMITIVE_FALLBACK)

    for record in mixed_records:
        left = guarded.convert(record.payload)
        right = status.convert(record.payload)
        assert left == right
        if is_malformed(record):
            assert left == PRIMITIVE_FALLBACK
        else:
            assert left == int(record.payload)


def test_strategies_satisfy_protocol():
    assert isinstance(ExceptionGuardedStrategy(0), ConversionStrategy)
    assert isinstance(StatusReturnStrategy(0), ConversionStrategy)
    assert ExceptionGuardedStrategy.name == "try_catch"
    assert StatusReturnStrategy.name == "try_parse"


def test_exception_guarded_strategy_recovers_from_raised_error(monkeypatch):
    calls = []

    def always_raises(text):
        calls.append(text)
        raise MalformedNumberError(text)

    monkeypatch.setattr(exception_guarded_module, "parse_int", always_raises)

    assert ExceptionGuardedStrategy(-5).convert("123") == -5
    assert calls == ["123"]


def test_exception_guarded_strategy_does_not_swallow_unrelated_errors(monkeypatch):
    def broken(text):
        raise RuntimeError("boom")

    monkeypatch.setattr(exception_guarded_module, "parse_int", broken)

    with pytest.raises(RuntimeError, match="boom"):
        ExceptionGuardedStrategy(0).convert("1")


def test_resolve_strategy_applies_fallback():
    strategy = resolve_strategy("try_parse", fallback=-9)
    assert isinstance(strategy, StatusReturnStrategy)
    assert strategy.convert("nope") == -9


def test_resolve_strategy_rejects_unknown_name():
    with pytest.raises(ValueError, match="Unknown strategy"):
        resolve_strategy("try_harder", fallback=0)
