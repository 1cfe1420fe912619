"""Tests for munir_release.core.result module."""

import pytest

from munir_release.core.result import Err, Ok, Result


def test_ok_holds_value() -> None:
    assert Ok(42).value == 42
    assert repr(Ok("x")) == "Ok('x')"


def test_err_holds_error() -> None:
    assert Err("boom").error == "boom"
    assert repr(Err("boom")) == "Err('boom')"


def test_frozen() -> None:
    result = Ok(1)
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]


def test_equality() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)


def test_pattern_matching() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Ok(value):
                return f"ok {value}"
            case Err(error):
                return f"err {error}"

    assert describe(Ok(3)) == "ok 3"
    assert describe(Err("x")) == "err x"
