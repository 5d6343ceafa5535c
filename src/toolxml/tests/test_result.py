"""Tests for Result monad implementation.

Validates:
- Functor and monad laws
- Value extraction and ConversionException on unwrap
- traverse (fail-fast) and collect_results (accumulating)
"""

from __future__ import annotations

from typing import Callable

import pytest

from toolxml.foundation.errors import (
    ConversionError,
    ConversionException,
    Err,
    ErrorCode,
    Ok,
    Result,
    collect_results,
    traverse,
)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    result: Result[int, str] = Ok(42)
    assert result.map(lambda x: x) == result

    err_result: Result[int, str] = Err("fail")
    assert err_result.map(lambda x: x) == err_result


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[str], str] = lambda s: s + "</path>"
    g: Callable[[str], str] = lambda s: "<path>" + s

    result: Result[str, str] = Ok("src")
    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert Ok(21).flat_map(f) == f(21)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    m: Result[int, str] = Ok(42)
    assert m.flat_map(lambda x: Ok(x)) == m


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m: Result[int, str] = Ok(5)
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2) if x < 100 else Err("too big")

    assert m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42
    assert result.ok() == 42
    assert result.err() is None
    assert bool(result)


def test_err_construction() -> None:
    result: Result[int, str] = Err("failed")

    assert result.is_err()
    assert result.unwrap_err() == "failed"
    assert result.unwrap_or(0) == 0
    assert result.ok() is None
    assert not result


def test_map_err_passes_ok_through() -> None:
    assert Ok(1).map_err(str.upper) == Ok(1)
    assert Err("bad").map_err(str.upper) == Err("BAD")


def test_match_is_exhaustive() -> None:
    assert Ok(3).match(ok=lambda v: f"ok:{v}", err=lambda e: f"err:{e}") == "ok:3"
    assert Err("x").match(ok=lambda v: f"ok:{v}", err=lambda e: f"err:{e}") == "err:x"


def test_iter_yields_only_ok_value() -> None:
    assert list(Ok("a")) == ["a"]
    assert list(Err("b")) == []


def test_unwrap_conversion_error_raises_conversion_exception() -> None:
    error = ConversionError.create("Unknown tool type: run_shell", ErrorCode.SHAPE_ERROR)

    with pytest.raises(ConversionException) as exc_info:
        Err(error).unwrap()

    assert exc_info.value.error is error
    assert str(exc_info.value) == "Unknown tool type: run_shell"


def test_unwrap_plain_err_raises_runtime_error() -> None:
    with pytest.raises(RuntimeError, match="unwrap\\(\\) on Err"):
        Err("nope").unwrap()

    with pytest.raises(RuntimeError, match="unwrap_err\\(\\) on Ok"):
        Ok(1).unwrap_err()


def test_repr() -> None:
    assert repr(Ok("x")) == "Ok('x')"
    assert repr(Err(2)) == "Err(2)"


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_traverse_all_ok() -> None:
    assert traverse([1, 2, 3], lambda x: Ok(x * 10)) == Ok([10, 20, 30])


def test_traverse_stops_at_first_err() -> None:
    seen: list[int] = []

    def step(x: int) -> Result[int, str]:
        seen.append(x)
        return Err(f"bad {x}") if x == 2 else Ok(x)

    assert traverse([1, 2, 3], step) == Err("bad 2")
    assert seen == [1, 2]


def test_collect_results_accumulates_errors() -> None:
    assert collect_results([Ok(1), Ok(2)]) == Ok([1, 2])
    assert collect_results([Ok(1), Err("a"), Err("b")]) == Err(["a", "b"])
