"""Tests for `Option`, `Some` and `NONE`."""

import pytest

import pushchain as pc
from pushchain import OptionUnwrapError


def test_some() -> None:
    opt = pc.Some(0)
    assert opt.is_some()
    assert not opt.is_none()
    assert opt.unwrap() == 0
    assert opt.expect("unused") == 0
    assert opt.unwrap_or(5) == 0
    assert opt.unwrap_or_else(lambda: 5) == 0
    assert opt.map(str) == pc.Some("0")


def test_some_holds_none() -> None:
    opt = pc.Some(None)
    assert opt.is_some()
    assert opt.unwrap() is None
    assert pc.Traverse.from_([None]).find(lambda x: x is None) == pc.Some(None)


def test_none() -> None:
    assert pc.NONE.is_none()
    assert not pc.NONE.is_some()
    assert pc.NONE.unwrap_or(5) == 5
    assert pc.NONE.unwrap_or_else(lambda: 6) == 6
    assert pc.NONE.map(str) is pc.NONE
    assert repr(pc.NONE) == "NONE"
    assert pc.NoneOption() == pc.NONE


def test_none_unwrap() -> None:
    with pytest.raises(OptionUnwrapError, match="unwrap"):
        pc.NONE.unwrap()


def test_none_expect() -> None:
    with pytest.raises(OptionUnwrapError, match="nothing found"):
        pc.NONE.expect("nothing found")
    assert issubclass(OptionUnwrapError, RuntimeError)


@pytest.mark.parametrize(("value", "expected"), [(1, pc.Some(1)), (None, pc.NONE), (0, pc.Some(0))])
def test_from_(value: int | None, expected: pc.Option[int]) -> None:
    assert pc.Option.from_(value) == expected
