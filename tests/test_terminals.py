"""Tests for the terminal operations."""

import pytest

import pushchain as pc
from tests._recording import Recorder

DATA = (3, 1, 4, 1, 5, 9, 2, 6)


class TestCount:
    def test_count(self) -> None:
        assert pc.Traverse.from_(DATA).count() == len(DATA)

    def test_count_empty(self) -> None:
        assert pc.Traverse.empty().count() == 0

    def test_count_drains_source(self) -> None:
        source = Recorder(DATA)
        source.count()
        assert source.emitted == list(DATA)


class TestCollect:
    def test_default_is_seq(self) -> None:
        result = pc.Traverse.from_(DATA).collect()
        assert isinstance(result, pc.Seq)
        assert result.inner() == DATA

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            (list, [1, 2, 2]),
            (tuple, (1, 2, 2)),
            (set, {1, 2}),
            (frozenset, frozenset({1, 2})),
        ],
    )
    def test_builtin_targets(self, target: type, expected: object) -> None:
        assert pc.Traverse.from_([1, 2, 2]).collect(target) == expected

    def test_dict_from_pairs(self) -> None:
        result = pc.Traverse.from_("ab").map(lambda c: (c, ord(c))).collect(dict)
        assert result == {"a": 97, "b": 98}

    def test_str(self) -> None:
        assert pc.Traverse.from_(["ab", "c"]).collect(str) == "abc"

    def test_containers(self) -> None:
        source = pc.Traverse.from_([2, 1, 2])
        assert source.collect(pc.Vec).inner() == [2, 1, 2]
        assert source.collect(pc.Seq).inner() == (2, 1, 2)
        assert source.collect(pc.Set).inner() == frozenset({1, 2})

    def test_custom_target(self) -> None:
        class Histogram:
            def __init__(self, counts: dict[int, int]) -> None:
                self.counts = counts

            @classmethod
            def from_traverse(cls, source: pc.Traverse[int]) -> "Histogram":
                return cls(source.fold({}, lambda acc, x: {**acc, x: acc.get(x, 0) + 1}))

        assert isinstance(Histogram, pc.FromTraverse)
        result = pc.Traverse.from_([1, 2, 1]).collect(Histogram)
        assert result.counts == {1: 2, 2: 1}

    @pytest.mark.parametrize("target", [object, bytes, int])
    def test_unsupported_target(self, target: type) -> None:
        with pytest.raises(TypeError, match="cannot collect"):
            pc.Traverse.from_(DATA).collect(target)


def test_for_each() -> None:
    seen: list[int] = []
    assert pc.Traverse.from_(DATA).for_each(seen.append) is None
    assert seen == list(DATA)


def test_for_each_ignores_return_value() -> None:
    seen: list[int] = []

    def _record(item: int) -> bool:
        seen.append(item)
        return True

    pc.Traverse.from_(DATA).for_each(_record)
    assert seen == list(DATA)


def test_fold() -> None:
    assert pc.Traverse.from_(DATA).fold(0, lambda acc, x: acc * 10 + x) == 31415926


def test_reduce() -> None:
    assert pc.Traverse.from_(DATA).reduce(max) == pc.Some(9)
    assert pc.Traverse.once(7).reduce(max) == pc.Some(7)
    assert pc.Traverse.empty().reduce(max).is_none()


def test_sum() -> None:
    assert pc.Traverse.from_(DATA).sum() == sum(DATA)
    assert pc.Traverse.from_range(0, 1, 0.5).sum() == 0.5
    assert pc.Traverse.from_(["a", "b"]).sum("") == "ab"


class TestShortCircuit:
    def test_find_stops(self) -> None:
        source = Recorder(DATA)
        assert source.find(lambda x: x > 3) == pc.Some(4)
        assert source.emitted == [3, 1, 4]

    def test_find_none(self) -> None:
        assert pc.Traverse.from_(DATA).find(lambda x: x > 100) == pc.NONE

    def test_find_map(self) -> None:
        source = Recorder(DATA)
        result = source.find_map(lambda x: pc.Some(x * 100) if x % 2 == 0 else pc.NONE)
        assert result == pc.Some(400)
        assert source.emitted == [3, 1, 4]

    def test_any(self) -> None:
        source = Recorder(DATA)
        assert source.any(lambda x: x == 1)
        assert source.emitted == [3, 1]
        assert not pc.Traverse.from_([0, "", None]).any()
        assert not pc.Traverse.empty().any()

    def test_all(self) -> None:
        source = Recorder(DATA)
        assert not source.all(lambda x: x > 2)
        assert source.emitted == [3, 1]
        assert pc.Traverse.from_(DATA).all(lambda x: x > 0)
        assert pc.Traverse.empty().all()

    def test_nth(self) -> None:
        source = Recorder(DATA)
        assert source.nth(2) == pc.Some(4)
        assert source.emitted == [3, 1, 4]
        assert pc.Traverse.from_(DATA).nth(0) == pc.Some(3)
        assert pc.Traverse.from_(DATA).nth(len(DATA)) == pc.NONE

    def test_nth_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            pc.Traverse.from_(DATA).nth(-1)

    def test_last(self) -> None:
        assert pc.Traverse.from_(DATA).last() == pc.Some(6)
        assert pc.Traverse.empty().last() == pc.NONE


def test_into() -> None:
    assert pc.Traverse.from_(DATA).into(lambda t, n: t.take(n).count(), 3) == 3
