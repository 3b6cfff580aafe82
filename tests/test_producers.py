"""Tests for the sources of push traversals."""

from collections.abc import Iterable

import pytest

import pushchain as pc
from tests._recording import always_stop, stop_after

TREE: dict[str, list[str]] = {
    "root": ["a", "b"],
    "a": ["a1", "a2"],
    "a1": [],
    "a2": [],
    "b": ["b1"],
    "b1": [],
}


def _children(node: str) -> Iterable[str]:
    return TREE[node]


class TestFrom:
    def test_iterable(self) -> None:
        assert pc.Traverse.from_([1, 2, 3]).collect(list) == [1, 2, 3]

    def test_unpacked_values(self) -> None:
        assert pc.Traverse.from_(1, 2, 3).collect(list) == [1, 2, 3]

    def test_single_value(self) -> None:
        assert pc.Traverse.from_(42).collect(list) == [42]

    def test_generator(self) -> None:
        assert pc.Traverse.from_(x * x for x in range(4)).collect(list) == [0, 1, 4, 9]

    def test_traverse_is_returned_as_is(self) -> None:
        once = pc.Traverse.once(1)
        assert pc.Traverse.from_(once) is once
        assert pc.Traverse.from_(once).collect(list) == [1]
        assert pc.Traverse.from_(pc.Traverse.from_range(0, 3)).collect(list) == [0, 1, 2]

    def test_stop(self) -> None:
        consumed: list[int] = []
        source = iter([1, 2, 3, 4])
        pc.Traverse.from_(source).traverse(stop_after(2, consumed))
        assert consumed == [1, 2]
        assert list(source) == [3, 4]


class TestFromFn:
    def test_custom_producer(self) -> None:
        def _countdown(consumer: pc.Consumer[int]) -> None:
            for i in (3, 2, 1):
                if consumer(i):
                    return

        assert pc.Traverse.from_fn(_countdown).collect(list) == [3, 2, 1]

    def test_ignored_stop_is_enforced(self) -> None:
        calls: list[int] = []

        def _stubborn(consumer: pc.Consumer[int]) -> None:
            for i in range(5):
                calls.append(i)
                consumer(i)

        received: list[int] = []
        pc.Traverse.from_fn(_stubborn).traverse(stop_after(2, received))
        assert received == [0, 1]
        assert calls == [0, 1, 2, 3, 4]

    def test_guard_keeps_answering_stop(self) -> None:
        answers: list[object] = []

        def _stubborn(consumer: pc.Consumer[int]) -> None:
            answers.extend(consumer(i) for i in range(3))

        pc.Traverse.from_fn(_stubborn).traverse(always_stop)
        assert answers == [True, True, True]


class TestFromRange:
    def test_ints(self) -> None:
        assert pc.Traverse.from_range(0, 10, 3).collect(list) == [0, 3, 6, 9]

    def test_negative_step(self) -> None:
        assert pc.Traverse.from_range(3, 0, -1).collect(list) == [3, 2, 1]

    def test_floats(self) -> None:
        assert pc.Traverse.from_range(0.0, 1.0, 0.25).collect(list) == [0.0, 0.25, 0.5, 0.75]

    def test_empty(self) -> None:
        assert pc.Traverse.from_range(5, 5).count() == 0

    def test_zero_step(self) -> None:
        with pytest.raises(ValueError, match="zero"):
            pc.Traverse.from_range(0, 10, 0)


def test_successors() -> None:
    result = pc.Traverse.successors(lambda x: x * 2, 1).take(5)
    assert result.collect(list) == [1, 2, 4, 8, 16]


def test_successors_stop_on_seed() -> None:
    calls: list[int] = []

    def _next(x: int) -> int:
        calls.append(x)
        return x + 1

    assert pc.Traverse.successors(_next, 0).take(1).collect(list) == [0]
    assert calls == []


def test_empty() -> None:
    received: list[object] = []
    pc.Traverse.empty().traverse(received.append)
    assert received == []


def test_once() -> None:
    assert pc.Traverse.once("x").collect(list) == ["x"]
    assert pc.Traverse.once(None).count() == 1


class TestWalk:
    def test_pre_order(self) -> None:
        result = pc.Traverse.walk("root", _children).collect(list)
        assert result == ["root", "a", "a1", "a2", "b", "b1"]

    def test_stop_inside_subtree(self) -> None:
        visited: list[str] = []

        def _tracked(node: str) -> Iterable[str]:
            visited.append(node)
            return TREE[node]

        result = pc.Traverse.walk("root", _tracked).take(3).collect(list)
        assert result == ["root", "a", "a1"]
        assert "b" not in visited

    def test_leaf_root(self) -> None:
        assert pc.Traverse.walk("b1", _children).collect(list) == ["b1"]

    def test_with_adaptors(self) -> None:
        leaves = pc.Traverse.walk("root", _children).filter(lambda n: not TREE[n])
        assert leaves.collect(list) == ["a1", "a2", "b1"]


class TestReTraversal:
    def test_re_iterable_source_replays(self) -> None:
        pipeline = pc.Traverse.from_([1, 2, 3]).enumerate().skip(1).take(1)
        assert pipeline.collect(list) == [(1, 2)]
        assert pipeline.collect(list) == [(1, 2)]

    def test_one_shot_source_is_exhausted(self) -> None:
        pipeline = pc.Traverse.from_(iter([1, 2, 3])).map(str)
        assert pipeline.collect(str) == "123"
        assert pipeline.collect(str) == ""

    def test_successors_replay_from_seed(self) -> None:
        pipeline = pc.Traverse.successors(lambda x: x + 1, 0).take(3)
        assert pipeline.sum() == 3
        assert pipeline.sum() == 3
