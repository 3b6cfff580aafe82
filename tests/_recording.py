"""Producers recording the work they do, to check early termination."""

from collections.abc import Iterable

import pushchain as pc


class Recorder[T](pc.Traverse[T]):
    """Pushes the elements of **data**, and remembers every element it emitted."""

    def __init__(self, data: Iterable[T]) -> None:
        self.data = tuple(data)
        self.emitted: list[T] = []

    def traverse(self, consumer: pc.Consumer[T]) -> None:
        for item in self.data:
            self.emitted.append(item)
            if consumer(item):
                return


def stop_after[T](k: int, received: list[T]) -> pc.Consumer[T]:
    """Consumer gathering elements into **received**, asking to stop after the k-th one."""

    def _consumer(item: T) -> bool:
        received.append(item)
        return len(received) >= k

    return _consumer


def always_stop(_: object) -> bool:
    return True
