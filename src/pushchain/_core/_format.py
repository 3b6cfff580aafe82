from collections.abc import Iterable

import cytoolz as cz


def iter_repr(data: Iterable[object], max_items: int) -> str:
    shown = tuple(cz.itertoolz.take(max_items + 1, data))
    body = ", ".join(repr(item) for item in shown[:max_items])
    if len(shown) > max_items:
        return f"{body}, ..." if body else "..."
    return body
