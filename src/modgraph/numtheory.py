"""Number theory helpers for the graph of squares mod m."""

from __future__ import annotations

from functools import lru_cache

from modgraph.errors import InvalidModulus


def next_of(i: int, m: int) -> int:
    """Node that ``i`` points to: ``i*i mod m``."""
    return (i * i) % m


@lru_cache(maxsize=None)
def factors_of(m: int, include_one: bool = False) -> tuple[int, ...]:
    """Non-trivial factors of ``m``, led by the sentinel ``0``.

    ``0`` stands for ``m`` itself in modular arithmetic. It is followed by
    every ``f`` in ``2..m // 2`` that divides ``m``, ascending. ``1`` is left
    out unless ``include_one`` is set, in which case it directly follows the
    sentinel.

    The result is cached per ``(m, include_one)``; callers get the same tuple
    on every call.
    """
    if m < 0:
        raise InvalidModulus(m)
    head = (0, 1) if include_one else (0,)
    return head + tuple(f for f in range(2, m // 2 + 1) if m % f == 0)
