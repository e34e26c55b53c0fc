"""Dense ranking over aggregated metrics.

Equivalent to ``DENSE_RANK() OVER (ORDER BY metric DESC)``: tied metrics share
a rank and the next distinct metric gets the following rank, with no gaps.
"""

from __future__ import annotations

from typing import Dict, Hashable, Mapping, NamedTuple, Optional, TypeVar, Union

K = TypeVar("K", bound=Hashable)
Number = Union[int, float]


class Ranked(NamedTuple):
    value: Number
    rank: int


def dense_rank(metrics: Mapping[K, Number]) -> Dict[K, Ranked]:
    """Rank every key by descending metric.

    The returned dict is ordered by rank; keys with equal metrics keep the
    iteration order of ``metrics``.
    """
    ordered = sorted(metrics.items(), key=lambda item: item[1], reverse=True)
    ranked: Dict[K, Ranked] = {}
    rank = 0
    previous: Optional[Number] = None
    for key, value in ordered:
        if previous is None or value != previous:
            rank += 1
            previous = value
        ranked[key] = Ranked(value, rank)
    return ranked


def top_ranked(metrics: Mapping[K, Number], max_rank: int = 1) -> Dict[K, Ranked]:
    """Keep entries whose dense rank is at most ``max_rank``.

    Ties at the boundary are all kept, so the result may hold more than
    ``max_rank`` entries.
    """
    if max_rank < 1:
        raise ValueError(f"max_rank must be >= 1, got {max_rank}")
    return {key: entry for key, entry in dense_rank(metrics).items() if entry.rank <= max_rank}
