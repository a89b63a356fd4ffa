"""Recursive search for a Duplicator strategy in the k-round EF game."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Hashable, Iterable, Mapping, Optional, Sequence

from eftools.core.graph import Graph, coerce_graph
from eftools.core.ids import VertexId
from .partial_iso import Moves, _is_partial_iso, normalize_moves, reverse_moves
from .strategy import Continue, DuplicatorStrategy, Terminal


logger = logging.getLogger(__name__)


def _was_picked(moves: Moves, v: VertexId) -> bool:
    return any(l == v or r == v for l, r in moves)


def _answer_all(
    strategy: DuplicatorStrategy,
    k: int,
    gS: Graph,
    gD: Graph,
    moves: Moves,
) -> bool:
    """
    Spoiler picks from gS, Duplicator answers from gD; moves are (gS, gD).
    Fills `strategy` with the first winning answer for every unused Spoiler
    vertex.  Returns False as soon as one Spoiler vertex has no answer.
    """
    for s in gS:
        if _was_picked(moves, s):
            continue
        found = False
        for d in gD:
            # a move never pairs a vertex with its own name
            if d == s or _was_picked(moves, d):
                continue
            extended = moves + ((s, d),)
            if not _is_partial_iso(gS, gD, extended):
                continue
            sub = _search(k - 1, gS, gD, extended)
            if sub is None:
                continue
            strategy[s] = Continue(d, sub) if sub else Terminal(d)
            found = True
            break
        if not found:
            logger.debug("k=%d: Spoiler wins by picking %s after %s", k, s, moves)
            return False
    return True


def _search(k: int, g1: Graph, g2: Graph, moves: Moves) -> Optional[DuplicatorStrategy]:
    strategy: DuplicatorStrategy = {}
    if k == 0:
        return strategy
    if not _answer_all(strategy, k, g1, g2, moves):
        return None
    if not _answer_all(strategy, k, g2, g1, reverse_moves(moves)):
        return None
    return strategy


def _check_moves(moves: Moves) -> None:
    seen = Counter(v for mv in moves for v in mv)
    reused = sorted(v.key for v, n in seen.items() if n > 1)
    if reused:
        raise ValueError(f"Initial moves reuse vertices: {reused}")


def find_duplicator_strategy(
    k: int,
    g1: Mapping[Hashable, Iterable[Hashable]],
    g2: Mapping[Hashable, Iterable[Hashable]],
    moves: Iterable[Sequence[Hashable]] = (),
) -> Optional[DuplicatorStrategy]:
    """
    Find a Duplicator strategy for the k-round EF game on (g1, g2) starting
    from the committed `moves` ((g1-vertex, g2-vertex) pairs).

    Returns
    -------
    dict or None
        Strategy keyed by Spoiler's vertex (from either graph), or None if
        Spoiler can win.  The empty dict means no further rounds are needed.

    Candidates are tried in each graph's vertex order and the first winning
    answer is kept.  Cost is exponential in k; intended for small graphs.
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise TypeError(f"k must be an int, got {type(k).__name__}")
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    mv = normalize_moves(moves)
    _check_moves(mv)

    G1 = coerce_graph(g1)
    G2 = coerce_graph(g2)
    logger.debug(
        "searching %d-round game: |V1|=%d |V2|=%d, %d initial moves",
        k, len(G1), len(G2), len(mv),
    )
    return _search(k, G1, G2, mv)
