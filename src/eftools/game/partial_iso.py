from __future__ import annotations

from typing import Hashable, Iterable, Mapping, Sequence, Tuple

from eftools.core.graph import Graph, coerce_graph, neighbors
from eftools.core.ids import VertexId, as_vertex


Move = Tuple[VertexId, VertexId]
Moves = Tuple[Move, ...]


def reverse_moves(moves: Sequence[Move]) -> Moves:
    return tuple((r, l) for l, r in moves)


def _consistent_one_side(gA: Graph, gB: Graph, moves: Sequence[Move]) -> bool:
    """
    For all move pairs (x, y), (x2, y2) with x != x2:
      x2 ~ x in gA  <=>  y2 ~ y in gB.
    Stops at the first violation.
    """
    for x, y in moves:
        adj_x = neighbors(gA, x)
        adj_y = neighbors(gB, y)
        for x2, y2 in moves:
            if x == x2:
                continue
            if (x2 in adj_x) != (y2 in adj_y):
                return False
    return True


def _is_partial_iso(g1: Graph, g2: Graph, moves: Sequence[Move]) -> bool:
    # the reverse pass catches gB edges that gA's side never induces
    return _consistent_one_side(g1, g2, moves) and _consistent_one_side(
        g2, g1, reverse_moves(moves)
    )


def normalize_moves(moves: Iterable[Sequence[Hashable]]) -> Moves:
    out = []
    for mv in moves:
        if len(mv) != 2:
            raise ValueError(f"A move must be a (g1-vertex, g2-vertex) pair, got {mv!r}")
        out.append((as_vertex(mv[0]), as_vertex(mv[1])))
    return tuple(out)


def is_partial_iso(
    g1: Mapping[Hashable, Iterable[Hashable]],
    g2: Mapping[Hashable, Iterable[Hashable]],
    moves: Iterable[Sequence[Hashable]],
) -> bool:
    """
    Does mapping each move's left vertex to its right vertex preserve
    adjacency and non-adjacency between g1 and g2?

    Only the vertices covered by `moves` are checked; this is not an
    isomorphism test.  Vertices missing from a graph have no neighbours.
    """
    return _is_partial_iso(coerce_graph(g1), coerce_graph(g2), normalize_moves(moves))
