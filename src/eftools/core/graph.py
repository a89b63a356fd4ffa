from __future__ import annotations

from typing import Dict, FrozenSet, Hashable, Iterable, List, Mapping, Set, Tuple

from .ids import VertexId, as_vertex


Graph = Dict[VertexId, FrozenSet[VertexId]]

_EMPTY: FrozenSet[VertexId] = frozenset()


def _ordered(items: Iterable[Hashable]) -> List[VertexId]:
    """
    Neighbour collections in scan order: sequences as given, unordered
    collections sorted by canonical key.
    """
    vs = [as_vertex(x) for x in items]
    if isinstance(items, (set, frozenset)):
        vs.sort()
    return vs


def make_symmetric_graph(raw: Mapping[Hashable, Iterable[Hashable]]) -> Graph:
    """
    Close a raw adjacency mapping under edge reversal.

    Every declared edge (u, v) yields both u->v and v->u.  A vertex with no
    declared edge gets no entry unless some edge points at it.

    Vertex order of the result is first insertion while scanning `raw`:
    the source on its first edge, then each target.  This order is what
    the strategy search enumerates.
    """
    sym: Dict[VertexId, Set[VertexId]] = {}
    for u_raw, neigh in raw.items():
        u = as_vertex(u_raw)
        for v in _ordered(neigh):
            sym.setdefault(u, set()).add(v)
            sym.setdefault(v, set()).add(u)
    return {u: frozenset(ns) for u, ns in sym.items()}


def coerce_graph(g: Mapping[Hashable, Iterable[Hashable]]) -> Graph:
    """Convert any {id: neighbours} mapping to a Graph without symmetrizing."""
    return {as_vertex(u): frozenset(as_vertex(v) for v in neigh) for u, neigh in g.items()}


def neighbors(g: Graph, v: VertexId) -> FrozenSet[VertexId]:
    return g.get(v, _EMPTY)


def has_edge(g: Graph, u: Hashable, v: Hashable) -> bool:
    return as_vertex(v) in neighbors(g, as_vertex(u))


def vertices(g: Graph) -> List[VertexId]:
    return list(g)


def edges_of(g: Graph) -> List[Tuple[VertexId, VertexId]]:
    """
    Undirected edges, each once, in vertex enumeration order.
    """
    pos = {v: i for i, v in enumerate(g)}
    eds: List[Tuple[VertexId, VertexId]] = []
    for u, neigh in g.items():
        for v in sorted(neigh, key=lambda w: (pos.get(w, len(pos)), w.key)):
            if v not in pos or pos[v] >= pos[u]:
                eds.append((u, v))
    return eds
