from __future__ import annotations

from typing import Hashable, Sequence

import networkx as nx


def pinned_positions(pinned: Sequence[Hashable], y: float = 1.0) -> dict:
    """
    Evenly spaced slots along the line at height y, in the given order.
    Move i lands on slot i in both panels.
    """
    n = len(pinned)
    return {v: (-1.0 + 2.0 * (i + 1) / (n + 1), y) for i, v in enumerate(pinned)}


def position_layout(
    G: nx.Graph,
    pinned: Sequence[Hashable] = (),
    seed: int = 7,
    iterations: int = 200,
):
    """
    Spring layout for one side of a game position.

    Vertices already committed to a move are held at their slot from
    pinned_positions(pinned); the rest settle around them.  Pinned vertices
    that are not nodes of G are ignored.
    """
    if G.number_of_nodes() == 0:
        return {}
    init = {v: p for v, p in pinned_positions(pinned).items() if v in G}
    if not init:
        return nx.spring_layout(G, seed=seed, iterations=iterations)
    return nx.spring_layout(
        G, pos=init, fixed=list(init), seed=seed, iterations=iterations
    )
