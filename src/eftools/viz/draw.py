from __future__ import annotations

from typing import Hashable, Iterable, Mapping, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from eftools.core.graph import coerce_graph
from eftools.game.partial_iso import normalize_moves
from eftools.io.graph6 import graph_to_nx
from .layouts import position_layout


def draw_position(
    g1: Mapping[Hashable, Iterable[Hashable]],
    g2: Mapping[Hashable, Iterable[Hashable]],
    moves: Iterable[Sequence[Hashable]] = (),
    *,
    seed: int = 7,
    node_size: int = 400,
    save_path: str | None = None,
):
    """
    Draw g1 and g2 side by side with the committed moves highlighted.

    Vertices paired by move i share colour C{i} and carry the label "v [i]".
    Paired vertices sit at the same slot along the top of both panels.
    If save_path is set, the figure is saved there and closed; otherwise shown.
    """
    mv = normalize_moves(moves)
    GA = graph_to_nx(coerce_graph(g1))
    GB = graph_to_nx(coerce_graph(g2))

    colourA = {l: f"C{i % 10}" for i, (l, _r) in enumerate(mv)}
    colourB = {r: f"C{i % 10}" for i, (_l, r) in enumerate(mv)}
    tagA = {l: f"{l} [{i}]" for i, (l, _r) in enumerate(mv)}
    tagB = {r: f"{r} [{i}]" for i, (_l, r) in enumerate(mv)}

    fig, axes = plt.subplots(1, 2, figsize=(12, 6))
    panels = (
        (axes[0], "G1", GA, colourA, tagA, [l for l, _r in mv]),
        (axes[1], "G2", GB, colourB, tagB, [r for _l, r in mv]),
    )
    for ax, name, H, colour, tag, pinned in panels:
        ax.set_title(f"{name}   |V|={H.number_of_nodes()}  |E|={H.number_of_edges()}")
        ax.set_axis_off()
        if H.number_of_nodes() == 0:
            continue
        nx.draw_networkx(
            H,
            pos=position_layout(H, pinned, seed=seed),
            ax=ax,
            labels={v: tag.get(v, str(v)) for v in H.nodes()},
            node_color=[colour.get(v, "lightgrey") for v in H.nodes()],
            node_size=node_size,
        )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig
