"""
eftools: Ehrenfeucht-Fraisse games on small undirected graphs.

Symmetrize adjacency mappings, check partial isomorphisms, and search for
a winning Duplicator strategy in the k-round game.
"""

from .core.ids import VertexId, as_vertex
from .core.graph import Graph, make_symmetric_graph, coerce_graph
from .game.partial_iso import is_partial_iso
from .game.strategy import (
    Terminal,
    Continue,
    DuplicatorStrategy,
    strategy_to_dict,
    strategy_depth,
    format_strategy,
)
from .game.search import find_duplicator_strategy
from .io.graph6 import g6_to_graph, graph_to_nx, nx_to_graph
from .viz.draw import draw_position

__all__ = [
    # Core
    "VertexId",
    "as_vertex",
    "Graph",
    "make_symmetric_graph",
    "coerce_graph",
    # Game
    "is_partial_iso",
    "find_duplicator_strategy",
    "Terminal",
    "Continue",
    "DuplicatorStrategy",
    "strategy_to_dict",
    "strategy_depth",
    "format_strategy",
    # IO
    "g6_to_graph",
    "graph_to_nx",
    "nx_to_graph",
    # Viz
    "draw_position",
]
