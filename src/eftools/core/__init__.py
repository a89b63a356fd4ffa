from .ids import VertexId, as_vertex
from .graph import (
    Graph,
    make_symmetric_graph,
    coerce_graph,
    neighbors,
    has_edge,
    vertices,
    edges_of,
)

__all__ = [
    "VertexId",
    "as_vertex",
    "Graph",
    "make_symmetric_graph",
    "coerce_graph",
    "neighbors",
    "has_edge",
    "vertices",
    "edges_of",
]
