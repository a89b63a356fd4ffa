from .graph6 import strip_graph6_header, graph_to_nx, nx_to_graph, g6_to_graph

__all__ = [
    "strip_graph6_header",
    "graph_to_nx",
    "nx_to_graph",
    "g6_to_graph",
]
