from __future__ import annotations

import networkx as nx

from eftools.core.graph import Graph, edges_of
from eftools.core.ids import VertexId


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def graph_to_nx(g: Graph) -> nx.Graph:
    """
    Build a simple undirected NetworkX graph whose nodes are the VertexIds of g.
    Isolated vertices are kept.
    """
    G = nx.Graph()
    G.add_nodes_from(g)
    G.add_edges_from(edges_of(g))
    return G


def nx_to_graph(G: nx.Graph) -> Graph:
    """
    Convert a NetworkX graph to a Graph, keeping every node (isolated ones too)
    in G's node order.
    """
    if G.is_directed():
        G = G.to_undirected()
    return {
        VertexId.of(u): frozenset(VertexId.of(v) for v in G.neighbors(u))
        for u in G.nodes()
    }


def g6_to_graph(g6: str) -> Graph:
    """
    Parse a graph6 string into a Graph on vertices 0..n-1.
    """
    s = strip_graph6_header(g6)
    G = nx.from_graph6_bytes(s.encode("ascii"))
    # graph6 is simple by design, but guard anyway
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    return nx_to_graph(G)
