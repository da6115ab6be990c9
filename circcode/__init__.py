"""
circcode - combinatorial properties of codes over finite alphabets

Decides whether a set of words is a code (uniquely decodable), circular,
Cn-circular, comma-free, strong comma-free, and for which exact k it is
k-circular.

The Decidability Graph answers unique decodability and yields ambiguous
sequences; the Split Graph (the representing graph G(X)) answers every
circular property through its cycles and longest paths.
"""

__version__ = "0.1.0"

from circcode.errors import (
    ErrorKind,
    CircCodeError,
    CodeError,
    EmptyCodeError,
    EmptyWordError,
    GraphError,
    VertexError,
    NoSubgraphError,
)
from circcode.code import Code
from circcode.elements import Vertex, Edge, vertex_index
from circcode.decidability import DecidabilityGraph, decompositions
from circcode.graph import SplitGraph
from circcode.properties import (
    K_UNBOUNDED,
    is_code,
    ambiguous_sequences,
    is_circular,
    is_comma_free,
    is_strong_comma_free,
    exact_k_circular,
    is_cn_circular,
    shift,
    representing_graph,
    graph_edges,
    graph_vertices,
    cyclic_subgraph_edges,
    longest_path_subgraph_edges,
    component_edges,
    component_cyclic_edges,
    component_longest_path_edges,
    all_longest_paths,
    all_cyclic_paths,
    representing_graph_obj,
    representing_nx_graph,
    summary,
)

__all__ = [
    "ErrorKind",
    "CircCodeError",
    "CodeError",
    "EmptyCodeError",
    "EmptyWordError",
    "GraphError",
    "VertexError",
    "NoSubgraphError",
    "Code",
    "Vertex",
    "Edge",
    "vertex_index",
    "DecidabilityGraph",
    "decompositions",
    "SplitGraph",
    "K_UNBOUNDED",
    "is_code",
    "ambiguous_sequences",
    "is_circular",
    "is_comma_free",
    "is_strong_comma_free",
    "exact_k_circular",
    "is_cn_circular",
    "shift",
    "representing_graph",
    "graph_edges",
    "graph_vertices",
    "cyclic_subgraph_edges",
    "longest_path_subgraph_edges",
    "component_edges",
    "component_cyclic_edges",
    "component_longest_path_edges",
    "all_longest_paths",
    "all_cyclic_paths",
    "representing_graph_obj",
    "representing_nx_graph",
    "summary",
]
