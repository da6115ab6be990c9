"""
circcode properties

Predicates and numeric properties of codes, composed from the
DecidabilityGraph and the SplitGraph, plus the list-valued graph views
exposed to callers (edges, vertices, cycles, longest paths, components).

The split graph is rebuilt from the code on every call, so a code rotated
with shift() is always judged by its current words. Predicates never raise
on graph construction failure; they log it and return the conservative
answer (False, or K_UNBOUNDED for exact_k_circular).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import networkx as nx

from circcode.code import Code
from circcode.decidability import DecidabilityGraph
from circcode.errors import GraphError
from circcode.graph import SplitGraph

logger = logging.getLogger(__name__)

# exact_k_circular() of a circular code: circular for every k
K_UNBOUNDED = 2**32 - 1


def _split_graph(code: Code) -> Optional[SplitGraph]:
    try:
        return SplitGraph.from_code(code)
    except GraphError as e:
        logger.warning("split graph of %s could not be built: %s", code.id, e)
        return None


# ============================================================================
# Unique decodability
# ============================================================================

def is_code(code: Code) -> bool:
    """Whether every concatenation of words has a single decomposition."""
    return DecidabilityGraph(code).is_code()


def ambiguous_sequences(code: Code) -> list[str]:
    """Every ambiguous sequence witnessed by the decidability search.

    Empty iff the word set is a code. A sequence appears once per way the
    search reached it.
    """
    _, sequences = DecidabilityGraph(code).all_ambiguous_sequences()
    return sequences


# ============================================================================
# Circularity
# ============================================================================

def is_circular(code: Code) -> bool:
    """A code is circular iff its split graph is acyclic.

    Every concatenation of words written on a circle then has a single
    decomposition into words of the code.
    """
    graph = _split_graph(code)
    if graph is None:
        return False
    return not graph.is_cyclic()


def _longest_path_length(code: Code) -> Optional[int]:
    """Edge count of the longest paths, None if cyclic or unbuildable."""
    graph = _split_graph(code)
    if graph is None:
        return None
    paths = graph.all_longest_paths()
    if paths is None:
        return None
    return len(paths[0]) if paths else 0


def is_comma_free(code: Code) -> bool:
    """No suffix + prefix of two words (concatenated) forms a word of the code."""
    length = _longest_path_length(code)
    return length is not None and length <= 2


def is_strong_comma_free(code: Code) -> bool:
    """No proper suffix of a word is a proper prefix of a word.

    A code of single letters has no proper suffixes at all and counts as
    strong comma-free.
    """
    length = _longest_path_length(code)
    return length is not None and length <= 1


def exact_k_circular(code: Code) -> int:
    """The exact k for which `code` is k-circular.

    A k-circular code decodes uniquely every circular concatenation of fewer
    than k words. The longest cycle of the split graph with c edges gives
    k = c/2 - 1 when c is even and k = c - 1 when c is odd. Circular codes
    return K_UNBOUNDED.
    """
    graph = _split_graph(code)
    if graph is None:
        return K_UNBOUNDED
    is_cyclic, cycles = graph.all_cycles()
    if not is_cyclic or not cycles:
        return K_UNBOUNDED

    c = len(cycles[-1])
    if c % 2 == 0:
        return c // 2 - 1
    return c - 1


def is_cn_circular(code: Code) -> bool:
    """Whether every circular permutation of the code is circular again.

    The code is rotated by one symbol at a time, as many times as its
    longest word allows, and each rotation must be circular.
    """
    rotated = code.copy()
    for _ in range(1, code.tuple_lengths[-1]):
        rotated.shift(1)
        if not is_circular(rotated):
            return False
    return is_circular(code)


def shift(code: Code, amount: int) -> Code:
    """A copy of `code` with every word rotated by `amount` positions."""
    rotated = code.copy()
    rotated.shift(amount)
    return rotated


# ============================================================================
# Graph views
# ============================================================================

def representing_graph(code: Code) -> SplitGraph:
    """The split graph associated to `code`.

    Raises:
        GraphError: the graph cannot be built.
    """
    return SplitGraph.from_code(code)


def graph_edges(code: Code) -> list[str]:
    """Edges of G(X) as a flat [from, to, from, to, ...] label list."""
    return representing_graph(code).edge_labels()


def graph_vertices(code: Code) -> list[str]:
    return representing_graph(code).vertex_labels()


def _cyclic_edges(graph: SplitGraph) -> list[str]:
    _, sub = graph.cycles_subgraph()
    return sub.edge_labels()


def _longest_path_edges(graph: SplitGraph) -> list[str]:
    if graph.is_cyclic():
        return []
    return graph.longest_paths_subgraph().edge_labels()


def cyclic_subgraph_edges(code: Code) -> list[str]:
    """Edges lying on any cycle, flattened like graph_edges()."""
    return _cyclic_edges(representing_graph(code))


def longest_path_subgraph_edges(code: Code) -> list[str]:
    """Edges lying on any longest path; empty for a cyclic graph."""
    return _longest_path_edges(representing_graph(code))


def component_edges(code: Code, length: int) -> list[str]:
    """Edges of the component of splits touching a `length`-symbol vertex.

    Raises:
        GraphError(EMPTY_CODE): the component has no edges.
    """
    return representing_graph(code).component(length).edge_labels()


def component_cyclic_edges(code: Code, length: int) -> list[str]:
    return _cyclic_edges(representing_graph(code).component(length))


def component_longest_path_edges(code: Code, length: int) -> list[str]:
    return _longest_path_edges(representing_graph(code).component(length))


def all_longest_paths(code: Code) -> list[list[str]]:
    """Every longest path as a vertex-label sequence; empty if cyclic."""
    paths = representing_graph(code).all_longest_paths()
    if paths is None:
        return []
    return [SplitGraph.path_labels(p) for p in paths]


def all_cyclic_paths(code: Code) -> list[list[str]]:
    """Every distinct cycle as a vertex-label sequence, shortest first."""
    _, cycles = representing_graph(code).all_cycles()
    return [SplitGraph.path_labels(c) for c in cycles]


# ============================================================================
# Export
# ============================================================================

def representing_graph_obj(
    code: Code,
    show_cycles: bool = False,
    show_longest_path: bool = False,
) -> dict[str, Any]:
    """Plain-data view of G(X) for plotting or JSON.

    Keys: vertices, edges, and, when requested, circular_path_edges and
    longest_path_edges (None otherwise). Edge lists are flattened pairs.
    """
    graph = representing_graph(code)
    return {
        "vertices": graph.vertex_labels(),
        "edges": graph.edge_labels(),
        "circular_path_edges": _cyclic_edges(graph) if show_cycles else None,
        "longest_path_edges": _longest_path_edges(graph) if show_longest_path else None,
    }


def representing_nx_graph(
    code: Code,
    show_cycles: bool = False,
    show_longest_path: bool = False,
) -> nx.DiGraph:
    """G(X) as a networkx DiGraph with a "color" attribute on every edge.

    Edges are black; edges on a cycle turn red and edges on a longest path
    turn green when the matching flag is set.
    """
    obj = representing_graph_obj(code, show_cycles, show_longest_path)
    g = nx.DiGraph()
    g.add_nodes_from(obj["vertices"], color="white")

    def paint(flat: list[str], color: str) -> None:
        for source, target in zip(flat[::2], flat[1::2]):
            g.add_edge(source, target, color=color)

    paint(obj["edges"], "black")
    if obj["circular_path_edges"] is not None:
        paint(obj["circular_path_edges"], "red")
    if obj["longest_path_edges"] is not None:
        paint(obj["longest_path_edges"], "green")
    return g


def summary(code: Code) -> dict[str, Any]:
    """Every property of `code` in one dict."""
    k = exact_k_circular(code)
    return {
        "id": code.id,
        "words": code.words,
        "alphabet": code.alphabet,
        "tuple_lengths": code.tuple_lengths,
        "is_code": is_code(code),
        "is_circular": is_circular(code),
        "is_cn_circular": is_cn_circular(code),
        "is_comma_free": is_comma_free(code),
        "is_strong_comma_free": is_strong_comma_free(code),
        "exact_k_circular": None if k == K_UNBOUNDED else k,
    }
