"""
circcode Split Graph

The representing graph G(X) of a code X (Fimmel, Michel, Strüngmann 2016,
"n-Nucleotide circular codes in graph theory"):

    V(X) = { N1...Ni, Ni+1...Nn : N1N2...Nn in X, 0 < i < n }
    E(X) = { [N1...Ni, Ni+1...Nn] : N1N2...Nn in X, 0 < i < n }

Every word of length n is read in n - 1 ways as a prefix/suffix pair. The
shape of G(X) decides the circular properties of X:

- X is circular iff G(X) is acyclic;
- X is comma-free iff the longest path of G(X) has at most 2 edges, and
  strong comma-free iff it has exactly 1;
- the longest cycle gives the exact k for which X is k-circular.

Storage is a networkx DiGraph keyed by vertex index (node attribute
"vertex", edge attribute "edge") next to the ordered vertex and edge lists.
The lists fix enumeration order: after construction vertices are sorted by
index and edges by origin index, and every cycle/path search walks them in
that order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

import networkx as nx

from circcode.code import Code
from circcode.elements import Edge, Vertex
from circcode.errors import (
    EmptyCodeError,
    ErrorKind,
    GraphError,
    NoSubgraphError,
)

logger = logging.getLogger(__name__)

Path = list[Edge]


@dataclass
class _CycleSearch:
    """Accumulators shared by one all_cycles() call."""
    visited: set[Edge] = field(default_factory=set)
    cycles: list[Path] = field(default_factory=list)
    seen: set[tuple[Edge, ...]] = field(default_factory=set)

    def add(self, cycle: Path) -> None:
        key = tuple(cycle)
        if key not in self.seen:
            self.seen.add(key)
            self.cycles.append(cycle)


class SplitGraph:
    """The graph associated to a code.

    Build with SplitGraph.from_code(); sub-graphs come from subgraph(),
    component(), cycles_subgraph() and longest_paths_subgraph().
    """

    def __init__(self, alphabet: Sequence[str]) -> None:
        self._alphabet: list[str] = list(alphabet)
        self._graph = nx.DiGraph()
        self._vertices: list[Vertex] = []
        self._edges: list[Edge] = []

    @classmethod
    def from_code(cls, code: Code) -> SplitGraph:
        """Split every word of `code` at every inner position.

        Raises:
            EmptyCodeError: the code has no words.
            VertexError: a word uses a symbol outside the code's alphabet.
        """
        if len(code) == 0:
            raise EmptyCodeError("cannot build a graph without words")

        graph = cls(code.alphabet)
        for word in code.words:
            graph._add_word(word)
        graph._vertices.sort(key=lambda v: v.index)
        graph._edges.sort(key=lambda e: e.source.index)
        return graph

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def _add_word(self, word: str) -> None:
        for split in range(1, len(word)):
            prefix = self._add_vertex(word[:split])
            suffix = self._add_vertex(word[split:])
            self._add_edge(prefix, suffix)

    def _add_vertex(self, label: str) -> Vertex:
        vertex = Vertex.from_label(label, self._alphabet)
        return self._register_vertex(vertex)

    def _register_vertex(self, vertex: Vertex) -> Vertex:
        """Insert `vertex` unless a vertex with its index exists; return the stored one."""
        if vertex.index in self._graph:
            return self._graph.nodes[vertex.index]["vertex"]
        self._graph.add_node(vertex.index, vertex=vertex)
        self._vertices.append(vertex)
        return vertex

    def _add_edge(self, source: Vertex, target: Vertex) -> Edge:
        if self._graph.has_edge(source.index, target.index):
            return self._graph.edges[source.index, target.index]["edge"]
        edge = Edge(source, target)
        self._graph.add_edge(source.index, target.index, edge=edge)
        self._edges.append(edge)
        return edge

    def _empty_like(self) -> SplitGraph:
        return SplitGraph(self._alphabet)

    def _copy_edge_into(self, graph: SplitGraph, edge: Edge) -> None:
        target = graph._register_vertex(edge.target)
        source = graph._register_vertex(edge.source)
        graph._add_edge(source, target)

    # ------------------------------------------------------------------
    # Sub-graphs
    # ------------------------------------------------------------------

    def has_edge(self, edge: Edge) -> bool:
        return self._graph.has_edge(*edge.key)

    def subgraph(self, edges: Iterable[Edge]) -> SplitGraph:
        """Graph made of exactly `edges` and their endpoints.

        Repeated edges are kept once, in first-seen order.

        Raises:
            NoSubgraphError: an edge is not part of this graph.
        """
        sub = self._empty_like()
        for edge in edges:
            if not self.has_edge(edge):
                raise NoSubgraphError(f"{edge} is not an edge of this graph")
            self._copy_edge_into(sub, edge)
        return sub

    def component(self, length: int) -> SplitGraph:
        """Edges with an endpoint label of exactly `length` symbols.

        Raises:
            GraphError(EMPTY_CODE): no edge qualifies.
        """
        sub = self._empty_like()
        for edge in self._edges:
            if len(edge.source) == length or len(edge.target) == length:
                self._copy_edge_into(sub, edge)
        if not sub._edges:
            raise GraphError(ErrorKind.EMPTY_CODE, f"no edge touches a vertex of length {length}")
        return sub

    def cycles_subgraph(self) -> tuple[bool, SplitGraph]:
        """(is_cyclic, graph of every edge lying on a cycle)."""
        is_cyclic, cycles = self.all_cycles()
        return is_cyclic, self.subgraph(e for cycle in cycles for e in cycle)

    def longest_paths_subgraph(self) -> SplitGraph:
        """Graph of every edge lying on a longest path.

        Raises:
            GraphError(EMPTY_CODE): the graph is cyclic, longest paths are undefined.
        """
        paths = self.all_longest_paths()
        if paths is None:
            raise GraphError(ErrorKind.EMPTY_CODE, "cyclic graph has no longest path")
        return self.subgraph(e for path in paths for e in path)

    # ------------------------------------------------------------------
    # Traversal helpers
    # ------------------------------------------------------------------

    def outgoing(self, vertex: Vertex) -> list[Edge]:
        """Edges leaving `vertex`, in edge-list order."""
        return [data["edge"] for _, _, data in self._graph.out_edges(vertex.index, data=True)]

    def start_edges(self) -> list[Edge]:
        """Edges leaving a vertex without incoming edges, in edge-list order."""
        return [e for e in self._edges if self._graph.in_degree(e.source.index) == 0]

    # ------------------------------------------------------------------
    # Cycles
    # ------------------------------------------------------------------

    def is_cyclic(self) -> bool:
        """True iff G(X) has a directed cycle (self-loops count)."""
        return not nx.is_directed_acyclic_graph(self._graph)

    def all_cycles(self) -> tuple[bool, list[Path]]:
        """Find every distinct cycle of the graph.

        Depth-first search from the start edges, then from every edge not
        yet visited by an earlier search. A cycle closes when the path
        returns to a vertex it already left (or an edge loops on its own
        vertex). Each cycle is rotated to begin at the edge whose origin
        has the smallest index, and kept once.

        Returns:
            (is_cyclic, cycles sorted by ascending length)
        """
        search = _CycleSearch()
        for edge in self.start_edges() + self._edges:
            if edge in search.visited:
                continue
            search.visited.add(edge)
            self._walk_cycles([edge], search)

        cycles = sorted(search.cycles, key=len)
        logger.debug("cycle search: %d distinct cycles over %d edges", len(cycles), len(self._edges))
        return bool(cycles), cycles

    def _walk_cycles(self, path: Path, search: _CycleSearch) -> None:
        current = path[-1]
        if current.is_loop:
            search.add([current])
            return

        origins = [e.source for e in path]
        if current.target in origins:
            cycle = path[origins.index(current.target):]
            pivot = min(range(len(cycle)), key=lambda i: cycle[i].source.index)
            search.add(cycle[pivot:] + cycle[:pivot])
            return

        for edge in self.outgoing(current.target):
            search.visited.add(edge)
            self._walk_cycles(path + [edge], search)

    # ------------------------------------------------------------------
    # Longest paths
    # ------------------------------------------------------------------

    def all_longest_paths(self) -> Optional[list[Path]]:
        """Every path tied for the maximum number of edges.

        Returns None if the graph is cyclic (paths are unbounded) and an
        empty list if the graph has no edges.
        """
        if self.is_cyclic():
            return None

        paths: list[Path] = []
        for edge in self.start_edges():
            self._extend_paths([edge], paths)
        if not paths:
            return []

        longest = max(len(p) for p in paths)
        result = [p for p in paths if len(p) == longest]
        logger.debug("longest paths: %d of length %d", len(result), longest)
        return result

    def _extend_paths(self, path: Path, paths: list[Path]) -> None:
        following = self.outgoing(path[-1].target)
        if not following:
            paths.append(path)
            return
        for edge in following:
            self._extend_paths(path + [edge], paths)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def alphabet(self) -> list[str]:
        return list(self._alphabet)

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def vertex_labels(self) -> list[str]:
        return [v.label for v in self._vertices]

    def edge_labels(self) -> list[str]:
        """Edges flattened to [from, to, from, to, ...] vertex labels."""
        return [label for e in self._edges for label in (e.source.label, e.target.label)]

    @staticmethod
    def path_labels(path: Sequence[Edge]) -> list[str]:
        """Vertex labels along `path`, first origin to last target."""
        if not path:
            return []
        return [e.source.label for e in path] + [path[-1].target.label]

    @staticmethod
    def path_string(path: Sequence[Edge]) -> str:
        return " -> ".join(SplitGraph.path_labels(path))

    def to_networkx(self) -> nx.DiGraph:
        """Copy of the graph with vertex labels as nodes and words on edges."""
        g = nx.DiGraph()
        for v in self._vertices:
            g.add_node(v.label, index=v.index)
        for e in self._edges:
            g.add_edge(e.source.label, e.target.label, word=e.label)
        return g

    def summary(self) -> str:
        """Human-readable graph summary."""
        lines = [
            f"Split Graph: {len(self._vertices)} vertices, {len(self._edges)} edges",
            "",
            "Vertices:",
        ]
        for v in self._vertices:
            targets = [e.target.label for e in self.outgoing(v)]
            lines.append(f"  {v.label} → {targets}")
        lines.append("")
        lines.append("Edges:")
        for e in self._edges:
            lines.append(f"  {e}")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SplitGraph):
            return NotImplemented
        return (
            self._alphabet == other._alphabet
            and self._vertices == other._vertices
            and self._edges == other._edges
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"<SplitGraph: {len(self._vertices)} vertices, {len(self._edges)} edges>"
