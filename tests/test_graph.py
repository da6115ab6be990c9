"""
circcode Split Graph Test Suite

Tests the representing graph G(X):
1. Construction, vertex order and edge order
2. Cyclicity
3. Cycle enumeration and canonical rotation
4. Sub-graphs from edge lists
5. Components
6. Longest paths
7. Export and introspection
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import networkx as nx
import pytest

from circcode import Code, Edge, ErrorKind, GraphError, NoSubgraphError, SplitGraph, Vertex


def make_graph(*words: str) -> SplitGraph:
    return SplitGraph.from_code(Code(list(words)))


# --- Test 1: Construction ---

def test_vertices_sorted_by_index():
    graph = make_graph("ABB", "AB", "AAB")
    assert graph.vertex_labels() == ["A", "B", "AA", "AB", "BB"]


def test_edges_sorted_by_origin():
    graph = make_graph("ABC", "DEF")
    assert graph.vertex_labels() == ["A", "C", "D", "F", "AB", "BC", "DE", "EF"]
    assert graph.edge_labels() == ["A", "BC", "D", "EF", "AB", "C", "DE", "F"]
    assert [e.label for e in graph.edges] == ["ABC", "DEF", "ABC", "DEF"]


def test_shared_vertices_are_one_node():
    graph = make_graph("AB", "BA", "AA")
    assert graph.vertex_labels() == ["A", "B"]
    assert len(graph.edges) == 3
    a = graph.vertices[0]
    assert all(e.source is a for e in graph.edges if e.source.label == "A")


def test_one_letter_words_have_no_edges():
    graph = make_graph("A", "C")
    assert graph.edges == []
    assert graph.vertices == []
    assert not graph.is_cyclic()


# --- Test 2: Cyclicity ---

def test_acyclic():
    assert not make_graph("ABB", "AB", "AAB").is_cyclic()


def test_cyclic():
    assert make_graph("ABB", "BA", "AAB").is_cyclic()


def test_self_loop_is_a_cycle():
    graph = make_graph("AA")
    assert graph.is_cyclic()
    is_cyclic, cycles = graph.all_cycles()
    assert is_cyclic
    assert [SplitGraph.path_labels(c) for c in cycles] == [["A", "A"]]


# --- Test 3: Cycles ---

def test_single_cycle():
    is_cyclic, cycles = make_graph("ADB", "BA", "AAD").all_cycles()
    assert is_cyclic
    assert len(cycles) == 1
    assert SplitGraph.path_string(cycles[0]) == "A -> AD -> B -> A"


def test_cycles_sorted_and_rotated():
    graph = make_graph("ADB", "BA", "AAD", "DAA")
    is_cyclic, cycles = graph.all_cycles()
    assert is_cyclic
    assert len(cycles) == 2
    assert SplitGraph.path_string(cycles[0]) == "D -> AA -> D"
    assert SplitGraph.path_string(cycles[1]) == "A -> AD -> B -> A"
    assert SplitGraph.path_labels(cycles[0]) == ["D", "AA", "D"]
    assert SplitGraph.path_labels(cycles[1]) == ["A", "AD", "B", "A"]


def test_cycle_starts_at_smallest_origin():
    _, cycles = make_graph("1100", "0022", "2233", "3311").all_cycles()
    assert len(cycles) == 1
    cycle = cycles[0]
    assert len(cycle) == 4
    assert cycle[0].source.index == min(e.source.index for e in cycle)


def test_acyclic_has_no_cycles():
    is_cyclic, cycles = make_graph("ABC", "DEF").all_cycles()
    assert not is_cyclic
    assert cycles == []


# --- Test 4: Sub-graphs ---

def test_subgraph_from_cycle():
    graph = make_graph("ADB", "BA", "AAD", "DAA")
    _, cycles = graph.all_cycles()
    sub = graph.subgraph(cycles[0])
    assert sub.edges == cycles[0]
    assert sorted(sub.vertex_labels()) == ["AA", "D"]


def test_cycles_subgraph():
    graph = make_graph("ADB", "BA", "AAD", "DAA")
    is_cyclic, sub = graph.cycles_subgraph()
    assert is_cyclic
    assert len(sub.edges) == 5


def test_subgraph_dedups_edges():
    graph = make_graph("ADB", "BA", "AAD")
    edge = graph.edges[0]
    assert graph.subgraph([edge, edge]).edges == [edge]


def test_subgraph_rejects_foreign_edge():
    graph = make_graph("ADB", "BA", "AAD")
    foreign = make_graph("DDD").edges[0]
    with pytest.raises(NoSubgraphError) as info:
        graph.subgraph([graph.edges[0], foreign])
    assert info.value.kind is ErrorKind.NO_SUBGRAPH


# --- Test 5: Components ---

def test_component():
    graph = make_graph("ADBD", "BADD", "AAAD")
    sub = graph.component(1)
    assert len(sub.edges) == 6
    assert all(len(e.source) == 1 or len(e.target) == 1 for e in sub.edges)


def test_component_middle_split():
    sub = make_graph("ADBD", "BADD", "AAAD").component(2)
    assert all(len(e.source) == 2 for e in sub.edges)
    assert len(sub.edges) == 3


def test_empty_component():
    graph = make_graph("ADBD", "BADD", "AAAD")
    with pytest.raises(GraphError) as info:
        graph.component(5)
    assert info.value.kind is ErrorKind.EMPTY_CODE


# --- Test 6: Longest paths ---

def test_longest_path_length():
    paths = make_graph("ABC", "BCD", "DEF", "EFG").all_longest_paths()
    assert len(paths[0]) == 4
    assert SplitGraph.path_labels(paths[0]) == ["A", "BC", "D", "EF", "G"]


def test_longest_paths_of_circular_code():
    words = ["AAC", "AAG", "AAT", "ACC", "ACG", "ACT", "AGC", "AGG", "AGT", "ATT",
             "CCG", "CCT", "CGG", "CGT", "CTT", "GCT", "GGT", "GTT", "TCA", "TGA"]
    paths = make_graph(*words).all_longest_paths()
    assert len(paths) == 16
    assert all(len(p) == 8 for p in paths)


def test_longest_paths_undefined_when_cyclic():
    graph = make_graph("AAC", "CAA")
    assert graph.all_longest_paths() is None
    with pytest.raises(GraphError) as info:
        graph.longest_paths_subgraph()
    assert info.value.kind is ErrorKind.EMPTY_CODE


def test_longest_paths_of_edgeless_graph():
    assert make_graph("A", "B").all_longest_paths() == []


def test_longest_paths_subgraph():
    graph = make_graph("ABC", "CEF")
    sub = graph.longest_paths_subgraph()
    assert sub.edge_labels() == ["AB", "C", "C", "EF"]


def test_paths_are_chained():
    graph = make_graph("ABC", "BCD", "DEF", "EFG")
    for path in graph.all_longest_paths():
        for left, right in zip(path, path[1:]):
            assert left.target == right.source


# --- Test 7: Export ---

def test_to_networkx():
    g = make_graph("ADB", "BA", "AAD").to_networkx()
    assert isinstance(g, nx.DiGraph)
    assert g.edges["A", "AD"]["word"] == "AAD"
    assert not nx.is_directed_acyclic_graph(g)


def test_start_and_outgoing_edges():
    graph = make_graph("ADB", "BA", "AAD", "DAA")
    assert [str(e) for e in graph.start_edges()] == ["DA -DAA-> A"]
    a = Vertex(1, "A")
    assert [e.target.label for e in graph.outgoing(a)] == ["DB", "AD"]


def test_repr_and_summary():
    graph = make_graph("ABC", "DEF")
    assert repr(graph) == "<SplitGraph: 8 vertices, 4 edges>"
    assert "A -ABC-> BC" in graph.summary()
    assert graph == make_graph("DEF", "ABC")
    assert graph.has_edge(Edge(Vertex(1, "A"), graph.vertices[5]))
