# tests/test_graph.py
import numpy as np

from keypad_chain.graph import Edge, build_graph
from keypad_chain.layouts import DIRECTIONAL_LAYOUT, DOWN, GAP, LEFT, NUMERIC_LAYOUT, RIGHT, UP, make_layout


def test_numeric_graph_shape():
    graph = build_graph(NUMERIC_LAYOUT)
    assert set(graph) == set("0123456789A")
    assert sum(len(edges) for edges in graph.values()) == 30
    assert set(graph["5"]) == {
        Edge("5", UP, "8"), Edge("5", RIGHT, "6"), Edge("5", DOWN, "2"), Edge("5", LEFT, "4"),
    }
    # 0 sits next to the gap
    assert {edge.target for edge in graph["0"]} == {"2", "A"}


def test_directional_graph_shape():
    graph = build_graph(DIRECTIONAL_LAYOUT)
    assert set(graph) == set("^A<v>")
    assert sum(len(edges) for edges in graph.values()) == 10
    assert {edge.target for edge in graph["<"]} == {"v"}
    assert {edge.target for edge in graph["^"]} == {"A", "v"}


def test_edges_never_touch_gap_and_are_reversible():
    for layout in (NUMERIC_LAYOUT, DIRECTIONAL_LAYOUT):
        graph = build_graph(layout)
        assert GAP not in graph
        for key, edges in graph.items():
            for edge in edges:
                assert edge.source == key
                assert edge.target != GAP
                assert edge.weight == 1
                back = (-edge.direction[0], -edge.direction[1])
                assert Edge(edge.target, back, key) in graph[edge.target]


def test_all_gap_layout_gives_empty_graph():
    assert build_graph(make_layout(["  ", "  "])) == {}


def test_layouts_are_read_only():
    assert not NUMERIC_LAYOUT.flags.writeable
    assert NUMERIC_LAYOUT.shape == (4, 3)
    assert DIRECTIONAL_LAYOUT.shape == (2, 3)
    assert np.argwhere(NUMERIC_LAYOUT == GAP).tolist() == [[3, 0]]
    assert np.argwhere(DIRECTIONAL_LAYOUT == GAP).tolist() == [[0, 0]]
