"""Tests for the NetworkX-backed GraphEngine."""

import networkx as nx

from drillctl.infrastructure.graph.engine import GraphEngine


class TestGraphEngine:
    def test_lazy_build(self) -> None:
        engine = GraphEngine([("a", "b")])
        assert engine._graph is None
        g = engine.graph
        assert isinstance(g, nx.MultiGraph)
        assert engine.graph is g

    def test_keeps_duplicates_and_self_loops(self) -> None:
        engine = GraphEngine([("a", "b"), ("a", "b"), ("c", "c")])
        assert engine.graph.number_of_edges() == 3
        assert engine.self_loop_count() == 1

    def test_degrees_count_self_loop_twice(self) -> None:
        engine = GraphEngine([("x", "x"), ("x", "y")])
        assert engine.degrees() == {"x": 3, "y": 1}

    def test_empty(self) -> None:
        engine = GraphEngine([])
        assert engine.degrees() == {}
        assert engine.self_loop_count() == 0
