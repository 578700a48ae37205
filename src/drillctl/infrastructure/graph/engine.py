"""GraphEngine — lazy-built NetworkX multigraph from an edge list.

A ``MultiGraph`` keeps duplicate edges and self-loops, so node degrees
line up with the lengths of the adjacency lists built by the domain
layer. Rebuilt per invocation; commands that only need the adjacency
mapping never build it.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeAlias

import networkx as nx

_Graph: TypeAlias = nx.MultiGraph


class GraphEngine:
    """Lazy-loading graph engine backed by an in-memory edge list."""

    def __init__(self, edges: Iterable[tuple[Hashable, Hashable]]) -> None:
        self._edges = list(edges)
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building it on first access."""
        if self._graph is None:
            self._graph = self._build()
        return self._graph

    def _build(self) -> _Graph:
        g: _Graph = nx.MultiGraph()
        g.add_edges_from(self._edges)
        return g

    def degrees(self) -> dict[Hashable, int]:
        """Degree per node, counting a self-loop twice."""
        return dict(self.graph.degree())

    def self_loop_count(self) -> int:
        return nx.number_of_selfloops(self.graph)
