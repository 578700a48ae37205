"""Adjacency-list construction for undirected road networks.

Every edge is recorded in both directions, so for an edge ``(a, b)``
node ``b`` lands in ``a``'s neighbor list and ``a`` lands in ``b``'s.
Duplicate edges and self-loops are kept as given.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeAlias

NodeId: TypeAlias = Hashable
Edge: TypeAlias = tuple[NodeId, NodeId]
Graph: TypeAlias = dict[NodeId, list[NodeId]]


def build_graph(edges: Iterable[Edge]) -> Graph:
    """Build a bidirectional adjacency mapping from undirected *edges*.

    Neighbor lists follow edge order. A self-loop ``(x, x)`` records
    ``x`` twice in its own list.

    Examples:
        >>> build_graph([("a", "b"), ("b", "c")])
        {'a': ['b'], 'b': ['a', 'c'], 'c': ['b']}
        >>> build_graph([])
        {}
    """
    graph: Graph = {}

    def add_edge(source: NodeId, target: NodeId) -> None:
        if source not in graph:
            graph[source] = [target]
        else:
            graph[source].append(target)

    for source, target in edges:
        add_edge(source, target)
        add_edge(target, source)
    return graph
