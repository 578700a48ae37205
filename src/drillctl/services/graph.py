"""GraphService — adjacency mappings built from edge text and edge files.

Edges come from ``from-to`` strings, an edge file, or both (file edges
first). ``build`` and ``neighbors`` use the domain ``build_graph``;
``summary`` adds NetworkX degree counts from the lazy-built multigraph.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from drillctl.domain.graph import build_graph
from drillctl.infrastructure.edgefile import parse_edges, read_edges
from drillctl.infrastructure.graph.engine import GraphEngine
from drillctl.services.base import BaseService
from drillctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class GraphService(BaseService):
    """Builds and describes undirected road graphs."""

    def _collect_edges(
        self,
        edge_texts: Sequence[str],
        edge_file: Path | None,
    ) -> list[tuple[str, str]]:
        separator = self._settings.graph.separator
        edges: list[tuple[str, str]] = []
        if edge_file is not None:
            edges.extend(read_edges(edge_file, separator))
        if edge_texts:
            try:
                edges.extend(parse_edges(edge_texts, separator))
            except ValueError as exc:
                msg = f"arguments: {exc}"
                raise ValueError(msg) from exc
        logger.debug("Collected %d edge(s)", len(edges))
        return edges

    @staticmethod
    def _invalid_edges(op: str, exc: ValueError) -> ServiceResult:
        return ServiceResult.failure(op, "INVALID_EDGE", str(exc))

    # ------------------------------------------------------------------
    # build — full adjacency mapping
    # ------------------------------------------------------------------

    def build(
        self,
        edge_texts: Sequence[str] = (),
        *,
        edge_file: Path | None = None,
    ) -> ServiceResult:
        """Build the adjacency mapping for the given edges."""
        op = "build_graph"
        try:
            edges = self._collect_edges(edge_texts, edge_file)
        except ValueError as exc:
            return self._invalid_edges(op, exc)

        graph = build_graph(edges)
        warnings: list[str] = []
        if not edges:
            warnings.append("No edges given; graph is empty")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "node_count": len(graph),
                "edge_count": len(edges),
                "graph": graph,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # neighbors — one node's adjacency list
    # ------------------------------------------------------------------

    def neighbors(
        self,
        node: str,
        edge_texts: Sequence[str] = (),
        *,
        edge_file: Path | None = None,
    ) -> ServiceResult:
        """Return the neighbor list of *node*, in edge order."""
        op = "neighbors"
        try:
            edges = self._collect_edges(edge_texts, edge_file)
        except ValueError as exc:
            return self._invalid_edges(op, exc)

        graph = build_graph(edges)
        if node not in graph:
            return ServiceResult.failure(
                op,
                "NOT_FOUND",
                f"Node '{node}' not found in graph",
                detail={"node": node},
            )
        items = graph[node]
        return ServiceResult(
            ok=True,
            op=op,
            data={"node": node, "count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # summary — counts and degrees via NetworkX
    # ------------------------------------------------------------------

    def summary(
        self,
        edge_texts: Sequence[str] = (),
        *,
        edge_file: Path | None = None,
    ) -> ServiceResult:
        """Count nodes, edges and self-loops, and report each node's degree."""
        op = "graph_summary"
        try:
            edges = self._collect_edges(edge_texts, edge_file)
        except ValueError as exc:
            return self._invalid_edges(op, exc)

        engine = GraphEngine(edges)
        g = engine.graph
        degrees = engine.degrees()
        items = [{"node": node, "degree": degree} for node, degree in degrees.items()]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "node_count": g.number_of_nodes(),
                "edge_count": g.number_of_edges(),
                "self_loops": engine.self_loop_count(),
                "count": len(items),
                "items": items,
            },
        )
