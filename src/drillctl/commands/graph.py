"""Command group: build and describe undirected road graphs."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from drillctl.commands._base import DrillGroup
from drillctl.services.graph import GraphService

if TYPE_CHECKING:
    from drillctl.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  drillctl graph build "Alice's House-Bob's House" "Bob's House-Town Hall"
  drillctl graph build --file roads.txt
  drillctl graph neighbors "Town Hall" --file roads.txt
  drillctl --json graph summary a-b b-c c-c"""

_edges_argument = click.argument("edges", nargs=-1)
_file_option = click.option(
    "--file",
    "edge_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read edges from a file (one 'from-to' per line, or a .json list of pairs).",
)


@click.group(cls=DrillGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Build adjacency lists from undirected edges."""


@graph.command(
    examples="""\
  drillctl graph build a-b b-c
  drillctl graph build --file roads.txt
  drillctl --json graph build --file roads.json"""
)
@_edges_argument
@_file_option
@click.pass_obj
def build(app: AppContext, edges: tuple[str, ...], edge_file: Path | None) -> None:
    """Print the adjacency mapping for EDGES."""
    app.emit(GraphService(app.settings).build(edges, edge_file=edge_file))


@graph.command(
    examples="""\
  drillctl graph neighbors b a-b b-c
  drillctl --json graph neighbors "Town Hall" --file roads.txt"""
)
@click.argument("node")
@_edges_argument
@_file_option
@click.pass_obj
def neighbors(app: AppContext, node: str, edges: tuple[str, ...], edge_file: Path | None) -> None:
    """List the neighbors of NODE in edge order."""
    app.emit(GraphService(app.settings).neighbors(node, edges, edge_file=edge_file))


@graph.command(
    examples="""\
  drillctl graph summary a-b b-c c-c
  drillctl --json graph summary --file roads.txt"""
)
@_edges_argument
@_file_option
@click.pass_obj
def summary(app: AppContext, edges: tuple[str, ...], edge_file: Path | None) -> None:
    """Count nodes, edges and self-loops, with per-node degree."""
    app.emit(GraphService(app.settings).summary(edges, edge_file=edge_file))
