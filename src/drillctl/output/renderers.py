"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any, TypeAlias

from rich.table import Table
from rich.text import Text

from drillctl.output.console import (
    create_console,
    get_output,
    style_for_lock,
    style_for_validity,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from drillctl.services.result import ServiceResult

    _Renderer: TypeAlias = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "multiply":
        return str(result.data.get("product"))
    if result.op == "check_literals":
        return "\n".join(
            f"{item['literal']}\t{str(item['valid']).lower()}" for item in result.data["items"]
        )
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="drill.ok")
    op = Text(f"  {result.op}", style="drill.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="drill.key")
    if key == "node":
        v = Text(str(value), style="drill.node")
    elif key == "locked" and isinstance(value, bool):
        v = Text(str(value).lower(), style=style_for_lock(value))
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _render_warnings_inline(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  {warning}", style="dim"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="drill.error")
    op = Text(f"  {result.op}", style="drill.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Graph renderers ───────────────────────────────────────────────────


def _render_adjacency(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render build_graph results as a node -> neighbors table."""
    _status_line(console, result)
    d = result.data
    _field(console, "node_count", d.get("node_count", 0))
    _field(console, "edge_count", d.get("edge_count", 0))
    graph: dict[str, list[Any]] = d.get("graph", {})
    if graph:
        console.print()
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Node", style="drill.node", no_wrap=True)
        table.add_column("Neighbors")
        for node, neighbors in graph.items():
            table.add_row(Text(str(node)), Text(", ".join(str(n) for n in neighbors)))
        console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_neighbors(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one node's neighbor list, one neighbor per line."""
    _status_line(console, result)
    _field(console, "node", result.data.get("node"))
    _field(console, "count", result.data.get("count", 0))
    for neighbor in result.data.get("items", []):
        console.print(Text(f"    {neighbor}"))


def _render_summary(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render graph_summary counts plus a degree table."""
    _status_line(console, result)
    for key in ("node_count", "edge_count", "self_loops"):
        _field(console, key, result.data.get(key, 0))
    items = result.data.get("items", [])
    if items:
        console.print()
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Node", style="drill.node", no_wrap=True)
        table.add_column("Degree", justify="right")
        for item in items:
            table.add_row(Text(str(item["node"])), str(item["degree"]))
        console.print(table)


# ── Box renderers ─────────────────────────────────────────────────────


def _render_box(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render stash/peek/inspect results."""
    _status_line(console, result)
    d = result.data
    for key in ("stashed", "count", "locked"):
        if key in d:
            _field(console, key, d[key])
    for item in d.get("items", []):
        console.print(Text(f"    {item}"))


# ── Multiply renderer ─────────────────────────────────────────────────


def _render_multiply(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the product and attempt count; failures with --verbose."""
    _status_line(console, result)
    d = result.data
    _field(console, "product", f"{d.get('a')} * {d.get('b')} = {d.get('product')}")
    _field(console, "attempts", d.get("attempts", 1))
    if verbose:
        _render_warnings_inline(console, result)
        _render_meta(console, result)


# ── Literal renderer ──────────────────────────────────────────────────


def _render_literals(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render literal checks as a two-column table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Literal", no_wrap=True)
    table.add_column("Valid")
    for item in items:
        valid = bool(item["valid"])
        table.add_row(
            Text(repr(item["literal"])),
            Text(str(valid).lower(), style=style_for_validity(valid)),
        )
    console.print(table)
    console.print(f"\n{result.data.get('valid', 0)} of {result.data.get('count', len(items))} valid")
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    # Graph
    "build_graph": _render_adjacency,
    "neighbors": _render_neighbors,
    "graph_summary": _render_summary,
    # Box
    "stash": _render_box,
    "peek": _render_box,
    "inspect": _render_box,
    # Multiply
    "multiply": _render_multiply,
    # Literals
    "check_literals": _render_literals,
}
