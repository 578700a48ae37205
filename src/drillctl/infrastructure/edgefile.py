"""Edge text parsing and edge file loading.

Two file formats:
- ``.json``: a list of two-element lists, e.g. ``[["a", "b"], ["b", "c"]]``.
- anything else: one ``from<sep>to`` edge per line. Blank lines and
  lines starting with ``#`` are skipped.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

DEFAULT_SEPARATOR = "-"


def parse_edge(text: str, separator: str = DEFAULT_SEPARATOR) -> tuple[str, str]:
    """Split ``"from<sep>to"`` into a stripped ``(from, to)`` pair.

    Examples:
        >>> parse_edge("Alice's House-Bob's House")
        ("Alice's House", "Bob's House")
        >>> parse_edge("a -> b", separator="->")
        ('a', 'b')
    """
    if not separator:
        msg = "Edge separator must not be empty"
        raise ValueError(msg)
    parts = [part.strip() for part in text.split(separator)]
    if len(parts) != 2 or not all(parts):
        msg = f"Expected 'from{separator}to', got {text!r}"
        raise ValueError(msg)
    return parts[0], parts[1]


def parse_edges(lines: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> list[tuple[str, str]]:
    """Parse edge lines, skipping blanks and ``#`` comments.

    Errors are reported with the 1-based line number.
    """
    edges: list[tuple[str, str]] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            edges.append(parse_edge(line, separator))
        except ValueError as exc:
            msg = f"line {lineno}: {exc}"
            raise ValueError(msg) from exc
    return edges


def _edges_from_json(data: Any) -> list[tuple[str, str]]:
    if not isinstance(data, list):
        msg = "JSON edge file must contain a list of [from, to] pairs"
        raise ValueError(msg)
    edges: list[tuple[str, str]] = []
    for index, item in enumerate(data):
        if not isinstance(item, list) or len(item) != 2:
            msg = f"item {index}: expected a [from, to] pair, got {item!r}"
            raise ValueError(msg)
        source, target = item
        if not all(isinstance(end, str) and end.strip() for end in item):
            msg = f"item {index}: endpoints must be non-empty strings, got {item!r}"
            raise ValueError(msg)
        edges.append((source.strip(), target.strip()))
    return edges


def read_edges(path: Path, separator: str = DEFAULT_SEPARATOR) -> list[tuple[str, str]]:
    """Load edges from *path*.

    Raises:
        ValueError: If the file content is not a valid edge list. The
            message is prefixed with the file name.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            try:
                data = json.loads(raw)
            except json.JSONDecodeError as exc:
                msg = f"invalid JSON: {exc}"
                raise ValueError(msg) from exc
            return _edges_from_json(data)
        return parse_edges(raw.splitlines(), separator)
    except ValueError as exc:
        msg = f"{path.name}: {exc}"
        raise ValueError(msg) from exc
