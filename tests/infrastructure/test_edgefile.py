"""Tests for edge parsing and edge file loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from drillctl.infrastructure.edgefile import parse_edge, parse_edges, read_edges


class TestParseEdge:
    def test_basic(self) -> None:
        assert parse_edge("Alice's House-Bob's House") == ("Alice's House", "Bob's House")

    def test_strips_whitespace(self) -> None:
        assert parse_edge("  a - b ") == ("a", "b")

    def test_custom_separator(self) -> None:
        assert parse_edge("a -> b", separator="->") == ("a", "b")

    @pytest.mark.parametrize("text", ["ab", "a-b-c", "-b", "a-", " - "])
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError, match="Expected"):
            parse_edge(text)

    def test_rejects_empty_separator(self) -> None:
        with pytest.raises(ValueError, match="separator"):
            parse_edge("ab", separator="")


class TestParseEdges:
    def test_skips_blank_and_comments(self) -> None:
        lines = ["# village roads", "", "a-b", "   ", "b-c"]
        assert parse_edges(lines) == [("a", "b"), ("b", "c")]

    def test_reports_line_number(self) -> None:
        with pytest.raises(ValueError, match="line 3"):
            parse_edges(["a-b", "# ok", "broken"])


class TestReadEdges:
    def test_text_file(self, tmp_path: Path) -> None:
        path = tmp_path / "roads.txt"
        path.write_text("a-b\n\nb-c\n", encoding="utf-8")
        assert read_edges(path) == [("a", "b"), ("b", "c")]

    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "roads.json"
        path.write_text(json.dumps([["a", "b"], [" b ", "c"]]), encoding="utf-8")
        assert read_edges(path) == [("a", "b"), ("b", "c")]

    def test_json_not_a_list(self, tmp_path: Path) -> None:
        path = tmp_path / "roads.json"
        path.write_text(json.dumps({"a": "b"}), encoding="utf-8")
        with pytest.raises(ValueError, match="roads.json"):
            read_edges(path)

    def test_json_bad_pair(self, tmp_path: Path) -> None:
        path = tmp_path / "roads.json"
        path.write_text(json.dumps([["a", "b", "c"]]), encoding="utf-8")
        with pytest.raises(ValueError, match="item 0"):
            read_edges(path)

    @pytest.mark.parametrize("pair", [["", "b"], [None, "b"], ["a", "  "], ["a", 2]])
    def test_json_endpoints_must_be_non_empty_strings(self, tmp_path: Path, pair: list) -> None:
        path = tmp_path / "roads.json"
        path.write_text(json.dumps([["a", "b"], pair]), encoding="utf-8")
        with pytest.raises(ValueError, match=r"roads\.json: item 1: endpoints must be non-empty strings"):
            read_edges(path)

    def test_json_syntax_error(self, tmp_path: Path) -> None:
        path = tmp_path / "roads.json"
        path.write_text("[[", encoding="utf-8")
        with pytest.raises(ValueError, match="invalid JSON"):
            read_edges(path)

    def test_text_error_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / "roads.txt"
        path.write_text("a-b\nbroken\n", encoding="utf-8")
        with pytest.raises(ValueError, match=r"roads\.txt: line 2"):
            read_edges(path)
