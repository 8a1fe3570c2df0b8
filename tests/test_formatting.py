"""Tests for graphcloset.formatting module."""

import json

import pytest

from graphcloset.errors import MalformedPointError, ParseError
from graphcloset.formatting import (
    FORMATTERS,
    ParseResult,
    format_debug,
    format_json,
    format_result,
)
from graphcloset.graph import Graph


class TestParseResult:
    """Tests for ParseResult."""

    def test_from_text_success(self) -> None:
        """Test that valid input gives a graph and no error."""
        result = ParseResult.from_text("(4,5) (1,2)")

        assert result.ok is True
        assert result.graph == Graph.from_points([(4, 5), (1, 2)])
        assert result.error is None

    def test_from_text_failure_captures_error(self) -> None:
        """Test that malformed input is captured instead of raised."""
        result = ParseResult.from_text("(4,5) (1,)2")

        assert result.ok is False
        assert result.graph is None
        assert isinstance(result.error, MalformedPointError)
        assert result.error.token == "(1,)2"

    def test_from_text_strict(self) -> None:
        """Test that strictness is forwarded to the parser."""
        assert ParseResult.from_text("(4,5)x").ok is True
        assert ParseResult.from_text("(4,5)x", strict=True).ok is False

    def test_requires_exactly_one_outcome(self) -> None:
        """Test that a result cannot be empty or both."""
        with pytest.raises(ValueError):
            ParseResult()
        with pytest.raises(ValueError):
            ParseResult(graph=Graph(), error=MalformedPointError("x"))

    def test_empty_graph_counts_as_success(self) -> None:
        """Test that an empty graph is a result, not a missing one."""
        assert ParseResult(graph=Graph()).ok is True


class TestFormatDebug:
    """Tests for the debug renderer."""

    def test_renders_points_in_order(self) -> None:
        """Test that every point appears with its fields, in order."""
        result = ParseResult(graph=Graph.from_points([(4, 5), (1, 2), (7, 8)]))

        assert format_debug(result) == (
            "Ok(Graph(points=(Point(x=4, y=5), Point(x=1, y=2), Point(x=7, y=8))))"
        )

    def test_renders_error(self) -> None:
        """Test that a failure is rendered with its message."""
        result = ParseResult(error=MalformedPointError("(1,)2"))

        assert format_debug(result) == "Err(MalformedPointError('Invalid point string (1,)2'))"


class TestFormatJson:
    """Tests for the JSON renderer."""

    def test_success_document(self) -> None:
        """Test the JSON shape for a parsed graph."""
        result = ParseResult(graph=Graph.from_points([(4, 5), (1, 2)]))

        data = json.loads(format_json(result))

        assert data == {
            "ok": True,
            "graph": {"points": [{"x": 4, "y": 5}, {"x": 1, "y": 2}]},
            "error": None,
        }

    def test_malformed_document(self) -> None:
        """Test the JSON shape for a malformed token."""
        result = ParseResult(error=MalformedPointError("(10,5)"))

        data = json.loads(format_json(result))

        assert data == {
            "ok": False,
            "graph": None,
            "error": {
                "kind": "malformed",
                "message": "Invalid point string (10,5)",
                "token": "(10,5)",
            },
        }

    def test_generic_parse_error(self) -> None:
        """Test that other parse errors carry no token."""
        result = ParseResult(error=ParseError("bad input"))

        data = json.loads(format_json(result))

        assert data["error"] == {"kind": "parse", "message": "bad input", "token": None}


class TestFormatResult:
    """Tests for format selection."""

    def test_default_is_debug(self) -> None:
        """Test that the debug renderer is used by default."""
        result = ParseResult(graph=Graph.from_points([(1, 1)]))
        assert format_result(result) == format_debug(result)

    def test_selects_by_name(self) -> None:
        """Test that each registered name dispatches to its renderer."""
        result = ParseResult(graph=Graph.from_points([(1, 1)]))
        for name, formatter in FORMATTERS.items():
            assert format_result(result, name) == formatter(result)

    def test_unknown_format_raises(self) -> None:
        """Test that an unknown format name is rejected."""
        result = ParseResult(graph=Graph())
        with pytest.raises(ValueError, match="Unknown output format: xml"):
            format_result(result, "xml")
