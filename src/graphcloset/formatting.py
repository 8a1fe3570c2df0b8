"""Render parse outcomes as text."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from .errors import MalformedPointError, ParseError
from .graph import Graph

DEFAULT_FORMAT = "debug"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a point list: either a graph or the error that stopped it."""

    graph: Graph | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if (self.graph is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of graph or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_text(cls, text: str, strict: bool = False) -> ParseResult:
        """Parse text into a result, capturing parse failures instead of raising."""
        try:
            return cls(graph=Graph.from_str(text, strict=strict))
        except ParseError as e:
            return cls(error=e)


class PointModel(BaseModel):
    """A point in JSON output."""

    x: int
    y: int


class GraphModel(BaseModel):
    """A graph in JSON output."""

    points: list[PointModel]


class ErrorModel(BaseModel):
    """A parse failure in JSON output."""

    kind: Literal["malformed", "parse"]
    message: str
    token: str | None = None


class ResultModel(BaseModel):
    """Full parse outcome in JSON output."""

    ok: bool
    graph: GraphModel | None = None
    error: ErrorModel | None = None


def _graph_model(graph: Graph) -> GraphModel:
    return GraphModel(points=[PointModel(x=p.x, y=p.y) for p in graph])


def _error_model(error: ParseError) -> ErrorModel:
    if isinstance(error, MalformedPointError):
        return ErrorModel(kind="malformed", message=str(error), token=error.token)
    return ErrorModel(kind="parse", message=str(error))


def format_debug(result: ParseResult) -> str:
    """Render a result like ``Ok(Graph(points=(...)))`` or ``Err(...)``."""
    if result.ok:
        return f"Ok({result.graph!r})"
    return f"Err({result.error!r})"


def format_json(result: ParseResult) -> str:
    """Render a result as a JSON document."""
    model = ResultModel(
        ok=result.ok,
        graph=_graph_model(result.graph) if result.graph is not None else None,
        error=_error_model(result.error) if result.error is not None else None,
    )
    return model.model_dump_json()


FORMATTERS: dict[str, Callable[[ParseResult], str]] = {
    "debug": format_debug,
    "json": format_json,
}


def format_result(result: ParseResult, fmt: str = DEFAULT_FORMAT) -> str:
    """Render a parse result using the named formatter.

    Raises:
        ValueError: If no formatter is registered under ``fmt``.
    """
    formatter = FORMATTERS.get(fmt)
    if formatter is None:
        raise ValueError(f"Unknown output format: {fmt} (choose from {', '.join(FORMATTERS)})")
    return formatter(result)
