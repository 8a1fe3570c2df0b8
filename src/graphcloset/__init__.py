"""Parse lists of (x,y) points and render them as text."""

from .cli import main
from .config import DEFAULT_INPUT, PlotConfig
from .errors import MalformedPointError, ParseError
from .formatting import FORMATTERS, ParseResult, format_result
from .graph import Graph, parse_graph
from .plotting import plot
from .point import POINT_PATTERN, Point, parse_point

__all__ = [
    "Point",
    "Graph",
    "POINT_PATTERN",
    "parse_point",
    "parse_graph",
    "ParseError",
    "MalformedPointError",
    "ParseResult",
    "FORMATTERS",
    "format_result",
    "plot",
    "PlotConfig",
    "DEFAULT_INPUT",
    "main",
]
