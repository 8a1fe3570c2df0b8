"""Graph type and the point-list parser."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .point import Point

# Tokens are separated by exactly one space; runs of spaces yield empty tokens
TOKEN_SEPARATOR = " "


@dataclass(frozen=True)
class Graph:
    """The data needed to render a graph.

    Points are kept in the order they appeared in the input text.
    """

    points: tuple[Point, ...] = ()

    @classmethod
    def from_points(cls, points: Iterable[Point | tuple[int, int]]) -> Graph:
        """Create a Graph from points or ``(x, y)`` tuples, preserving order."""
        return cls(
            points=tuple(p if isinstance(p, Point) else Point.from_tuple(p) for p in points)
        )

    @classmethod
    def from_str(cls, text: str, strict: bool = False) -> Graph:
        """Parse a space-delimited list of points.

        Parsing stops at the first malformed token and its error propagates;
        no partial graph is ever returned. An empty string is a single empty
        token and is therefore malformed.

        Args:
            text: Input such as ``"(4,5) (1,2) (7,8)"``.
            strict: Passed through to ``Point.from_str`` for every token.

        Returns:
            Graph with one point per token.

        Raises:
            MalformedPointError: For the first token that is not a valid point.
        """
        points = [Point.from_str(token, strict=strict) for token in text.split(TOKEN_SEPARATOR)]
        return cls(points=tuple(points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


def parse_graph(text: str, strict: bool = False) -> Graph:
    """Parse a space-delimited list of points. See ``Graph.from_str``."""
    return Graph.from_str(text, strict=strict)
