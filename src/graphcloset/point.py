"""Point type and the single-token point parser.

A point is written as ``(X,Y)`` or ``(X, Y)`` where each coordinate is exactly
one ASCII digit. Anything else (multi-digit or negative numbers, extra
whitespace, missing punctuation) is rejected with ``MalformedPointError``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import MalformedPointError

# Compiled once; shared by every parse
POINT_PATTERN = re.compile(r"\((?P<x>[0-9]), ?(?P<y>[0-9])\)")


@dataclass(frozen=True)
class Point:
    """An (x, y) coordinate pair."""

    x: int
    y: int

    @classmethod
    def from_tuple(cls, pair: tuple[int, int]) -> Point:
        """Create a Point from an ``(x, y)`` tuple."""
        x, y = pair
        return cls(x=x, y=y)

    @classmethod
    def from_str(cls, token: str, strict: bool = False) -> Point:
        """Parse a single point token.

        Args:
            token: Text such as ``"(1,2)"`` or ``"(1, 2)"``.
            strict: If True, the whole token must be the point. Otherwise the
                point may appear anywhere in the token and surrounding text is
                ignored.

        Returns:
            The parsed Point.

        Raises:
            MalformedPointError: If the token does not contain a valid point.
        """
        if strict:
            match = POINT_PATTERN.fullmatch(token)
        else:
            match = POINT_PATTERN.search(token)

        if match is None:
            raise MalformedPointError(token)

        # Captures are single ASCII digits, int() cannot fail here
        return cls(x=int(match.group("x")), y=int(match.group("y")))

    def as_tuple(self) -> tuple[int, int]:
        """Return the point as an ``(x, y)`` tuple."""
        return (self.x, self.y)


def parse_point(token: str, strict: bool = False) -> Point:
    """Parse a single point token. See ``Point.from_str``."""
    return Point.from_str(token, strict=strict)
