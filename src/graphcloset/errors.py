"""Exceptions raised while parsing point lists."""


class ParseError(ValueError):
    """Base class for input that cannot be parsed into a graph."""


class MalformedPointError(ParseError):
    """A token does not match the point grammar."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid point string {token}")
