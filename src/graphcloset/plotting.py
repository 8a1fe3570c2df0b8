"""Library entry point: turn a point list into printable text."""

from .formatting import DEFAULT_FORMAT, ParseResult, format_result


def plot(input: str, strict: bool = False, output_format: str = DEFAULT_FORMAT) -> str:
    """Take a series of points in string form and produce a plot in string form.

    Malformed input never raises; the failure is described in the returned text.

    Args:
        input: Space-delimited points, e.g. ``"(4,5) (1,2) (7,8)"``.
        strict: Require every token to be exactly one point.
        output_format: Name of the renderer, ``"debug"`` or ``"json"``.

    Returns:
        Rendering of the parsed graph or of the parse failure.
    """
    result = ParseResult.from_text(input, strict=strict)
    return format_result(result, output_format)
