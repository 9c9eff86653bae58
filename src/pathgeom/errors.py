"""
Exception types raised by the path geometry engine.

Only malformed input is surfaced as an exception. Arc commands and degenerate
placement rectangles are recovered where they occur and reported through the
tracer instead.
"""


class PathGeomError(Exception):
    """Base error for the package."""


class InvalidPathSyntax(PathGeomError, ValueError):
    """
    Malformed SVG path data.

    The Path being parsed into is left in a partial state; discard it.
    """

    def __init__(self, message, token=None, position=None):
        super().__init__(message)
        self.token = token
        self.position = position

    def __str__(self):
        base = super().__str__()
        if self.position is None:
            return base
        return f"{base} (token {self.token!r} at position {self.position})"
