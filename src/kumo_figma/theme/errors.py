"""Theme reader error types."""


class ThemeParseError(Exception):
    """Raised when a theme stylesheet is malformed or lacks a required property."""

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.variable = variable
        self.line = line
        self.column = column
        super().__init__(message)
