"""Parser error types."""

from scss_kit.errors import ScssKitError


class ParseError(ScssKitError):
    """Raised when SCSS source cannot be parsed into a block tree."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
