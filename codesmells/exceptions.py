"""Custom exceptions for codesmells."""


class CodeSmellsError(Exception):
    """Base exception for all codesmells errors."""

    pass


class ParseError(CodeSmellsError):
    """Raised when a source file cannot be turned into a well-formed tree."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class TraversalError(CodeSmellsError):
    """Raised when the walker reaches the same node twice (cyclic tree)."""

    pass
