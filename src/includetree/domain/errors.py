from __future__ import annotations

"""
Domain Exceptions.

Fatal conditions of an analysis run. Unresolved includes and include
cycles are regular outcomes and are reported in the tree instead.
"""


class IncludeTreeError(Exception):
    """Base class for every fatal analysis error."""


class InvalidProjectPathError(IncludeTreeError, ValueError):
    """The project root does not exist or is not a directory."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid project root '{path}': {reason}")
        self.path = path
        self.reason = reason


class SourceReadError(IncludeTreeError, OSError):
    """A resolved source file could not be opened or read during traversal."""

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"Failed to read source file '{path}': {cause}")
        self.path = path
        self.cause = cause
