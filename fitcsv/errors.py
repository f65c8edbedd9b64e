"""Fatal import error raised for malformed CSV input."""

from __future__ import annotations

from typing import Optional


class CSVImportError(ValueError):
    """
    Aborts a whole import. The message is meant for the end user.
    `line` is the 1-indexed line of the offending row; `headers` is set for missing-column errors.
    """

    def __init__(self, message: str, line: Optional[int] = None, headers: Optional[list[str]] = None):
        super().__init__(message)
        self.line = line
        self.headers = headers

    @property
    def location(self) -> str:
        if self.line is not None:
            return f"line {self.line}"
        return "header" if self.headers is not None else "csv"
