"""
Exceptions raised while setting up a comparison run.

Differences between documents are never errors; these cover the
configuration, the input documents and the report destination.
"""

from typing import Optional


class JSONCompareError(Exception):
    """Base class for jsoncompare setup errors."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.path = path
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        text = self.message
        if self.path:
            text = f"{text}: {self.path}"
        if self.cause is not None:
            text = f"{text} ({self.cause})"
        return text


class ConfigError(JSONCompareError):
    """Configuration file is missing, unreadable or malformed."""


class DocumentError(JSONCompareError):
    """Input document is unreadable or not valid serialized data."""


class ReportError(JSONCompareError):
    """Report destination could not be written."""
