"""termcharts error hierarchy.

Renderers never raise for empty or degenerate data; these errors belong to
the shell around them (configuration loading and CLI data files).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCategory(StrEnum):
    """Category of error for classification and handling."""

    INPUT = "input"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class ChartError(Exception):
    """Base error for all termcharts exceptions."""

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.details: dict[str, Any] = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, category={self.category!r})"


class DataFormatError(ChartError):
    """Chart data could not be read or has the wrong shape."""

    def __init__(self, message: str, *, source: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, category=ErrorCategory.INPUT, **kwargs)
        self.source = source


class ConfigurationError(ChartError):
    """Invalid configuration value."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message, category=ErrorCategory.CONFIGURATION)
        self.key = key
