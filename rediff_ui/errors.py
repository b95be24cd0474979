"""Failures raised by the page objects.

Each error names the operation (or form field) that failed and carries the
payload that was in flight, so a failed scenario reads without a debugger.
The Playwright error that caused it is chained as ``__cause__``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(eq=False)
class UiOperationError(Exception):
    """Raised when a page-object operation fails."""

    name: str
    message: str
    payload: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.payload:
            return f"{self.name} failed ({self.message}) with payload={self.payload}"
        return f"{self.name} failed ({self.message})"


class NavigationError(UiOperationError):
    """The page did not load (network failure or load timeout)."""


class ElementNotReadyError(UiOperationError):
    """A control did not become visible/enabled within its bound."""


class FieldInteractionError(UiOperationError):
    """A form field could not be set, or did not read back the value set."""

    @property
    def field(self) -> str:
        return self.name


class TitleMismatchError(UiOperationError):
    """A window opened from an external link is not the expected page."""
