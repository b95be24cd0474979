"""Playwright page objects and journeys for Rediffmail account creation."""

__version__ = "1.0.0"
