"""Playwright Code Review Agent: layer-architecture and reliability lint for Playwright suites."""

__version__ = "1.0.0"
