from __future__ import annotations


class GraphDataError(ValueError):
    """Raised when chart input cannot be coerced to numeric points."""


class GraphConfigError(ValueError):
    """Raised when a chart configuration file is missing fields or mistyped."""
