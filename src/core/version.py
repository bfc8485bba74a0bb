"""Service version reported by the API and health checks."""

__version__ = "1.0.0"
