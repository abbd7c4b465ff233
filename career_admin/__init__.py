"""Admin API for the career-guidance platform (Flask + Firebase)."""

__version__ = "1.0.0"
