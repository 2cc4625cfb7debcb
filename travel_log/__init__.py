"""Travel log with natural-language search."""

__version__ = "0.1.0"
