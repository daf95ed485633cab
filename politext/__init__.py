"""Author-level text comparison and readability analysis."""

__version__ = "0.1.0"
