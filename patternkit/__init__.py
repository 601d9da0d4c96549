"""Text patterns as lists of strings: grids, star shapes and number triangles."""

__version__ = "0.1.0"
__all__ = ["__version__"]