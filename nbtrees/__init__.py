"""Array-backed non-binary trees with traversals and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["tree", "cli"]