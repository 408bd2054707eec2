"""Character-level diffs using the Myers O(ND) algorithm, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["cli", "myers"]