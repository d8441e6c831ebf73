"""Classic algorithm and data-structure exercises as plain Python functions."""

__version__ = "0.1.0"

__all__ = [
    "allocation",
    "array_basics",
    "arrays",
    "majority",
    "numbers",
    "patterns",
    "searching",
    "sorting",
    "strings",
]