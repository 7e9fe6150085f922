"""Solutions to classic programming-olympiad problems, as plain functions."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "counting",
    "dp",
    "geometry",
    "lenes",
    "numbers",
    "queries",
    "strings",
    "unionfind",
]