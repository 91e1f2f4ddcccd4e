"""Classic array, matrix, two-pointer, sorting and binary-search algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "matrix", "partition", "searching", "sorting", "two_pointers"]