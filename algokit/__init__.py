"""Classic algorithms on strings, integers, arrays and binary trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "numbers", "strings", "tree"]