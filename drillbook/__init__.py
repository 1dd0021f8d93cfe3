"""Solutions to classic array, string, number, counting and search exercises."""

__version__ = "0.1.0"
__all__ = ["numbers", "strings", "searching", "counting", "arrays"]