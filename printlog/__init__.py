"""Print text to streams and append words to a log file."""

__version__ = "0.1.0"
__all__ = ["printer", "demo", "examples"]