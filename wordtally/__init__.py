"""Count word occurrences in text files and directory trees."""

__version__ = "1.0.0"