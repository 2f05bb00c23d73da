"""pl - pick a git project from the terminal and open it in your editor."""

__version__ = "0.1.0"
