"""Command-line Java import sorter and formatter."""

__version__ = "0.1.0"
