class FormatterError(Exception):
    """Raised when source code cannot be formatted."""


class ConfigReadError(Exception):
    """Raised when an Eclipse formatter profile cannot be read."""
