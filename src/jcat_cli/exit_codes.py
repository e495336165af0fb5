"""Exit-code constants used by the CLI layer."""

SUCCESS: int = 0
"""Formatted source was written to stdout."""

FAILURE: int = 1
"""Any failure: bad input, bad configuration, import sorting or formatting error."""
