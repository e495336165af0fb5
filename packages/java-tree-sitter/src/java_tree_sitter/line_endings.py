import re
from enum import Enum

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LineEnding(str, Enum):
    """Line-ending policy shared by the import sorter and the formatter.

    ``AUTO`` detects the ending from the text being processed and falls back
    to ``\\n`` when the text has no line break at all.
    """

    AUTO = "AUTO"
    LF = "LF"
    CRLF = "CRLF"
    CR = "CR"

    def resolve(self, text: str) -> str:
        if self is LineEnding.AUTO:
            return detect_line_ending(text) or "\n"
        return _CHARS[self]


_CHARS = {LineEnding.LF: "\n", LineEnding.CRLF: "\r\n", LineEnding.CR: "\r"}


def detect_line_ending(text: str) -> str | None:
    """Return the first line break found in text, or None."""
    match = _LINE_BREAK.search(text)
    return match.group(0) if match else None


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")
