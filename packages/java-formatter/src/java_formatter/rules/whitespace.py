from typing import List, Set

from .base import ASTRule, FormattingContext, Transformation
from ..models import FormatterConfig


class WhitespaceCleanupRule(ASTRule):
    """Trailing whitespace, blank-line runs and the final newline.

    Text blocks and block comments are copied through verbatim.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str: return "F001"
    @property
    def name(self) -> str: return "whitespace-cleanup"

    def analyze(self, context: FormattingContext) -> List[Transformation]:
        source = context.source
        lines = context.lines
        ends_with_newline = source.endswith("\n")
        if ends_with_newline:
            lines = lines[:-1]

        # rows whose line break sits inside a multi-line token
        open_rows: Set[int] = set()
        # rows strictly inside such a token
        inner_rows: Set[int] = set()
        for _kind, start_row, end_row in self.multiline_spans(context):
            open_rows.update(range(start_row, end_row))
            inner_rows.update(range(start_row + 1, end_row))

        result: List[str] = []
        blank_run = 0
        for row, line in enumerate(lines):
            if row not in open_rows:
                line = line.rstrip(" \t")
            if not line.strip() and row not in inner_rows:
                blank_run += 1
                # leading blank lines go, runs are capped
                if not result or blank_run > self.config.empty_lines_to_preserve:
                    continue
            else:
                blank_run = 0
            result.append(line)

        while result and not result[-1].strip():
            result.pop()

        formatted = "\n".join(result)
        if result and (ends_with_newline or self.config.insert_final_newline):
            formatted += "\n"

        if formatted == source:
            return []
        return [Transformation(0, len(source), formatted)]
