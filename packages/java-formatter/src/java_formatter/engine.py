import logging
import traceback
from typing import List

from java_tree_sitter import JavaParser, LineEnding, normalize_line_endings
from .models import FormatterConfig, FormatResult
from .rules.base import FormattingRule, FormattingContext, Transformation

logger = logging.getLogger(__name__)


class FormatterEngine:
    """Core engine for formatting Java source through tree-sitter driven rules."""
    def __init__(self, config: FormatterConfig):
        self.config = config
        self.rules: List[FormattingRule] = []
        self.parser = JavaParser()

    def add_rule(self, rule: FormattingRule) -> None:
        """Register a new formatting rule."""
        self.rules.append(rule)

    def format_string(self, source: str, line_ending: LineEnding = LineEnding.AUTO,
                      file_path: str = "") -> FormatResult:
        """Run every rule in order, re-parsing between rules.

        Errors are reported in the result and leave the source untouched.
        """
        eol = line_ending.resolve(source)
        current_source = normalize_line_endings(source)

        parse_result = self.parser.parse_string(current_source)
        if parse_result.has_errors:
            return FormatResult(source=source, modified=False, errors=parse_result.errors)

        try:
            for rule in self.rules:
                context = FormattingContext(source=current_source, file_path=file_path, tree=parse_result.tree)
                transforms = rule.analyze(context)
                if transforms:
                    logger.debug("%s: %s produced %d change(s)", file_path or "<input>", rule.name, len(transforms))
                    current_source = self._apply_transformations(current_source, transforms)
                    parse_result = self.parser.parse_string(current_source)
        except Exception as e:
            return FormatResult(source=source, modified=False, errors=[f"{e}\n{traceback.format_exc()}"])

        if eol != "\n":
            current_source = current_source.replace("\n", eol)
        return FormatResult(source=current_source, modified=current_source != source)

    def _apply_transformations(self, source: str, transforms: List[Transformation]) -> str:
        """Applies non-overlapping character-based transformations in a single pass."""
        sorted_transforms = sorted(transforms, key=lambda t: (t.start, t.end, t.priority))
        result = []; last_offset = 0
        for t in sorted_transforms:
            if t.start < last_offset: continue
            result.append(source[last_offset:t.start])
            result.append(t.new_content)
            last_offset = t.end
        result.append(source[last_offset:])
        return "".join(result)
