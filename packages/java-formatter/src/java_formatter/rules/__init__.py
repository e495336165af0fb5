from typing import List

from .base import ASTRule, FormattingContext, FormattingRule, TextRule, Transformation
from .blank_lines import BlankLineRule
from .indentation import IndentationRule
from .whitespace import WhitespaceCleanupRule
from ..models import FormatterConfig


def default_rules(config: FormatterConfig) -> List[FormattingRule]:
    """Rules in application order; indentation runs last."""
    return [
        BlankLineRule(config),
        WhitespaceCleanupRule(config),
        IndentationRule(config),
    ]


__all__ = [
    "ASTRule",
    "BlankLineRule",
    "FormattingContext",
    "FormattingRule",
    "IndentationRule",
    "TextRule",
    "Transformation",
    "WhitespaceCleanupRule",
    "default_rules",
]
