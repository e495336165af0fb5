from .ast_walker import ASTWalker
from .java_patterns import JavaPatterns
from .line_endings import LineEnding, detect_line_ending, normalize_line_endings
from .node_types import COMMENT_TYPES, ParseResult
from .parser import JavaParser

__all__ = [
    "ASTWalker",
    "COMMENT_TYPES",
    "JavaParser",
    "JavaPatterns",
    "LineEnding",
    "ParseResult",
    "detect_line_ending",
    "normalize_line_endings",
]
