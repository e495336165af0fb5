from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from tree_sitter import Node, Tree

from java_tree_sitter import ASTWalker, JavaPatterns


@dataclass
class Transformation:
    """Replace source[start:end] (character offsets) with new_content."""
    start: int
    end: int
    new_content: str
    priority: int = 0


@dataclass
class FormattingContext:
    source: str
    file_path: str = ""
    tree: Optional[Tree] = None

    @property
    def source_bytes(self) -> bytes:
        return self.source.encode("utf-8")

    @property
    def lines(self) -> List[str]:
        """Lines without their terminators; source is already normalised to \\n."""
        return self.source.split("\n")

    @property
    def line_starts(self) -> List[int]:
        starts = [0]
        for line in self.lines[:-1]:
            starts.append(starts[-1] + len(line) + 1)
        return starts


class FormattingRule(ABC):
    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'F001')."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name."""

    @abstractmethod
    def analyze(self, context: FormattingContext) -> List[Transformation]:
        """Return the transformations this rule wants applied."""


class TextRule(FormattingRule):
    """Rule working on the raw text."""


class ASTRule(FormattingRule):
    """Rule that needs the syntax tree."""

    @staticmethod
    def multiline_spans(context: FormattingContext) -> List[Tuple[str, int, int]]:
        """(kind, start_row, end_row) for every text block or block comment spanning rows.

        kind is "comment" or "text_block".
        """
        spans = []
        if context.tree is None:
            return spans
        source = context.source_bytes
        for node in ASTWalker.find_all_by_type(
            context.tree.root_node, "string_literal", "text_block", "block_comment", "comment"
        ):
            start_row, end_row = node.start_point[0], node.end_point[0]
            if start_row == end_row:
                continue
            if JavaPatterns.is_comment(node):
                spans.append(("comment", start_row, end_row))
            elif JavaPatterns.is_text_block(node, source):
                spans.append(("text_block", start_row, end_row))
        return spans

    @staticmethod
    def first_leaves(root: Node) -> Dict[int, Node]:
        """Map each row to the first leaf that starts on it."""
        leaves: Dict[int, Node] = {}
        for leaf in ASTWalker.iter_leaves(root):
            leaves.setdefault(leaf.start_point[0], leaf)
        return leaves
