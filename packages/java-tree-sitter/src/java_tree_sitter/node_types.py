from dataclasses import dataclass, field
from typing import List
from tree_sitter import Tree

# Node types that hold comments; older grammars used a single "comment" node
COMMENT_TYPES = ("line_comment", "block_comment", "comment")


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""
    tree: Tree
    source: bytes
    errors: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
