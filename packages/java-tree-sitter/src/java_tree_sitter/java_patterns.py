"""Java-specific AST pattern recognition."""

import re
from typing import List, Optional

from tree_sitter import Node

from .ast_walker import ASTWalker
from .node_types import COMMENT_TYPES

_WS = re.compile(r"\s+")


class JavaPatterns:
    """Recognize Java constructs in the tree-sitter AST."""

    @staticmethod
    def is_comment(node: Node) -> bool:
        return node.type in COMMENT_TYPES

    @staticmethod
    def package_name(root: Node, source: bytes) -> Optional[str]:
        """Dotted name from the package declaration, or None for the default package."""
        decl = ASTWalker.get_child_of_type(root, "package_declaration")
        if decl is None:
            return None
        for child in decl.named_children:
            if child.type in ("scoped_identifier", "identifier"):
                return _WS.sub("", ASTWalker.get_text(child, source))
        return None

    @staticmethod
    def import_declarations(root: Node) -> List[Node]:
        """Top-level import declarations in source order."""
        return [child for child in root.children if child.type == "import_declaration"]

    @staticmethod
    def is_static_import(node: Node) -> bool:
        return any(child.type == "static" for child in node.children)

    @staticmethod
    def import_name(node: Node, source: bytes) -> str:
        """Imported name with wildcard suffix, e.g. ``java.util.*``.

        Comments and whitespace inside the declaration are dropped.
        """
        parts = []
        for child in node.children:
            if child.type in ("import", "static", ";") or JavaPatterns.is_comment(child):
                continue
            parts.append(ASTWalker.get_text(child, source))
        return _WS.sub("", "".join(parts))

    @staticmethod
    def is_text_block(node: Node, source: bytes) -> bool:
        if node.type == "text_block":
            return True
        return node.type == "string_literal" and source[node.start_byte:node.start_byte + 3] == b'"""'
