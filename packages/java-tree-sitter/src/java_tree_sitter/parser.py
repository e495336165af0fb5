import logging
from typing import List

import tree_sitter_java as tsj
from tree_sitter import Language, Node, Parser

from .node_types import ParseResult

logger = logging.getLogger(__name__)

JAVA_LANGUAGE = Language(tsj.language())


class JavaParser:
    """Thin wrapper around the tree-sitter Java grammar."""

    def __init__(self):
        self.parser = Parser(JAVA_LANGUAGE)

    def parse_bytes(self, source: bytes) -> ParseResult:
        tree = self.parser.parse(source)
        errors = self._collect_errors(tree.root_node) if tree.root_node.has_error else []
        if errors:
            logger.debug("parse produced %d error(s), first: %s", len(errors), errors[0])
        return ParseResult(tree=tree, source=source, errors=errors)

    def parse_string(self, source: str) -> ParseResult:
        return self.parse_bytes(source.encode("utf-8"))

    def _collect_errors(self, root: Node) -> List[str]:
        errors = []

        def visit(node: Node):
            if node.type == "ERROR":
                row, col = node.start_point
                errors.append(f"syntax error at line {row + 1}, column {col + 1}")
            elif node.is_missing:
                row, col = node.start_point
                errors.append(f"missing '{node.type}' at line {row + 1}, column {col + 1}")
            for child in node.children:
                if child.has_error or child.is_missing:
                    visit(child)

        visit(root)
        return errors
