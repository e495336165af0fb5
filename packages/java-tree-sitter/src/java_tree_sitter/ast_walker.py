from tree_sitter import Node
from typing import Callable, Iterator, Optional, List


class ASTWalker:
    """Utilities for traversing and searching the Java AST"""

    @staticmethod
    def walk(node: Node, callback: Callable[[Node], None]):
        """Perform a depth-first traversal of the AST"""
        callback(node)
        for child in node.children:
            ASTWalker.walk(child, callback)

    @staticmethod
    def iter_leaves(node: Node) -> Iterator[Node]:
        """Yield leaf nodes in source order"""
        if node.child_count == 0:
            yield node
            return
        for child in node.children:
            yield from ASTWalker.iter_leaves(child)

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def find_all_by_type(node: Node, *type_names: str) -> List[Node]:
        """Find all descendant nodes whose type is one of type_names"""
        results = []

        def check(n):
            if n.type in type_names:
                results.append(n)

        ASTWalker.walk(node, check)
        return results

    @staticmethod
    def get_text(node: Node, source: bytes) -> str:
        return source[node.start_byte:node.end_byte].decode("utf-8")
