import re
from typing import Dict, List, Tuple

from tree_sitter import Node

from java_tree_sitter import ASTWalker
from .base import ASTRule, FormattingContext, Transformation
from ..models import FormatterConfig

# Bodies whose members sit one level deeper than the braces
BODY_TYPES = {
    "class_body", "interface_body", "enum_body", "annotation_type_body",
    "module_body", "block", "constructor_body", "switch_block",
}
# Nodes whose direct children start new statements or declarations
HOLDER_TYPES = BODY_TYPES | {"program", "enum_body_declarations", "switch_block_statement_group"}
# Keywords continuing a statement that still line up with it
STATEMENT_LEVEL_KEYWORDS = {"else", "catch", "finally", "while"}
ARRAY_INITIALIZERS = {"array_initializer", "element_value_array_initializer"}

_LEADING_WS = re.compile(r"[ \t]*")


class IndentationRule(ASTRule):
    """Re-indents every line from the syntax tree."""

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str: return "F003"
    @property
    def name(self) -> str: return "indentation"

    def analyze(self, context: FormattingContext) -> List[Transformation]:
        if not context.tree:
            return []
        lines = context.lines
        starts = context.line_starts
        first_leaves = self.first_leaves(context.tree.root_node)

        verbatim_rows = set()
        comment_rows: Dict[int, int] = {}
        for kind, start_row, end_row in self.multiline_spans(context):
            for row in range(start_row + 1, end_row + 1):
                if kind == "text_block":
                    verbatim_rows.add(row)
                else:
                    comment_rows[row] = start_row

        targets: Dict[int, str] = {}
        for row, line in enumerate(lines):
            if not line.strip() or row in verbatim_rows:
                continue
            if row in comment_rows:
                comment_start = comment_rows[row]
                # only realign comments that open their own line
                leaf = first_leaves.get(comment_start)
                if comment_start in targets and leaf is not None and leaf.type in ("block_comment", "comment") \
                        and line.lstrip().startswith("*"):
                    targets[row] = targets[comment_start] + " "
                continue
            leaf = first_leaves.get(row)
            if leaf is None:
                continue
            depth, continuation = self._indentation(leaf)
            levels = depth + (self.config.continuation_indentation if continuation else 0)
            targets[row] = self.config.indent_string(levels)

        transformations = []
        for row, target in targets.items():
            current = _LEADING_WS.match(lines[row]).group(0)
            if current != target:
                transformations.append(Transformation(starts[row], starts[row] + len(current), target))
        return transformations

    def _indentation(self, leaf: Node) -> Tuple[int, bool]:
        """Block depth of the leaf and whether its line continues a statement."""
        cfg = self.config
        depth = 0
        continuation = None
        child, parent = leaf, leaf.parent
        while parent is not None:
            if continuation is None and parent.type in HOLDER_TYPES:
                continuation = self._is_continuation(leaf, child)
            if parent.type in BODY_TYPES and child.type not in ("{", "}"):
                if parent.type != "switch_block" or cfg.indent_switch_compare_to_switch:
                    depth += 1
            elif parent.type == "switch_block_statement_group" and child.type not in ("switch_label", ":"):
                if cfg.indent_switch_compare_to_cases:
                    depth += 1
            child, parent = parent, parent.parent
        return depth, bool(continuation)

    @staticmethod
    def _is_continuation(leaf: Node, statement: Node) -> bool:
        if leaf.start_byte == statement.start_byte:
            return False
        if leaf.type in STATEMENT_LEVEL_KEYWORDS:
            return False
        if leaf.type == "}" and leaf.parent is not None and leaf.parent.type in ARRAY_INITIALIZERS:
            return False
        # annotations on their own lines keep the declaration at statement level
        modifiers = ASTWalker.get_child_of_type(statement, "modifiers")
        if modifiers is not None:
            if modifiers.start_byte <= leaf.start_byte < modifiers.end_byte:
                return not any(c.start_byte == leaf.start_byte for c in modifiers.children)
            following = modifiers.next_sibling
            if following is not None and following.start_byte == leaf.start_byte:
                return False
        return True
