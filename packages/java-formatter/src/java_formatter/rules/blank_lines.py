from typing import List, Optional

from tree_sitter import Node

from java_tree_sitter import JavaPatterns
from .base import ASTRule, FormattingContext, Transformation
from ..models import FormatterConfig


class BlankLineRule(ASTRule):
    """Blank lines around the package declaration and the import block.

    A gap gets at least the configured number of blank lines; extra blank
    lines already there survive up to the preserve limit.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str: return "F002"
    @property
    def name(self) -> str: return "blank-lines"

    def analyze(self, context: FormattingContext) -> List[Transformation]:
        if not context.tree:
            return []
        cfg = self.config
        root = context.tree.root_node
        children = root.children
        transformations = []

        def gap(before: Optional[Node], after: Optional[Node], required: int):
            if before is None or after is None:
                return
            t = self._fix_gap(context, before, after, required)
            if t:
                transformations.append(t)

        package = next((c for c in children if c.type == "package_declaration"), None)
        imports = JavaPatterns.import_declarations(root)

        if package is not None:
            gap(package.prev_sibling, package, cfg.blank_lines_before_package)
            after = package.next_sibling
            required = cfg.blank_lines_after_package
            if after is not None and after.type == "import_declaration":
                required = max(required, cfg.blank_lines_before_imports)
            gap(package, after, required)

        if imports:
            if package is None or imports[0].prev_sibling != package:
                gap(imports[0].prev_sibling, imports[0], cfg.blank_lines_before_imports)
            following = imports[-1].next_sibling
            # a comment trailing the last import on its line belongs to it
            if following is not None and JavaPatterns.is_comment(following) \
                    and following.start_point[0] == imports[-1].end_point[0]:
                gap(following, following.next_sibling, cfg.blank_lines_after_imports)
            else:
                gap(imports[-1], following, cfg.blank_lines_after_imports)

        return transformations

    def _fix_gap(self, context: FormattingContext, before: Node, after: Node,
                 required: int) -> Optional[Transformation]:
        end_row = before.end_point[0]
        start_row = after.start_point[0]
        if start_row <= end_row:
            return None
        existing = start_row - end_row - 1
        wanted = max(required, min(existing, self.config.empty_lines_to_preserve))
        if wanted == existing:
            return None
        starts = context.line_starts
        return Transformation(starts[end_row + 1], starts[start_row], "\n" * wanted)
