import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

from java_tree_sitter import ASTWalker, JavaParser, JavaPatterns, LineEnding
from tree_sitter import Node

from .exceptions import ImpSortError
from .grouper import Grouper
from .language_level import LanguageLevel
from .models import Import, Result

logger = logging.getLogger(__name__)

_JAVADOC_REF = re.compile(r"@(?:link|linkplain|see|throws|exception|value)\s+([\w.#$]+(?:\([^)]*\))?)")
_IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")
_LINE_BREAK = re.compile(rb"[ \t]*(?:\r\n|\r|\n)")


class ImpSort:
    """Sorts, groups and prunes the import block of a Java compilation unit."""

    def __init__(self, charset: str, grouper: Grouper, remove_unused: bool,
                 treat_same_package_as_unused: bool, line_ending: LineEnding,
                 language_level: LanguageLevel):
        self.charset = charset
        self.grouper = grouper
        self.remove_unused = remove_unused
        self.treat_same_package_as_unused = treat_same_package_as_unused
        self.line_ending = line_ending
        self.language_level = language_level
        self.parser = JavaParser()

    def parse_file(self, path: Path, data: bytes) -> Result:
        """Compute the sorted form of ``data``; ``path`` is only used for reporting."""
        text = data.decode(self.charset)
        source = text.encode("utf-8")
        parse_result = self.parser.parse_bytes(source)
        if parse_result.has_errors:
            raise ImpSortError(f"unable to parse: {parse_result.errors[0]}", str(path))

        root = parse_result.tree.root_node
        nodes = JavaPatterns.import_declarations(root)
        if not nodes:
            return Result(path=path, original=data, sorted=data)

        imports, start, end = self._collect_imports(path, root, nodes, source)
        if not self.language_level.supports_static_imports and any(i.is_static for i in imports):
            raise ImpSortError(
                f"static imports are not allowed at language level {self.language_level.name}", str(path)
            )

        imports = self._deduplicate(imports)
        if self.remove_unused:
            package = JavaPatterns.package_name(root, source)
            tokens = self._collect_tokens(root, source)
            kept = [i for i in imports if self._is_used(i, tokens, package)]
            logger.debug("%s: removed %d unused import(s)", path, len(imports) - len(kept))
            imports = kept

        eol = self.line_ending.resolve(text)
        rendered = (eol + eol).join(
            eol.join(imp.render(eol) for imp in group) for group in self.grouper.group(imports)
        )
        line_break = _LINE_BREAK.match(source, end)
        if line_break:
            end = line_break.end()
            if rendered:
                rendered += eol

        new_source = source[:start] + rendered.encode("utf-8") + source[end:]
        sorted_bytes = new_source.decode("utf-8").encode(self.charset)
        return Result(path=path, original=data, sorted=sorted_bytes, imports=imports)

    def _collect_imports(self, path: Path, root: Node, nodes: List[Node],
                         source: bytes) -> Tuple[List[Import], int, int]:
        """Read the import region; comments travel with the next import.

        The region is rewritten as a whole, so anything else inside it is refused.
        """
        children = root.children
        first = children.index(nodes[0])
        last = children.index(nodes[-1])
        region = list(children[first:last + 1])
        following = children[last + 1] if last + 1 < len(children) else None
        if following is not None and JavaPatterns.is_comment(following) \
                and following.start_point[0] == nodes[-1].end_point[0]:
            region.append(following)

        imports: List[Import] = []
        pending: List[str] = []
        previous: Optional[Node] = None
        for node in region:
            if JavaPatterns.is_comment(node):
                comment = ASTWalker.get_text(node, source)
                if previous is not None and previous.type == "import_declaration" \
                        and node.start_point[0] == previous.end_point[0]:
                    imports[-1] = replace(imports[-1], suffix=" " + comment)
                else:
                    pending.append(comment)
            elif node.type == "import_declaration":
                imports.append(Import(
                    name=JavaPatterns.import_name(node, source),
                    is_static=JavaPatterns.is_static_import(node),
                    prefix=tuple(pending),
                ))
                pending = []
            elif node.type != ";":
                row, column = node.start_point
                raise ImpSortError(
                    f"unexpected {node.type} between imports at line {row + 1}, column {column + 1}",
                    str(path),
                )
            previous = node

        return imports, region[0].start_byte, region[-1].end_byte

    @staticmethod
    def _deduplicate(imports: List[Import]) -> List[Import]:
        unique: Dict[tuple, Import] = {}
        for imp in imports:
            existing = unique.get(imp.key)
            if existing is None:
                unique[imp.key] = imp
            else:
                unique[imp.key] = replace(
                    existing,
                    prefix=existing.prefix + imp.prefix,
                    suffix=existing.suffix or imp.suffix,
                )
        return list(unique.values())

    def _is_used(self, imp: Import, tokens: Set[str], package: Optional[str]) -> bool:
        if self.treat_same_package_as_unused and package and not imp.is_static \
                and not imp.is_wildcard and imp.package == package:
            return False
        if imp.is_wildcard:
            return True
        return imp.last_segment in tokens

    @staticmethod
    def _collect_tokens(root: Node, source: bytes) -> Set[str]:
        """Identifiers referenced outside the package and import declarations."""
        tokens: Set[str] = set()

        def visit(node: Node):
            if node.type == "import_declaration":
                return
            if node.type == "package_declaration":
                # only annotations on the package can reference imports
                for child in node.named_children:
                    if child.type in ("annotation", "marker_annotation"):
                        visit(child)
                return
            if node.type in ("identifier", "type_identifier"):
                tokens.add(ASTWalker.get_text(node, source))
            elif JavaPatterns.is_comment(node):
                for ref in _JAVADOC_REF.findall(ASTWalker.get_text(node, source)):
                    tokens.update(_IDENTIFIER.findall(ref))
            for child in node.children:
                visit(child)

        visit(root)
        return tokens
