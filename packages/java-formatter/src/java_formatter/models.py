import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import FormatterError

FORMATTER_PREFIX = "org.eclipse.jdt.core.formatter."
COMPILER_SOURCE = "org.eclipse.jdt.core.compiler.source"
COMPILER_COMPLIANCE = "org.eclipse.jdt.core.compiler.compliance"
COMPILER_CODEGEN_TARGET_PLATFORM = "org.eclipse.jdt.core.compiler.codegen.targetPlatform"

TAB_CHARS = ("tab", "space", "mixed")


class ConfigurationSource(BaseModel):
    """Compiler and file settings handed to the formatter alongside the profile options."""
    model_config = ConfigDict(frozen=True)

    compiler_source: str = "1.8"
    compiler_compliance: str = "1.8"
    compiler_codegen_target_platform: str = "1.8"
    target_directory: Optional[Path] = None
    encoding: str = "UTF-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value


@dataclass(frozen=True)
class FormatterConfig:
    """Subset of the Eclipse JDT formatter options the engine honours."""
    tab_char: str = "tab"
    tab_size: int = 4
    indent_size: int = 4
    continuation_indentation: int = 2
    indent_switch_compare_to_switch: bool = False
    indent_switch_compare_to_cases: bool = True
    empty_lines_to_preserve: int = 1
    blank_lines_before_package: int = 0
    blank_lines_after_package: int = 1
    blank_lines_before_imports: int = 1
    blank_lines_after_imports: int = 1
    insert_final_newline: bool = False
    compiler_source: str = "1.8"

    @classmethod
    def from_options(cls, options: Dict[str, str]) -> "FormatterConfig":
        defaults = cls()

        def opt(key: str, default):
            value = options.get(FORMATTER_PREFIX + key)
            if value is None:
                return default
            value = value.strip()
            if isinstance(default, bool):
                return value.lower() == "true"
            if isinstance(default, int):
                try:
                    number = int(value)
                except ValueError:
                    raise FormatterError(f"Option {FORMATTER_PREFIX + key} is not a number: {value!r}") from None
                if number < 0:
                    raise FormatterError(f"Option {FORMATTER_PREFIX + key} must not be negative: {number}")
                return number
            return value

        tab_char = opt("tabulation.char", defaults.tab_char)
        if tab_char not in TAB_CHARS:
            raise FormatterError(f"Unsupported tabulation.char: {tab_char!r}")
        tab_size = opt("tabulation.size", defaults.tab_size)
        if tab_size == 0:
            raise FormatterError("tabulation.size must be positive")

        return cls(
            tab_char=tab_char,
            tab_size=tab_size,
            indent_size=opt("indentation.size", defaults.indent_size),
            continuation_indentation=opt("continuation_indentation", defaults.continuation_indentation),
            indent_switch_compare_to_switch=opt(
                "indent_switchstatements_compare_to_switch", defaults.indent_switch_compare_to_switch),
            indent_switch_compare_to_cases=opt(
                "indent_switchstatements_compare_to_cases", defaults.indent_switch_compare_to_cases),
            empty_lines_to_preserve=opt("number_of_empty_lines_to_preserve", defaults.empty_lines_to_preserve),
            blank_lines_before_package=opt("blank_lines_before_package", defaults.blank_lines_before_package),
            blank_lines_after_package=opt("blank_lines_after_package", defaults.blank_lines_after_package),
            blank_lines_before_imports=opt("blank_lines_before_imports", defaults.blank_lines_before_imports),
            blank_lines_after_imports=opt("blank_lines_after_imports", defaults.blank_lines_after_imports),
            insert_final_newline=options.get(
                FORMATTER_PREFIX + "insert_new_line_at_end_of_file_if_missing", "do not insert"
            ).strip() == "insert",
            compiler_source=options.get(COMPILER_SOURCE, defaults.compiler_source),
        )

    def indent_string(self, levels: int) -> str:
        if self.tab_char == "tab":
            return "\t" * levels
        if self.tab_char == "space":
            return " " * (levels * self.tab_size)
        width = levels * self.indent_size
        return "\t" * (width // self.tab_size) + " " * (width % self.tab_size)


@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: List[str] = field(default_factory=list)
