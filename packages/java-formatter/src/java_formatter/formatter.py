import logging
from pathlib import Path
from typing import Dict, Optional

from java_tree_sitter import LineEnding
from .engine import FormatterEngine
from .exceptions import FormatterError
from .models import (
    COMPILER_CODEGEN_TARGET_PLATFORM,
    COMPILER_COMPLIANCE,
    COMPILER_SOURCE,
    ConfigurationSource,
    FormatterConfig,
)
from .rules import default_rules

logger = logging.getLogger(__name__)


class JavaFormatter:
    """Formats Java code with options taken from an Eclipse formatter profile."""

    def __init__(self):
        self.options: Dict[str, str] = {}
        self.engine: Optional[FormatterEngine] = None

    def init(self, options: Dict[str, str], config_source: ConfigurationSource) -> None:
        self.options = dict(options)
        self.options[COMPILER_SOURCE] = config_source.compiler_source
        self.options[COMPILER_COMPLIANCE] = config_source.compiler_compliance
        self.options[COMPILER_CODEGEN_TARGET_PLATFORM] = config_source.compiler_codegen_target_platform

        config = FormatterConfig.from_options(self.options)
        self.engine = FormatterEngine(config)
        for rule in default_rules(config):
            self.engine.add_rule(rule)
        logger.debug("formatter initialised for Java %s with %d option(s)", config.compiler_source, len(options))

    def format_file(self, file: Optional[Path], code: str, line_ending: LineEnding) -> str:
        """Return the formatted code, or ``code`` itself when nothing changes."""
        if self.engine is None:
            raise FormatterError("JavaFormatter.init() must be called before formatting")
        file_path = str(file) if file is not None else ""
        result = self.engine.format_string(code, line_ending, file_path)
        if result.errors:
            raise FormatterError(f"Unable to format {file_path or 'source'}: {result.errors[0]}")
        if not result.modified:
            logger.debug("code is already formatted")
            return code
        return result.source
