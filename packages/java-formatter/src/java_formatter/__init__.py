from .config_reader import ConfigReader
from .engine import FormatterEngine
from .exceptions import ConfigReadError, FormatterError
from .formatter import JavaFormatter
from .models import ConfigurationSource, FormatResult, FormatterConfig

__all__ = [
    "ConfigReadError",
    "ConfigReader",
    "ConfigurationSource",
    "FormatResult",
    "FormatterConfig",
    "FormatterEngine",
    "FormatterError",
    "JavaFormatter",
]
