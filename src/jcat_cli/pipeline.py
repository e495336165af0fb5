"""Read -> sort imports -> format, with the two collaborators called in sequence."""

import logging
from importlib import resources
from typing import Dict

from java_formatter import ConfigReader, ConfigurationSource, JavaFormatter
from java_impsort import Grouper, ImpSort, get_language_level

from .config import RunConfig

logger = logging.getLogger(__name__)


def sort_imports(original_code: str, config: RunConfig) -> str:
    grouper = Grouper(
        config.groups,
        config.static_groups,
        config.static_after,
        config.join_static_with_non_static,
        config.breadth_first_comparator,
    )
    imp_sort = ImpSort(
        config.source_encoding,
        grouper,
        config.remove_unused,
        config.treat_same_package_as_unused,
        config.line_ending,
        get_language_level(config.compliance),
    )
    result = imp_sort.parse_file(config.fake_file_path, original_code.encode(config.source_encoding))
    sorted_code = result.save_sorted(config.result_file_path)
    if sorted_code is None:
        logger.debug("imports already sorted")
        return original_code
    return sorted_code.decode(config.source_encoding)


def read_options(resource_name: str) -> Dict[str, str]:
    """Load the formatter profile bundled with the package."""
    resource = resources.files("jcat_cli") / "resources" / resource_name
    with resource.open("rb") as config_input:
        return ConfigReader().read(config_input)


def format_code(code: str, config: RunConfig) -> str:
    options = read_options(config.formatter_config)
    config_source = ConfigurationSource(
        compiler_source=config.compliance,
        compiler_compliance=config.compliance,
        compiler_codegen_target_platform=config.compliance,
        encoding=config.source_encoding,
    )
    formatter = JavaFormatter()
    formatter.init(options, config_source)
    # no backing file: the code only ever lives in memory
    return formatter.format_file(None, code, config.line_ending)


def run(original_code: str, config: RunConfig) -> str:
    return format_code(sort_imports(original_code, config), config)
