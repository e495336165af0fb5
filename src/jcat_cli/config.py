import codecs
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

from java_impsort import get_language_level
from java_tree_sitter import LineEnding

# Keys a [tool.jcat] table may override
OVERRIDABLE_KEYS = (
    "groups",
    "static_groups",
    "compliance",
    "source_encoding",
    "remove_unused",
    "treat_same_package_as_unused",
    "static_after",
    "join_static_with_non_static",
    "breadth_first_comparator",
    "line_ending",
)


class JcatConfigError(Exception):
    """Raised when the run configuration cannot be loaded."""


@dataclass(frozen=True)
class RunConfig:
    """Settings for one run, built once at start-up and passed to both collaborators."""
    groups: str = "java.,javax.,org.,com."
    static_groups: str = "*"
    compliance: str = "1.8"
    source_encoding: str = "UTF-8"
    remove_unused: bool = True
    treat_same_package_as_unused: bool = True
    static_after: bool = False
    join_static_with_non_static: bool = False
    breadth_first_comparator: bool = False
    line_ending: LineEnding = LineEnding.AUTO
    fake_file_path: Path = Path("Main.java")
    result_file_path: Optional[Path] = None
    formatter_config: str = "jcat-code-formatter.xml"


def load_run_config(config_path: Optional[Path] = None, **overrides: Any) -> RunConfig:
    """Build the run configuration from defaults, an optional TOML file and CLI overrides."""
    config = RunConfig()
    if config_path is not None:
        config = replace(config, **_load_from_file(config_path))
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def _load_from_file(path: Path) -> dict:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise JcatConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise JcatConfigError(f"Invalid TOML in {path}: {e}") from e

    section = data.get("tool", {}).get("jcat", {})
    unknown = sorted(set(section) - set(OVERRIDABLE_KEYS))
    if unknown:
        raise JcatConfigError(f"Unknown key(s) in [tool.jcat] of {path}: {', '.join(unknown)}")

    types = {f.name: f.type for f in fields(RunConfig)}
    values = {}
    for key, value in section.items():
        if key == "line_ending":
            try:
                values[key] = LineEnding(str(value).upper())
            except ValueError:
                choices = ", ".join(e.value for e in LineEnding)
                raise JcatConfigError(f"line_ending must be one of {choices}, got {value!r}") from None
            continue
        expected = bool if types[key] in (bool, "bool") else str
        if not isinstance(value, expected):
            raise JcatConfigError(f"{key} must be a {expected.__name__}, got {value!r}")
        values[key] = value

    if "compliance" in values:
        try:
            get_language_level(values["compliance"])
        except ValueError as e:
            raise JcatConfigError(f"compliance in {path}: {e}") from e
    if "source_encoding" in values:
        try:
            codecs.lookup(values["source_encoding"])
        except LookupError as e:
            raise JcatConfigError(f"source_encoding in {path}: {e}") from e
    return values
