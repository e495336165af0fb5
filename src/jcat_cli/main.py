import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

import typer
from java_formatter import ConfigReadError, FormatterError
from java_impsort import ImpSortError

from . import exit_codes, pipeline
from .config import JcatConfigError, load_run_config

logger = logging.getLogger("jcat_cli")

app = typer.Typer(
    help="Sort imports and format Java source read from an argument or stdin",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _describe_failure(error: Exception) -> str:
    if isinstance(error, UnicodeError):
        return "could not decode input"
    if isinstance(error, (JcatConfigError, ConfigReadError, FileNotFoundError)):
        return "invalid configuration"
    if isinstance(error, ImpSortError):
        return "import sorting failed"
    if isinstance(error, FormatterError):
        return "formatting failed"
    return "unexpected error"


@app.command()
def jcat(
    source: Optional[str] = typer.Argument(None, help="Java source code; read from stdin when omitted"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="TOML file with [tool.jcat] overrides"),
    fake_file_path: Path = typer.Option(
        Path("Main.java"), envvar="JCAT_FAKE_FILE_PATH", help="Path reported for the source in diagnostics"
    ),
    result_file_path: Optional[Path] = typer.Option(
        None, envvar="JCAT_RESULT_FILE_PATH", help="Also write the import-sorted code to this file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
):
    """Sort imports, format the code and print it to stdout"""
    _configure_logging(verbose)
    try:
        config = load_run_config(config_file, fake_file_path=fake_file_path, result_file_path=result_file_path)
        # an argument, even an empty one, wins over stdin
        original_code = source if source is not None else sys.stdin.read()
        formatted_code = pipeline.run(original_code, config)
    except Exception as e:
        logger.error("%s: %s", _describe_failure(e), e)
        typer.echo(traceback.format_exc(), err=True, nl=False)
        raise typer.Exit(code=exit_codes.FAILURE)

    typer.echo(formatted_code, nl=False)


if __name__ == "__main__":
    app()
