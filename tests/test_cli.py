from typer.testing import CliRunner

from java_formatter import FormatterError
from jcat_cli import pipeline
from jcat_cli.main import app

runner = CliRunner()

UNSORTED = "package p;\nimport java.util.Map;\nimport java.util.List;\nclass A {\nList l; Map m;\n}"
FORMATTED = "package p;\n\nimport java.util.List;\nimport java.util.Map;\n\nclass A {\n    List l; Map m;\n}\n"


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "--result-file-path" in result.stdout


def test_cli_formats_argument():
    result = runner.invoke(app, [UNSORTED])
    assert result.exit_code == 0
    assert result.stdout == FORMATTED


def test_cli_reads_stdin_without_argument():
    result = runner.invoke(app, [], input=UNSORTED)
    assert result.exit_code == 0
    assert result.stdout == FORMATTED


def test_cli_argument_takes_precedence_over_stdin():
    result = runner.invoke(app, ["class A {}\n"], input="this is not java {")
    assert result.exit_code == 0
    assert result.stdout == "class A {}\n"


def test_cli_empty_argument():
    result = runner.invoke(app, [""])
    assert result.exit_code == 0
    assert result.stdout == ""


def test_cli_formatted_input_passes_through():
    result = runner.invoke(app, [FORMATTED])
    assert result.exit_code == 0
    assert result.stdout == FORMATTED


def test_cli_syntax_error_fails():
    result = runner.invoke(app, ["class A {"])
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Traceback" in result.stderr
    assert "import sorting failed" in result.stderr


def test_cli_formatter_failure(monkeypatch):
    def fail(code, config):
        raise FormatterError("boom")

    monkeypatch.setattr(pipeline, "format_code", fail)
    result = runner.invoke(app, ["class A {}\n"])
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "formatting failed: boom" in result.stderr


def test_cli_output_is_formatter_applied_to_sorter(monkeypatch):
    calls = []

    def fake_sort(code, config):
        calls.append(("sort", code))
        return code + "|sorted"

    def fake_format(code, config):
        calls.append(("format", code))
        return code + "|formatted"

    monkeypatch.setattr(pipeline, "sort_imports", fake_sort)
    monkeypatch.setattr(pipeline, "format_code", fake_format)

    result = runner.invoke(app, ["src"])
    assert result.exit_code == 0
    assert result.stdout == "src|sorted|formatted"
    assert calls == [("sort", "src"), ("format", "src|sorted")]


def test_cli_writes_result_file(tmp_path):
    destination = tmp_path / "Sorted.java"
    result = runner.invoke(app, ["--result-file-path", str(destination), UNSORTED])
    assert result.exit_code == 0
    assert destination.read_text(encoding="utf-8").startswith("package p;\nimport java.util.List;\n")


def test_cli_config_override(tmp_path):
    config_file = tmp_path / "jcat.toml"
    config_file.write_text("[tool.jcat]\nremove_unused = false\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_file), "import java.util.Map;\nclass A {}\n"])
    assert result.exit_code == 0
    assert result.stdout == "import java.util.Map;\n\nclass A {}\n"


def test_cli_bad_config_fails(tmp_path):
    config_file = tmp_path / "jcat.toml"
    config_file.write_text("[tool.jcat]\nmystery = 1\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_file), "class A {}\n"])
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "invalid configuration" in result.stderr


def test_cli_bad_compliance_is_a_configuration_failure(tmp_path):
    config_file = tmp_path / "jcat.toml"
    config_file.write_text('[tool.jcat]\ncompliance = "99"\n', encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_file), "class A {}\n"])
    assert result.exit_code == 1
    assert "invalid configuration" in result.stderr
