from pathlib import Path

import pytest
from java_impsort import ImpSortError
from jcat_cli.config import RunConfig
from jcat_cli.pipeline import format_code, read_options, run, sort_imports


def test_read_bundled_options():
    options = read_options("jcat-code-formatter.xml")
    assert options["org.eclipse.jdt.core.formatter.tabulation.char"] == "space"
    assert options["org.eclipse.jdt.core.formatter.tabulation.size"] == "4"


def test_missing_resource():
    with pytest.raises(FileNotFoundError):
        read_options("no-such-profile.xml")


def test_sort_imports_unchanged_returns_original():
    code = "import java.util.List;\n\nclass A { List l; }\n"
    assert sort_imports(code, RunConfig()) is code


def test_sort_imports_reports_virtual_path():
    config = RunConfig(fake_file_path=Path("Virtual.java"))
    with pytest.raises(ImpSortError, match="Virtual.java"):
        sort_imports("class A {", config)


def test_format_code_uses_bundled_profile():
    assert format_code("class A {\nint x;\n}", RunConfig()) == "class A {\n    int x;\n}\n"


def test_run_sorts_then_formats():
    code = "import org.b.B;\nimport java.util.List;\nclass A { List l; B b; }"
    expected = "import java.util.List;\n\nimport org.b.B;\n\nclass A { List l; B b; }\n"
    assert run(code, RunConfig()) == expected


def test_run_is_stable():
    code = "package p;\nimport java.util.Map;\nimport java.util.List;\nclass A {\nList l; Map m;\n}"
    once = run(code, RunConfig())
    assert run(once, RunConfig()) == once
