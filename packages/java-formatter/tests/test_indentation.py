import pytest
from java_formatter.engine import FormatterEngine
from java_formatter.models import FormatterConfig
from java_formatter.rules.indentation import IndentationRule


def indent(source: str, **overrides) -> str:
    options = dict(tab_char="space", tab_size=4, indent_switch_compare_to_switch=True)
    options.update(overrides)
    config = FormatterConfig(**options)
    engine = FormatterEngine(config)
    engine.add_rule(IndentationRule(config))
    result = engine.format_string(source)
    assert result.errors == []
    return result.source


def test_nested_blocks():
    source = """public class A {
void f(int x) {
if (x > 0) {
System.out.println(x);
} else {
return;
}
}
}
"""
    expected = """public class A {
    void f(int x) {
        if (x > 0) {
            System.out.println(x);
        } else {
            return;
        }
    }
}
"""
    assert indent(source) == expected


def test_over_indented_code_is_pulled_back():
    source = "class A {\n            int x;\n}\n"
    assert indent(source) == "class A {\n    int x;\n}\n"


def test_switch_statements():
    source = """class A {
int f(int x) {
switch (x) {
case 1:
return 1;
default:
return 0;
}
}
}
"""
    expected = """class A {
    int f(int x) {
        switch (x) {
            case 1:
                return 1;
            default:
                return 0;
        }
    }
}
"""
    assert indent(source) == expected


def test_switch_labels_flush_with_switch():
    source = """class A {
int f(int x) {
switch (x) {
case 1:
return 1;
}
}
}
"""
    expected = """class A {
    int f(int x) {
        switch (x) {
        case 1:
            return 1;
        }
    }
}
"""
    assert indent(source, indent_switch_compare_to_switch=False) == expected


def test_continuation_lines():
    source = 'class A {\nString s = "a"\n+ "b";\n}\n'
    expected = 'class A {\n    String s = "a"\n            + "b";\n}\n'
    assert indent(source) == expected


def test_annotation_on_own_line():
    source = """class A {
@Override
public String toString() {
return "";
}
}
"""
    expected = """class A {
    @Override
    public String toString() {
        return "";
    }
}
"""
    assert indent(source) == expected


def test_javadoc_alignment():
    source = """class A {
/**
* Doc.
*/
void f() {}
}
"""
    expected = """class A {
    /**
     * Doc.
     */
    void f() {}
}
"""
    assert indent(source) == expected


def test_text_block_untouched():
    source = 'class A {\nString s = """\n  keep\n     this\n""";\n}\n'
    expected = 'class A {\n    String s = """\n  keep\n     this\n""";\n}\n'
    assert indent(source) == expected


@pytest.mark.parametrize("tab_char, expected", [
    ("tab", "class A {\n\tint x;\n}\n"),
    ("space", "class A {\n    int x;\n}\n"),
])
def test_indentation_unit(tab_char, expected):
    assert indent("class A {\nint x;\n}\n", tab_char=tab_char) == expected


def test_mixed_indentation():
    source = "class A {\nclass B {\nclass C {\nint x;\n}\n}\n}\n"
    expected = "class A {\n  class B {\n\tclass C {\n\t  int x;\n\t}\n  }\n}\n"
    assert indent(source, tab_char="mixed", indent_size=2) == expected
