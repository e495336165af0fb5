import io

import pytest
from java_formatter.config_reader import ConfigReader
from java_formatter.exceptions import ConfigReadError
from java_formatter.models import FormatterConfig
from java_formatter.exceptions import FormatterError

PROFILE = b"""<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<profiles version="21">
<profile kind="CleanUpProfile" name="cleanup" version="2">
<setting id="cleanup.format_source_code" value="true"/>
</profile>
<profile kind="CodeFormatterProfile" name="test" version="21">
<setting id="org.eclipse.jdt.core.formatter.tabulation.char" value="space"/>
<setting id="org.eclipse.jdt.core.formatter.tabulation.size" value="2"/>
<setting id="org.eclipse.jdt.core.formatter.indent_switchstatements_compare_to_switch" value="true"/>
<setting id="org.eclipse.jdt.core.formatter.insert_new_line_at_end_of_file_if_missing" value="insert"/>
</profile>
</profiles>
"""


def test_reads_formatter_profile():
    options = ConfigReader().read(io.BytesIO(PROFILE))

    assert options == {
        "org.eclipse.jdt.core.formatter.tabulation.char": "space",
        "org.eclipse.jdt.core.formatter.tabulation.size": "2",
        "org.eclipse.jdt.core.formatter.indent_switchstatements_compare_to_switch": "true",
        "org.eclipse.jdt.core.formatter.insert_new_line_at_end_of_file_if_missing": "insert",
    }


def test_options_to_config():
    config = FormatterConfig.from_options(ConfigReader().read(io.BytesIO(PROFILE)))

    assert config.tab_char == "space"
    assert config.tab_size == 2
    assert config.indent_switch_compare_to_switch is True
    assert config.insert_final_newline is True
    assert config.indent_string(2) == "    "


def test_malformed_xml():
    with pytest.raises(ConfigReadError, match="Malformed"):
        ConfigReader().read(io.BytesIO(b"<profiles><profile>"))


def test_missing_profile():
    with pytest.raises(ConfigReadError, match="No <profile>"):
        ConfigReader().read(io.BytesIO(b"<profiles/>"))


def test_setting_without_id():
    with pytest.raises(ConfigReadError, match="without an id"):
        ConfigReader().read(io.BytesIO(b'<profiles><profile><setting value="1"/></profile></profiles>'))


def test_invalid_numeric_option():
    with pytest.raises(FormatterError, match="not a number"):
        FormatterConfig.from_options({"org.eclipse.jdt.core.formatter.tabulation.size": "four"})


def test_invalid_tab_char():
    with pytest.raises(FormatterError, match="tabulation.char"):
        FormatterConfig.from_options({"org.eclipse.jdt.core.formatter.tabulation.char": "dots"})
