import re
from enum import IntEnum


class LanguageLevel(IntEnum):
    """Java source levels the sorter knows how to parse."""

    JAVA_1_0 = 0
    JAVA_1_1 = 1
    JAVA_1_2 = 2
    JAVA_1_3 = 3
    JAVA_1_4 = 4
    JAVA_5 = 5
    JAVA_6 = 6
    JAVA_7 = 7
    JAVA_8 = 8
    JAVA_9 = 9
    JAVA_10 = 10
    JAVA_11 = 11
    JAVA_12 = 12
    JAVA_13 = 13
    JAVA_14 = 14
    JAVA_15 = 15
    JAVA_16 = 16
    JAVA_17 = 17
    JAVA_18 = 18
    JAVA_19 = 19
    JAVA_20 = 20
    JAVA_21 = 21

    POPULAR = 11
    CURRENT = 17
    BLEEDING_EDGE = 21

    @property
    def supports_static_imports(self) -> bool:
        return self >= LanguageLevel.JAVA_5


def get_language_level(compliance: str | None) -> LanguageLevel:
    """Map a compiler compliance string ("1.8", "11", ...) to a LanguageLevel.

    Blank input selects POPULAR. Versions 1.0-1.4 keep their minor number,
    1.5-1.9 drop the "1." prefix.
    """
    if compliance is None or not compliance.strip():
        return LanguageLevel.POPULAR
    v = compliance.upper().strip()
    if re.fullmatch(r"1[.][01234]", v):
        name = "JAVA_" + v.replace(".", "_")
    elif re.fullmatch(r"1[.][56789]", v):
        name = "JAVA_" + v[2:]
    else:
        name = "JAVA_" + v
    try:
        return LanguageLevel[name]
    except KeyError:
        raise ValueError(f"Unsupported language level: {compliance!r}") from None
