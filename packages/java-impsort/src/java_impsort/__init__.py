from .exceptions import ImpSortError
from .grouper import Group, Grouper
from .impsort import ImpSort
from .language_level import LanguageLevel, get_language_level
from .models import Import, Result

__all__ = [
    "Group",
    "Grouper",
    "ImpSort",
    "ImpSortError",
    "Import",
    "LanguageLevel",
    "Result",
    "get_language_level",
]
