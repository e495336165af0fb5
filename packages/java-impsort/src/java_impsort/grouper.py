from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List

from .models import Import

CATCH_ALL = "*"


@dataclass(frozen=True)
class Group:
    prefix: str
    order: int

    def matches(self, name: str) -> bool:
        return self.prefix == CATCH_ALL or name.startswith(self.prefix)

    @property
    def weight(self) -> int:
        return 0 if self.prefix == CATCH_ALL else len(self.prefix)


def parse_groups(groups: str) -> List[Group]:
    """Parse a comma separated prefix list, appending the catch-all group if missing."""
    prefixes = [p.strip() for p in (groups or "").split(",") if p.strip()]
    if CATCH_ALL not in prefixes:
        prefixes.append(CATCH_ALL)
    seen = []
    for prefix in prefixes:
        if prefix not in seen:
            seen.append(prefix)
    return [Group(prefix, order) for order, prefix in enumerate(seen)]


def _compare_depth_first(a: Import, b: Import) -> int:
    sa, sb = a.segments, b.segments
    return (sa > sb) - (sa < sb)


def _compare_breadth_first(a: Import, b: Import) -> int:
    sa, sb = a.segments, b.segments
    for i, (x, y) in enumerate(zip(sa, sb)):
        if x == y:
            continue
        a_last = i == len(sa) - 1
        b_last = i == len(sb) - 1
        if a_last != b_last:
            return -1 if a_last else 1
        return -1 if x < y else 1
    return len(sa) - len(sb)


class Grouper:
    """Partitions imports into ordered, sorted groups."""

    def __init__(self, groups: str, static_groups: str, static_after: bool,
                 join_static_with_non_static: bool, breadth_first_comparator: bool):
        self.groups = parse_groups(groups)
        self.static_groups = parse_groups(static_groups)
        self.static_after = static_after
        self.join_static_with_non_static = join_static_with_non_static
        self.breadth_first_comparator = breadth_first_comparator

    @property
    def comparator(self) -> Callable[[Import, Import], int]:
        return _compare_breadth_first if self.breadth_first_comparator else _compare_depth_first

    @staticmethod
    def find_group(groups: List[Group], imp: Import) -> Group:
        best = None
        for group in groups:
            if group.matches(imp.name) and (best is None or group.weight > best.weight):
                best = group
        return best

    def _partition(self, groups: List[Group], imports: Iterable[Import]) -> Dict[Group, List[Import]]:
        buckets: Dict[Group, List[Import]] = {group: [] for group in groups}
        for imp in imports:
            buckets[self.find_group(groups, imp)].append(imp)
        key = cmp_to_key(self.comparator)
        for members in buckets.values():
            members.sort(key=key)
        return buckets

    def group(self, imports: Iterable[Import]) -> List[List[Import]]:
        """Return non-empty groups in output order."""
        imports = list(imports)
        statics = [i for i in imports if i.is_static]
        non_statics = [i for i in imports if not i.is_static]

        if self.join_static_with_non_static:
            static_buckets = self._partition(self.groups, statics)
            plain_buckets = self._partition(self.groups, non_statics)
            result = []
            for group in self.groups:
                parts = [plain_buckets[group], static_buckets[group]]
                if not self.static_after:
                    parts.reverse()
                result.append(parts[0] + parts[1])
        else:
            plain = list(self._partition(self.groups, non_statics).values())
            static = list(self._partition(self.static_groups, statics).values())
            result = plain + static if self.static_after else static + plain

        return [members for members in result if members]
