from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class Import:
    """A single import declaration plus the comments that travel with it."""
    name: str
    is_static: bool = False
    prefix: tuple = ()
    suffix: str = ""

    @property
    def segments(self) -> List[str]:
        return self.name.split(".")

    @property
    def last_segment(self) -> str:
        return self.segments[-1]

    @property
    def is_wildcard(self) -> bool:
        return self.name.endswith(".*")

    @property
    def package(self) -> str:
        return self.name.rpartition(".")[0]

    @property
    def key(self) -> tuple:
        return (self.is_static, self.name)

    def render(self, eol: str) -> str:
        lines = list(self.prefix)
        keyword = "import static " if self.is_static else "import "
        lines.append(f"{keyword}{self.name};{self.suffix}")
        return eol.join(lines)


@dataclass
class Result:
    """Outcome of sorting one file's imports."""
    path: Path
    original: bytes
    sorted: bytes
    imports: List[Import] = field(default_factory=list)

    @property
    def is_sorted(self) -> bool:
        return self.original == self.sorted

    def save_sorted(self, destination: Optional[Path] = None) -> Optional[bytes]:
        """Return the sorted bytes, or None when the input was already sorted.

        When a destination is given the sorted bytes are written there too.
        """
        if self.is_sorted:
            return None
        if destination is not None:
            Path(destination).write_bytes(self.sorted)
        return self.sorted
