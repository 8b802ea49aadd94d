"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class AppConfig:
    root: Path | None = None
    include_hidden: bool = False
    max_results: int = 50

    def __post_init__(self) -> None:
        if self.root is None:
            self.root = Path(".")

    def resolve_root(self, base_dir: Path | None = None) -> Path:
        if self.root is None:
            self.root = Path(".")
        if Path(self.root).is_absolute() or base_dir is None:
            return Path(self.root)
        return base_dir / self.root
