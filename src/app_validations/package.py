from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

SVG_FILE_RE = re.compile(r"^assets/.*\.svg$")


@dataclass(frozen=True)
class AppFile:
    package_root: Path
    relative_path: str

    @property
    def absolute_path(self) -> Path:
        return self.package_root / self.relative_path

    def read(self) -> str:
        return self.absolute_path.read_text(encoding="utf-8")


@dataclass
class AppPackage:
    """An unpacked app directory plus the warnings collected while validating it."""

    root: Path
    warnings: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.root = Path(self.root)

    @property
    def files(self) -> list[AppFile]:
        paths = sorted(p.relative_to(self.root).as_posix() for p in self.root.rglob("*") if p.is_file())
        return [AppFile(self.root, path) for path in paths]

    @property
    def svg_files(self) -> list[AppFile]:
        return [app_file for app_file in self.files if SVG_FILE_RE.match(app_file.relative_path)]

    def write_file(self, relative_path: str, content: str) -> None:
        (self.root / relative_path).write_text(content, encoding="utf-8")
