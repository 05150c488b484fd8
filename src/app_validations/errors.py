from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .i18n import translate

DIRTY_SVG = "dirty_svg"


@dataclass
class ValidationError(Exception):
    key: str
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return translate(f"txt.apps.admin.error.{self.key}", **self.data)

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "data": dict(self.data), "message": self.message}

    def __str__(self) -> str:
        return self.message
