"""Message catalog lookup for user-facing validation text."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

from .config import DATA_DIR, _load_yaml

LOCALES_DIR = DATA_DIR / "locales"
DEFAULT_LOCALE = "en"

PLACEHOLDER_RE = re.compile(r"%\{(\w+)\}")


@lru_cache(maxsize=None)
def load_catalog(locale: str = DEFAULT_LOCALE) -> dict[str, str]:
    path = LOCALES_DIR / f"{locale}.yml"
    if not path.is_file():
        raise KeyError(f"No message catalog for locale '{locale}'")
    return {str(key): str(value) for key, value in _load_yaml(path).items()}


def translate(key: str, locale: str = DEFAULT_LOCALE, **values: Any) -> str:
    """Render message ``key`` from the catalog, filling ``%{name}`` placeholders.

    Raises ``KeyError`` for an unknown key or a placeholder without a value.
    """
    template = load_catalog(locale)[key]

    def _fill(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in values:
            raise KeyError(f"Missing value for placeholder '{name}' in '{key}'")
        return str(values[name])

    return PLACEHOLDER_RE.sub(_fill, template)
