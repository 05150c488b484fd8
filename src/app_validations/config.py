from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_POLICY_PATH = DATA_DIR / "sanitizer_policy.yml"

_POLICY_SECTIONS = (
    "elements",
    "attributes",
    "uri_attributes",
    "allowed_protocols",
    "local_href_elements",
    "ref_attributes",
    "css_properties",
)


@dataclass(frozen=True)
class SanitizerPolicy:
    elements: frozenset[str]
    attributes: frozenset[str]
    uri_attributes: frozenset[str]
    allowed_protocols: frozenset[str]
    local_href_elements: frozenset[str]
    ref_attributes: frozenset[str]
    css_properties: frozenset[str]


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of YAML: {path}")
    return data


def _string_set(data: dict[str, Any], section: str, path: Path) -> frozenset[str]:
    try:
        values = data[section]
    except KeyError as exc:
        raise ValueError(f"Missing sanitizer policy section {exc} in {path}") from exc
    if values is None:
        return frozenset()
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"Sanitizer policy section '{section}' must be a list of strings: {path}")
    return frozenset(values)


def load_policy(path: Path | None = None) -> SanitizerPolicy:
    path = path or DEFAULT_POLICY_PATH
    data = _load_yaml(path)
    sections = {section: _string_set(data, section, path) for section in _POLICY_SECTIONS}
    # Protocol matching is done on lowercased values.
    sections["allowed_protocols"] = frozenset(p.lower() for p in sections["allowed_protocols"])
    return SanitizerPolicy(**sections)


@lru_cache(maxsize=1)
def default_policy() -> SanitizerPolicy:
    return load_policy(DEFAULT_POLICY_PATH)
