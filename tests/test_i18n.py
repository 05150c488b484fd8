from __future__ import annotations

import pytest

from app_validations.i18n import load_catalog, translate


def test_sanitised_svg_warning_text() -> None:
    assert translate("txt.apps.admin.warning.sanitised_svg", svg="assets/logo.svg") == (
        "The markup in assets/logo.svg has been edited for use in Zendesk, "
        "and may not display as intended."
    )


def test_unknown_key_raises() -> None:
    with pytest.raises(KeyError):
        translate("txt.apps.admin.warning.nope", svg="x")


def test_missing_placeholder_raises() -> None:
    with pytest.raises(KeyError, match="svg"):
        translate("txt.apps.admin.warning.sanitised_svg")


def test_unknown_locale_raises() -> None:
    with pytest.raises(KeyError):
        load_catalog("xx-unknown")


def test_every_message_uses_the_svg_placeholder() -> None:
    for message in load_catalog().values():
        assert "%{svg}" in message
