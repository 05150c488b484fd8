from __future__ import annotations

from app_validations.xml_utils import quote_unquoted_attributes


def test_quotes_unquoted_values() -> None:
    assert quote_unquoted_attributes("<rect width=10 height='2'/>") == "<rect width=\"10\" height='2'/>"


def test_escapes_bare_ampersands_only() -> None:
    markup = "<svg onload=alert&#x28;1&#x29 id=\"a\">"
    assert quote_unquoted_attributes(markup) == '<svg onload="alert&#x28;1&amp;#x29" id="a">'


def test_quoted_values_are_untouched() -> None:
    markup = '<text title="a b=c d" x="1">a=b c</text>'
    assert quote_unquoted_attributes(markup) == markup


def test_values_invalid_even_unquoted_are_left_alone() -> None:
    markup = "<svg onload=innerHTML=location.hash>#<script>alert(1)</script>"
    assert quote_unquoted_attributes(markup) == markup


def test_valueless_attributes_are_left_alone() -> None:
    markup = '<svg onResize svg onResize="x">'
    assert quote_unquoted_attributes(markup) == markup
