from __future__ import annotations

import re

from lxml import etree

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
KNOWN_PREFIXES = {
    "http://www.w3.org/1999/xlink": "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
}


def local_name(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def namespace(tag: str) -> str | None:
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def attribute_name(qname: str) -> str:
    """Return ``prefix:name`` for attributes in the xlink/xml namespaces.

    Attributes in any other namespace keep their Clark notation so they never
    match a plain allow-list entry.
    """
    ns = namespace(qname)
    if ns is None:
        return qname
    prefix = KNOWN_PREFIXES.get(ns)
    if prefix is None:
        return qname
    return f"{prefix}:{local_name(qname)}"


def parse_style(style: str) -> list[tuple[str, str]]:
    parsed: list[tuple[str, str]] = []
    for chunk in style.split(";"):
        chunk = chunk.strip()
        if not chunk or ":" not in chunk:
            continue
        key, value = chunk.split(":", 1)
        parsed.append((key.strip().lower(), value.strip()))
    return parsed


def drop_tree(node: etree._Element) -> None:
    """Remove ``node`` and its children, keeping the text that follows it."""
    parent = node.getparent()
    if parent is None:
        return
    if node.tail:
        previous = node.getprevious()
        if previous is None:
            parent.text = (parent.text or "") + node.tail
        else:
            previous.tail = (previous.tail or "") + node.tail
    parent.remove(node)


_ATTR = r"""\s+[^\s"'<>/=]+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'<>]+))?"""
START_TAG_RE = re.compile(rf"<[A-Za-z_][^\s/<>]*(?:{_ATTR})*\s*/?>")
ATTR_RE = re.compile(r"""(\s+[^\s"'<>/=]+)(?:(\s*=\s*)("[^"]*"|'[^']*'|[^\s"'<>]+))?""")
UNQUOTED_VALUE_RE = re.compile(r"^[^\s\"'=<>`]+$")
BARE_AMPERSAND_RE = re.compile(r"&(?!#[0-9]+;|#x[0-9a-fA-F]+;|[A-Za-z][\w.-]*;)")


def _quote_value(match: re.Match[str]) -> str:
    name, equals, value = match.groups()
    if value is None or value[0] in "\"'" or not UNQUOTED_VALUE_RE.match(value):
        return match.group(0)
    return f'{name}{equals}"{BARE_AMPERSAND_RE.sub("&amp;", value)}"'


def quote_unquoted_attributes(markup: str) -> str:
    """Quote HTML-style unquoted attribute values in start tags.

    Values holding ``=``, quotes or a backtick are not valid even unquoted and
    are left for the XML parser's own recovery.
    """
    return START_TAG_RE.sub(lambda tag: ATTR_RE.sub(_quote_value, tag.group(0)), markup)
