"""Pruning scrubber for SVG markup.

Markup is parsed in XML recovery mode, so broken tags are repaired the way
libxml2 repairs them. Elements outside the policy are removed together with
everything inside them; attributes outside the policy are deleted. The result
is serialized with the HTML serializer (explicit end tags, no XML declaration)
followed by a newline.
"""

from __future__ import annotations

import logging
import re

from lxml import etree

from .config import SanitizerPolicy, default_policy
from .xml_utils import (
    SVG_NAMESPACE,
    attribute_name,
    drop_tree,
    local_name,
    namespace,
    parse_style,
    quote_unquoted_attributes,
)

logger = logging.getLogger(__name__)

PROTOCOL_RE = re.compile(r"^[a-z0-9][-+.a-z0-9]*:")
URI_NOISE_RE = re.compile(r"[`\x00-\x20\x7f\s\u0080-\u00a0]+")
EXTERNAL_URL_RE = re.compile(r"url\s*\(\s*[^#\s][^)]+?\)", re.DOTALL)
UNSAFE_CSS_RE = re.compile(r"expression\s*\(|javascript:|vbscript:|\\|<|@import", re.IGNORECASE)


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        encoding="utf-8",
        recover=True,
        remove_blank_text=True,
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        no_network=True,
    )


def _parse(markup: str) -> etree._Element | None:
    if not markup.strip():
        return None
    try:
        return etree.fromstring(quote_unquoted_attributes(markup).encode("utf-8"), _make_parser())
    except etree.XMLSyntaxError as exc:
        logger.debug("Unrecoverable markup: %s", exc)
        return None


def _element_allowed(node: etree._Element, policy: SanitizerPolicy) -> bool:
    if not isinstance(node.tag, str):
        # Comments, processing instructions and unresolved entity references.
        return False
    if namespace(node.tag) not in (None, SVG_NAMESPACE):
        return False
    return local_name(node.tag) in policy.elements


def _uri_allowed(value: str, policy: SanitizerPolicy) -> bool:
    compact = URI_NOISE_RE.sub("", value).lower()
    if not PROTOCOL_RE.match(compact):
        return True
    return compact.split(":", 1)[0] in policy.allowed_protocols


def _scrub_css(style: str, policy: SanitizerPolicy) -> str:
    declarations = []
    for name, value in parse_style(style):
        if name not in policy.css_properties or not value:
            continue
        if UNSAFE_CSS_RE.search(value) or EXTERNAL_URL_RE.search(value):
            continue
        declarations.append(f"{name}:{value};")
    return " ".join(declarations)


def _scrub_attributes(node: etree._Element, policy: SanitizerPolicy) -> None:
    tag = local_name(node.tag)
    for qname in list(node.attrib):
        name = attribute_name(qname)
        value = node.attrib[qname]
        if name not in policy.attributes:
            del node.attrib[qname]
            continue
        if name in policy.uri_attributes:
            if not _uri_allowed(value, policy):
                del node.attrib[qname]
                continue
            if tag in policy.local_href_elements and not value.strip().startswith("#"):
                del node.attrib[qname]
                continue
        if name in policy.ref_attributes:
            value = EXTERNAL_URL_RE.sub(" ", value)
            node.attrib[qname] = value
        if name == "style":
            value = _scrub_css(value, policy)
            if value:
                node.attrib[qname] = value
            else:
                del node.attrib[qname]


def _scrub(node: etree._Element, policy: SanitizerPolicy) -> None:
    _scrub_attributes(node, policy)
    for child in list(node):
        if _element_allowed(child, policy):
            _scrub(child, policy)
        else:
            drop_tree(child)


def sanitize(markup: str, policy: SanitizerPolicy | None = None) -> str:
    """Return ``markup`` with disallowed elements and attributes pruned."""
    policy = policy or default_policy()
    root = _parse(markup)
    if root is None or not _element_allowed(root, policy):
        return ""
    _scrub(root, policy)
    return etree.tostring(root, method="html", encoding="unicode") + "\n"
