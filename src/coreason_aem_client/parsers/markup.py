"""
Helpers shared by the HTML and XML response handlers.

AEM response bodies need sanitizing because of missing closing tags scattered across
many AEM pages. Sanitizing is plain regex substitution so that the remaining markup is
well-formed enough for ElementTree.
"""

import re
import xml.etree.ElementTree as ET
from typing import Any, Mapping, Optional, Pattern, Union

from coreason_aem_client.utils.logger import logger

PatternLike = Union[str, Pattern[str]]


def as_text(body: Any) -> str:
    """Decodes a response body to str; None becomes an empty string."""
    if body is None:
        return ""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    return str(body)


def sanitize_html(html: str, pattern: PatternLike, replacement: str) -> str:
    """
    Replaces every match of pattern, but only when the pattern actually occurs.

    Newer AEM versions may or may not emit the invalid tags older versions did,
    so clean input is returned untouched.

    Args:
        html: Response body.
        pattern: Regex whose matches are replaced.
        replacement: Replacement string.

    Returns:
        The sanitized body.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    if regex.search(html):
        return regex.sub(replacement, html)
    return html


def _strip_namespaces(root: ET.Element) -> ET.Element:
    for element in root.iter():
        if isinstance(element.tag, str) and "}" in element.tag:
            element.tag = element.tag.split("}", 1)[1]
    return root


def parse_markup(body: str) -> Optional[ET.Element]:
    """Parses a document; returns None when it is empty or not well-formed."""
    if not body.strip():
        return None
    try:
        return _strip_namespaces(ET.fromstring(body))
    except ET.ParseError as e:
        logger.debug(f"Unable to parse response body: {e}")
        return None


def find_first(root: Optional[ET.Element], path: str) -> Optional[ET.Element]:
    """
    Finds the first element matching a slash separated path anywhere in the document,
    including a path that starts at the root element itself.
    """
    if root is None:
        return None
    head, _, rest = path.partition("/")
    if root.tag == head:
        found = root.find(rest) if rest else root
        if found is not None:
            return found
    return root.find(f".//{path}")


def first_text(root: Optional[ET.Element], path: str) -> str:
    element = find_first(root, path)
    if element is None or element.text is None:
        return ""
    return element.text


def format_message(template: str, params: Mapping[str, Any]) -> str:
    return template.format_map(dict(params))
