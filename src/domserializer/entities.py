"""Character entity encoding for serialized markup.

Four pure string functions, one per escaping strategy the serializer picks from:

- encode_xml: reserved markup characters plus everything outside ASCII
- escape_attribute: minimal escaping for double-quoted HTML attribute values
- escape_text: minimal escaping for HTML text content
- escape_quotes: double quotes only, for output with entity encoding turned off
"""

from __future__ import annotations

import re

XML_ENTITIES = {
    '"': "&quot;",
    "&": "&amp;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
}

_XML_REPLACER = re.compile("[\"&'<>\x80-\U0010ffff]")


def _xml_reference(match: re.Match[str]) -> str:
    char = match.group()
    named = XML_ENTITIES.get(char)
    if named is not None:
        return named
    return f"&#x{ord(char):x};"


def encode_xml(text: str) -> str:
    """Encode text for XML output.

    The five XML special characters become named references and every
    non-ASCII code point becomes a hexadecimal numeric reference, so the result
    is pure ASCII. Characters outside the BMP become a single reference.

    Args:
        text: Raw text
    Returns:
        ASCII-only text safe inside XML content and quoted attribute values
    """
    return _XML_REPLACER.sub(_xml_reference, text)


def escape_attribute(text: str) -> str:
    """Escape a value for a double-quoted HTML attribute, keeping non-ASCII text."""
    if not text:
        return ""
    return text.replace("&", "&amp;").replace('"', "&quot;").replace("\xa0", "&nbsp;")


def escape_text(text: str) -> str:
    """Escape HTML text content, keeping non-ASCII text."""
    if not text:
        return ""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace("\xa0", "&nbsp;")


def escape_quotes(text: str) -> str:
    return text.replace('"', "&quot;")
