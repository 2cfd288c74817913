"""Serialization options.

`SerializerOptions` is an immutable value. The serializer never changes an
options object in place: entering or leaving foreign content derives a new
value with `with_xml_mode()` and passes it down to that subtree only.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Literal, Union

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

XmlMode = Union[bool, Literal["foreign"]]
EncodeEntities = Union[bool, Literal["utf8"], None]

# JavaScript-style option names accepted by from_dict()
_CAMEL_CASE_KEYS = {
    "xmlMode": "xml_mode",
    "selfClosingTags": "self_closing_tags",
    "emptyAttrs": "empty_attrs",
    "encodeEntities": "encode_entities",
    "decodeEntities": "decode_entities",
}


@dataclass(frozen=True, slots=True)
class SerializerOptions:
    """Options controlling how a node tree is written out.

    Options left as None follow another option, matching what a caller that
    only sets `xml_mode` expects:

    - `self_closing_tags` and `empty_attrs` follow `xml_mode`.
    - `encode_entities` follows `decode_entities` (if entities were not
      decoded while parsing, they are not encoded again).
    """

    # True for strict XML output. "foreign" is the SVG/MathML-in-HTML mode; the
    # serializer enters it by itself on <svg> and <math>, but callers may force
    # it for a fragment that is known to be foreign content.
    xml_mode: XmlMode = False

    # Write childless elements as <name/>. In HTML mode this applies to void
    # elements only.
    self_closing_tags: bool | None = None

    # Write attributes with empty values as key="" instead of the bare key.
    empty_attrs: bool | None = None

    # False disables encoding, "utf8" keeps non-ASCII text in HTML mode, any
    # other truthy value encodes everything outside ASCII.
    encode_entities: EncodeEntities = None

    decode_entities: bool = True

    # Print a trace of foreign content transitions.
    debug: bool = False

    def __post_init__(self) -> None:
        if self.xml_mode not in (True, False, "foreign"):
            msg = f"xml_mode must be True, False or 'foreign', got {self.xml_mode!r}"
            raise ValueError(msg)
        if self.encode_entities not in (None, True, False, "utf8"):
            msg = f"encode_entities must be a bool, 'utf8' or None, got {self.encode_entities!r}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> SerializerOptions:
        """Build options from a mapping using snake_case or camelCase keys."""
        return cls(**_normalize_keys(options))

    @property
    def is_foreign(self) -> bool:
        return self.xml_mode == "foreign"

    @property
    def encoding_enabled(self) -> bool:
        if self.encode_entities is None:
            return self.decode_entities is not False
        return self.encode_entities is not False

    @property
    def uses_xml_encoding(self) -> bool:
        """Whether escaping must produce ASCII-only XML references."""
        return bool(self.xml_mode) or self.encode_entities != "utf8"

    def with_xml_mode(self, xml_mode: XmlMode) -> SerializerOptions:
        return replace(self, xml_mode=xml_mode)


DEFAULT_OPTIONS = SerializerOptions()


def resolve_options(options: SerializerOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> SerializerOptions:
    """Normalize the options argument accepted by the public entry points.

    Keyword arguments are applied on top of `options`.
    """
    if options is None:
        resolved = DEFAULT_OPTIONS
    elif isinstance(options, SerializerOptions):
        resolved = options
    else:
        resolved = SerializerOptions.from_dict(options)
    if kwargs:
        resolved = replace(resolved, **_normalize_keys(kwargs))
    return resolved


def _normalize_keys(options: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(SerializerOptions)}
    normalized: dict[str, Any] = {}
    for key, value in options.items():
        name = _CAMEL_CASE_KEYS.get(key, key)
        if name not in known:
            msg = f"Unknown serializer option: {key!r}"
            raise TypeError(msg)
        normalized[name] = value
    return normalized
