"""Markup serialization for DOM nodes.

`render()` produces the outer markup of a node (or a list of sibling nodes),
the equivalent of `outerHTML`. Options are immutable: when an <svg> or <math>
subtree switches to foreign content, a derived options value is passed down to
that subtree only, so siblings keep rendering under the caller's options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .constants import (
    FOREIGN_ATTRIBUTE_NAMES,
    FOREIGN_ELEMENT_NAMES,
    FOREIGN_INTEGRATION_POINTS,
    FOREIGN_ROOT_ELEMENTS,
    UNENCODED_ELEMENTS,
    VOID_ELEMENTS,
)
from .entities import encode_xml, escape_attribute, escape_quotes, escape_text
from .node import CDATA, TAG_TYPES, DataNode, Element, ElementType, Node, NodeWithChildren
from .options import SerializerOptions, resolve_options

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    OptionsArg = SerializerOptions | Mapping[str, Any] | None

_DIRECTIVE_TYPES = frozenset({ElementType.DIRECTIVE, ElementType.DOCTYPE})


def render(node: Node | Iterable[Node], options: OptionsArg = None, **kwargs: Any) -> str:
    """Render a node, or a sequence of sibling nodes, to a markup string.

    Args:
        node: A single node, or any iterable of nodes rendered in order
        options: SerializerOptions, or a mapping of option names (snake_case or
            camelCase). Keyword arguments override individual options.
    Returns:
        The serialized markup
    """
    return _render_nodes(node, resolve_options(options, **kwargs))


def render_children(node: NodeWithChildren, options: OptionsArg = None, **kwargs: Any) -> str:
    """Render only the children of a node (its inner markup)."""
    return _render_nodes(node.children, resolve_options(options, **kwargs))


def _render_nodes(nodes: Node | Iterable[Node], opts: SerializerOptions) -> str:
    if isinstance(nodes, Node):
        return _render_node(nodes, opts)
    return "".join(_render_node(child, opts) for child in nodes)


def _render_node(node: Node, opts: SerializerOptions) -> str:
    kind = node.type
    if kind == ElementType.ROOT:
        return _render_nodes(node.children, opts)  # type: ignore[attr-defined]
    if kind in _DIRECTIVE_TYPES:
        return _render_directive(node)  # type: ignore[arg-type]
    if kind == ElementType.COMMENT:
        return _render_comment(node)  # type: ignore[arg-type]
    if kind == ElementType.CDATA:
        return _render_cdata(node)  # type: ignore[arg-type]
    if kind in TAG_TYPES:
        return _render_tag(node, opts)  # type: ignore[arg-type]
    if kind == ElementType.TEXT:
        return _render_text(node, opts)  # type: ignore[arg-type]
    msg = f"Unsupported node type: {kind!r} ({type(node).__name__})"
    raise TypeError(msg)


def _render_tag(elem: Element, opts: SerializerOptions) -> str:
    # SVG and MathML inside HTML
    if opts.is_foreign:
        canonical = FOREIGN_ELEMENT_NAMES.get(elem.name)
        if canonical is not None and canonical != elem.name:
            _debug(opts, f"renamed <{elem.name}> to <{canonical}>")
            elem.name = canonical
        if _parent_name(elem) in FOREIGN_INTEGRATION_POINTS:
            _debug(opts, f"<{elem.name}> is inside an integration point, back to HTML")
            opts = opts.with_xml_mode(False)
    if not opts.xml_mode and elem.name in FOREIGN_ROOT_ELEMENTS:
        _debug(opts, f"entering foreign content at <{elem.name}>")
        opts = opts.with_xml_mode("foreign")

    tag = f"<{elem.name}"
    attribs = _format_attributes(elem.attribs, opts)
    if attribs:
        tag += f" {attribs}"

    if not elem.children and _should_self_close(elem.name, opts):
        if not opts.xml_mode:
            tag += " "
        return tag + "/>"

    tag += ">"
    if elem.children:
        tag += _render_nodes(elem.children, opts)

    # Void elements never get a closing tag in HTML, even if they have children
    if opts.xml_mode or elem.name not in VOID_ELEMENTS:
        tag += f"</{elem.name}>"
    return tag


def _should_self_close(name: str, opts: SerializerOptions) -> bool:
    if opts.xml_mode:
        # XML and foreign content self-close unless explicitly turned off
        return opts.self_closing_tags is not False
    return bool(opts.self_closing_tags) and name in VOID_ELEMENTS


def _format_attributes(attribs: dict[str, str | None] | None, opts: SerializerOptions) -> str:
    if not attribs:
        return ""

    encode = _attribute_encoder(opts)
    foreign = opts.is_foreign
    parts: list[str] = []
    for key, raw_value in attribs.items():
        value = raw_value if raw_value is not None else ""
        if foreign:
            key = FOREIGN_ATTRIBUTE_NAMES.get(key, key)  # noqa: PLW2901
        if not opts.empty_attrs and not opts.xml_mode and value == "":
            parts.append(key)
        else:
            parts.append(f'{key}="{encode(value)}"')
    return " ".join(parts)


def _attribute_encoder(opts: SerializerOptions) -> Callable[[str], str]:
    if not opts.encoding_enabled:
        return escape_quotes
    if opts.uses_xml_encoding:
        return encode_xml
    return escape_attribute


def _render_text(node: DataNode, opts: SerializerOptions) -> str:
    data = node.data or ""
    if not opts.encoding_enabled:
        return data
    # Raw text elements keep their content as-is outside XML
    if not opts.xml_mode and _parent_name(node) in UNENCODED_ELEMENTS:
        return data
    if opts.uses_xml_encoding:
        return encode_xml(data)
    return escape_text(data)


def _render_directive(node: DataNode) -> str:
    return f"<{node.data}>"


def _render_comment(node: DataNode) -> str:
    return f"<!--{node.data}-->"


def _render_cdata(node: CDATA) -> str:
    return f"<![CDATA[{node.children[0].data}]]>"  # type: ignore[attr-defined]


def _parent_name(node: Node) -> str | None:
    return getattr(node.parent, "name", None)


def _debug(opts: SerializerOptions, message: str, indent: int = 4) -> None:
    if opts.debug:
        print(f"{' ' * indent}{message}")  # noqa: T201
