from .entities import encode_xml, escape_attribute, escape_text
from .node import (
    CDATA,
    Comment,
    DataNode,
    Document,
    Element,
    ElementType,
    Node,
    NodeWithChildren,
    ProcessingInstruction,
    Text,
    has_children,
    is_tag,
)
from .options import SerializerOptions
from .serialize import render, render_children

__all__ = [
    "CDATA",
    "Comment",
    "DataNode",
    "Document",
    "Element",
    "ElementType",
    "Node",
    "NodeWithChildren",
    "ProcessingInstruction",
    "SerializerOptions",
    "Text",
    "encode_xml",
    "escape_attribute",
    "escape_text",
    "has_children",
    "is_tag",
    "render",
    "render_children",
]
