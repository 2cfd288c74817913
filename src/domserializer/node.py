"""DOM-like node tree consumed by the serializer.

The serializer only reads these nodes (plus one name normalization for foreign
content), so the classes stay small: a type discriminant, parent/sibling links,
and either a `data` payload or an ordered list of children.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class _StrEnum(str, Enum):
    """Backport of enum.StrEnum (Python 3.11+)."""


class ElementType(_StrEnum):
    ROOT = "root"
    TEXT = "text"
    DIRECTIVE = "directive"
    COMMENT = "comment"
    SCRIPT = "script"
    STYLE = "style"
    TAG = "tag"
    CDATA = "cdata"
    DOCTYPE = "doctype"


TAG_TYPES = frozenset({ElementType.TAG, ElementType.SCRIPT, ElementType.STYLE})

_NAMED_ELEMENT_TYPES = {"script": ElementType.SCRIPT, "style": ElementType.STYLE}


class Node:
    """Base class for every node in the tree.

    - type: the ElementType discriminant
    - parent: the containing node (None for detached nodes and roots)
    - prev/next: adjacent siblings
    """

    __slots__ = ("next", "parent", "prev", "type")

    def __init__(self, type: ElementType) -> None:  # noqa: A002
        self.type = type
        self.parent: NodeWithChildren | None = None
        self.prev: Node | None = None
        self.next: Node | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({getattr(self.type, 'value', self.type)})"


class DataNode(Node):
    """A node carrying a string payload (text, comments, directives)."""

    __slots__ = ("data",)

    def __init__(self, type: ElementType, data: str) -> None:  # noqa: A002
        super().__init__(type)
        self.data = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.data[:30]!r})"


class Text(DataNode):
    __slots__ = ()

    def __init__(self, data: str) -> None:
        super().__init__(ElementType.TEXT, data)


class Comment(DataNode):
    __slots__ = ()

    def __init__(self, data: str) -> None:
        super().__init__(ElementType.COMMENT, data)


class ProcessingInstruction(DataNode):
    """A `<!...>` or `<?...>` declaration.

    `data` holds everything between the angle brackets, e.g. `!DOCTYPE html`.
    Doctypes are usually stored as directives named `!doctype`; pass
    `doctype=True` to tag them with the dedicated DOCTYPE type instead.
    """

    __slots__ = ("name",)

    def __init__(self, name: str, data: str, *, doctype: bool = False) -> None:
        super().__init__(ElementType.DOCTYPE if doctype else ElementType.DIRECTIVE, data)
        self.name = name


class NodeWithChildren(Node):
    __slots__ = ("children",)

    def __init__(self, type: ElementType, children: Iterable[Node] | None = None) -> None:  # noqa: A002
        super().__init__(type)
        self.children: list[Node] = []
        for child in children or ():
            self.append_child(child)

    @property
    def first_child(self) -> Node | None:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Node | None:
        return self.children[-1] if self.children else None

    def append_child(self, child: Node) -> None:
        if self._would_create_circular_reference(child):
            msg = f"Adding {child!r} as child of {self!r} would create circular reference"
            raise ValueError(msg)

        if child.parent is not None:
            child.parent.remove_child(child)

        if self.children:
            self.children[-1].next = child
            child.prev = self.children[-1]
        else:
            child.prev = None

        child.parent = self
        child.next = None
        self.children.append(child)

    def insert_child_at(self, index: int, child: Node) -> None:
        """Insert a child at the specified index (appends when out of range)."""
        if self._would_create_circular_reference(child):
            msg = f"Adding {child!r} as child of {self!r} would create circular reference"
            raise ValueError(msg)

        if child.parent is not None:
            child.parent.remove_child(child)

        if index < 0 or index >= len(self.children):
            self.append_child(child)
            return

        child.parent = self
        self.children.insert(index, child)

        child.prev = self.children[index - 1] if index > 0 else None
        child.next = self.children[index + 1]
        child.next.prev = child
        if child.prev is not None:
            child.prev.next = child

    def remove_child(self, child: Node) -> None:
        """Remove a child node, updating all sibling links."""
        if child not in self.children:
            return

        if child.prev is not None:
            child.prev.next = child.next
        if child.next is not None:
            child.next.prev = child.prev

        self.children.remove(child)
        child.parent = None
        child.next = None
        child.prev = None

    def _would_create_circular_reference(self, child: Node) -> bool:
        """Check if adding child would make it its own ancestor."""
        current: Node | None = self
        while current is not None:
            if current is child:
                return True
            current = current.parent
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(children={len(self.children)})"


class Document(NodeWithChildren):
    __slots__ = ()

    def __init__(self, children: Iterable[Node] | None = None) -> None:
        super().__init__(ElementType.ROOT, children)


class CDATA(NodeWithChildren):
    """A `<![CDATA[...]]>` section; its payload is the single Text child."""

    __slots__ = ()

    def __init__(self, children: Iterable[Node] | None = None) -> None:
        super().__init__(ElementType.CDATA, children)


class Element(NodeWithChildren):
    """An element node.

    `attribs` keeps insertion order; a value of None marks a boolean-style
    attribute. The type defaults to SCRIPT/STYLE for those two names so that
    callers building trees by hand match what an HTML parser would produce.
    """

    __slots__ = ("attribs", "name")

    def __init__(
        self,
        name: str,
        attribs: dict[str, str | None] | None = None,
        children: Iterable[Node] | None = None,
        type: ElementType | None = None,  # noqa: A002
    ) -> None:
        if not name:
            msg = "Empty name passed to Element constructor"
            raise ValueError(msg)
        self.name = name
        self.attribs: dict[str, str | None] = dict(attribs) if attribs else {}
        if type is None:
            type = _NAMED_ELEMENT_TYPES.get(name, ElementType.TAG)  # noqa: A001
        super().__init__(type, children)

    def __repr__(self) -> str:
        return f"Element(<{self.name}>, children={len(self.children)})"


def is_tag(node: Node) -> bool:
    """Check if the node is an element (including script and style)."""
    return node.type in TAG_TYPES


def has_children(node: Node) -> bool:
    return isinstance(node, NodeWithChildren) and bool(node.children)
