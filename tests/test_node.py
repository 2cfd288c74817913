"""Tests for the node tree used as serializer input."""

import unittest

from domserializer import (
    CDATA,
    Comment,
    Document,
    Element,
    ElementType,
    ProcessingInstruction,
    Text,
    has_children,
    is_tag,
)


class TestNodeTypes(unittest.TestCase):
    def test_element_type_defaults_from_name(self):
        assert Element("div").type is ElementType.TAG
        assert Element("script").type is ElementType.SCRIPT
        assert Element("style").type is ElementType.STYLE

    def test_explicit_element_type(self):
        assert Element("script", type=ElementType.TAG).type is ElementType.TAG

    def test_element_types_are_strings(self):
        assert ElementType.CDATA == "cdata"

    def test_data_node_types(self):
        assert Text("x").type is ElementType.TEXT
        assert Comment("x").type is ElementType.COMMENT
        assert ProcessingInstruction("!doctype", "!DOCTYPE html").type is ElementType.DIRECTIVE
        assert ProcessingInstruction("!doctype", "!DOCTYPE html", doctype=True).type is ElementType.DOCTYPE

    def test_container_types(self):
        assert Document().type is ElementType.ROOT
        assert CDATA().type is ElementType.CDATA

    def test_is_tag(self):
        assert is_tag(Element("p"))
        assert is_tag(Element("script"))
        assert not is_tag(Text("p"))
        assert not is_tag(Document())

    def test_has_children(self):
        assert not has_children(Element("p"))
        assert has_children(Element("p", None, [Text("x")]))
        assert not has_children(Text("x"))

    def test_empty_element_name_is_rejected(self):
        with self.assertRaises(ValueError):
            Element("")

    def test_attributes_are_copied(self):
        attrs = {"id": "a"}
        node = Element("p", attrs)
        attrs["id"] = "b"
        assert node.attribs == {"id": "a"}


class TestTreeLinks(unittest.TestCase):
    def test_constructor_children_are_linked(self):
        a, b = Text("a"), Text("b")
        parent = Element("p", None, [a, b])
        assert parent.children == [a, b]
        assert a.parent is parent
        assert b.parent is parent
        assert a.next is b
        assert b.prev is a
        assert a.prev is None
        assert b.next is None
        assert parent.first_child is a
        assert parent.last_child is b

    def test_append_moves_child_between_parents(self):
        child = Text("x")
        first = Element("p", None, [Text("a"), child])
        second = Element("div")
        second.append_child(child)
        assert first.children[0].next is None
        assert len(first.children) == 1
        assert child.parent is second
        assert child.prev is None

    def test_insert_child_at(self):
        a, b, c = Text("a"), Text("b"), Text("c")
        parent = Element("p", None, [a, c])
        parent.insert_child_at(1, b)
        assert parent.children == [a, b, c]
        assert a.next is b
        assert b.prev is a
        assert b.next is c
        assert c.prev is b

    def test_insert_child_at_front(self):
        a, b = Text("a"), Text("b")
        parent = Element("p", None, [b])
        parent.insert_child_at(0, a)
        assert parent.children == [a, b]
        assert a.prev is None
        assert b.prev is a

    def test_insert_out_of_range_appends(self):
        a, b = Text("a"), Text("b")
        parent = Element("p", None, [a])
        parent.insert_child_at(10, b)
        assert parent.children == [a, b]
        assert a.next is b

    def test_remove_child(self):
        a, b, c = Text("a"), Text("b"), Text("c")
        parent = Element("p", None, [a, b, c])
        parent.remove_child(b)
        assert parent.children == [a, c]
        assert a.next is c
        assert c.prev is a
        assert b.parent is None
        assert b.prev is None
        assert b.next is None

    def test_remove_unknown_child_is_ignored(self):
        parent = Element("p", None, [Text("a")])
        parent.remove_child(Text("b"))
        assert len(parent.children) == 1

    def test_cycles_are_rejected(self):
        outer = Element("div")
        inner = Element("span")
        outer.append_child(inner)
        with self.assertRaises(ValueError):
            inner.append_child(outer)
        with self.assertRaises(ValueError):
            inner.insert_child_at(0, outer)
        with self.assertRaises(ValueError):
            outer.append_child(outer)
        assert inner.parent is outer
        assert outer.parent is None

    def test_repr(self):
        assert repr(Element("p", None, [Text("a")])) == "Element(<p>, children=1)"
        assert repr(Text("hello")) == "Text('hello')"
