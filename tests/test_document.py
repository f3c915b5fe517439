"""
test_document.py
----------------
Unit tests for the immutable document tree and its serializer.
"""
import dataclasses

import pytest

from dailythoughts.document import Element, Fragment, Markup, Text, h, serialize


class TestSerialize:
    """Test serialize function."""

    def test_nested_elements(self):
        doc = h("p", {"class": "lead"}, "Hello ", h("b", None, "you"))
        assert serialize(doc) == '<p class="lead">Hello <b>you</b></p>'

    def test_text_is_escaped(self):
        assert serialize(Text("<script>&")) == "&lt;script&gt;&amp;"

    def test_attribute_values_are_escaped(self):
        doc = h("a", {"href": '/x?a=1&b="2"'}, "x")
        assert serialize(doc) == '<a href="/x?a=1&amp;b=&quot;2&quot;">x</a>'

    def test_markup_is_written_verbatim(self):
        assert serialize(Markup("<em>hi</em>")) == "<em>hi</em>"

    def test_fragment_has_no_wrapper(self):
        assert serialize(Fragment([Text("a"), h("br"), Text("b")])) == "a<br>b"

    def test_void_elements_have_no_closing_tag(self):
        doc = h("head", None, h("meta", {"charset": "UTF-8"}), h("link", {"href": "/style.css", "rel": "stylesheet"}))
        assert serialize(doc) == '<head><meta charset="UTF-8"><link href="/style.css" rel="stylesheet"></head>'

    def test_none_children_are_dropped(self):
        assert serialize(h("div", None, None, "x", None)) == "<div>x</div>"


class TestNodes:
    """Test node construction."""

    def test_elements_are_immutable(self):
        doc = h("p", None, "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.tag = "div"

    def test_children_are_frozen_into_tuples(self):
        children = [Text("a")]
        doc = Element("p", {}, children)
        children.append(Text("b"))
        assert doc.children == (Text("a"),)

    def test_void_element_with_children_is_rejected(self):
        with pytest.raises(ValueError):
            h("br", None, "x")

    def test_non_node_child_is_rejected(self):
        with pytest.raises(TypeError):
            h("p", None, 42)
