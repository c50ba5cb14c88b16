"""Tests for the XML document model and serializer."""

import pytest

from shield_maker.markup import Document, Node, Pusher, Raw, Text, escape_xml, format_value, render


def _render_node(node: Node) -> str:
    doc = Document()
    doc.push_node(node)
    return render(doc)


class TestNodeConstruction:
    def test_writes_simple_element(self):
        person = Node.with_attributes("person", [
            ("name", "Paul Appleseed"),
            ("email", "paul@example.org"),
        ])
        assert _render_node(person) == '<person name="Paul Appleseed" email="paul@example.org"/>'

    def test_writes_nested_elements(self):
        person = Node.with_attributes("person", [
            ("name", "Paul Appleseed"),
            ("email", "paul@example.org"),
        ])

        def todo(node):
            node.push_node_named("Task", lambda n: n.push_text("Water plants"))
            node.push_node_named("Task", lambda n: n.push_text("Pet dog"))
            node.push_node_named("Task").push_text("Use Python")

        person.push_node_and(Node.with_name("Todo"), todo)
        person.push_node_and(Node.with_name("danger"), lambda n: n.push_raw("some raw content!"))

        assert _render_node(person) == (
            '<person name="Paul Appleseed" email="paul@example.org">'
            "<Todo><Task>Water plants</Task><Task>Pet dog</Task><Task>Use Python</Task></Todo>"
            "<danger>some raw content!</danger></person>"
        )

    def test_with_name_and_runs_builder(self):
        node = Node.with_name_and("g", lambda n: n.add_attr("id", "x"))
        assert node.attributes == [("id", "x")]
        assert node.content is None

    def test_push_node_and_returns_node(self):
        parent = Node.with_name("g")
        child = parent.push_node_and(Node.with_name("rect"), lambda n: n.add_attr("x", 1))
        assert parent.content == [child]


class TestSerialization:
    def test_no_children_self_closes(self):
        assert _render_node(Node("g")) == "<g/>"

    def test_empty_children_open_and_close(self):
        assert _render_node(Node("g", content=[])) == "<g></g>"

    def test_escapes_text(self):
        node = Node.with_name("t")
        node.push_text("& < > \" ' ok")
        assert _render_node(node) == "<t>&amp; &lt; &gt; &quot; &apos; ok</t>"

    def test_escapes_attribute_values(self):
        node = Node.with_attributes("t", [("title", 'a<b & "c"')])
        assert _render_node(node) == '<t title="a&lt;b &amp; &quot;c&quot;"/>'

    def test_raw_is_verbatim(self):
        doc = Document()
        doc.push_element(Raw("<b>&nbsp;</b>"))
        doc.push_element(Text("<b>"))
        assert render(doc) == "<b>&nbsp;</b>&lt;b&gt;"

    def test_attribute_order_is_insertion_order(self):
        node = Node.with_name("rect")
        node.add_attrs([("z", 1), ("a", 2)])
        node.add_attr("m", 3)
        node.add_attr("a", 4)
        assert _render_node(node) == '<rect z="1" a="2" m="3" a="4"/>'

    def test_child_order_is_insertion_order(self):
        node = Node.with_name("g")
        node.push_nodes([Node("c"), Node("a")])
        node.push_node(Node("b"))
        assert _render_node(node) == "<g><c/><a/><b/></g>"

    def test_document_renders_top_level_elements_in_order(self):
        doc = Document()
        doc.push_raw("<?xml version=\"1.0\"?>")
        doc.push_node_named("svg")
        assert render(doc) == '<?xml version="1.0"?><svg/>'

    def test_empty_document(self):
        assert render(Document()) == ""


class TestHelpers:
    def test_format_value(self):
        assert format_value(20.0) == "20"
        assert format_value(-10.0) == "-10"
        assert format_value(0.5) == "0.5"
        assert format_value(104) == "104"
        assert format_value("url(#r)") == "url(#r)"

    def test_escape_xml_leaves_other_characters(self):
        assert escape_xml("100% ★") == "100% ★"


class TestPusherBase:
    def test_pusher_is_abstract(self):
        with pytest.raises(TypeError):
            Pusher()

    def test_subclass_without_push_element_cannot_instantiate(self):
        class Incomplete(Pusher):
            pass

        with pytest.raises(TypeError):
            Incomplete()
