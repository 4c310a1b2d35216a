"""
Tests for the structured data to XML serializer, in particular the rule
that sequence items become same-named siblings.
"""

from __future__ import annotations

import pytest

from gatewayctl.exceptions import GatewayProtocolError
from gatewayctl.xmltree import Named, Repeated, Scalar, build_tree, serialize, to_node


class TestToNode:
    def test_dict_list_and_scalars(self) -> None:
        node = to_node({"a": ["x", 2], "b": None, "c": True})

        assert node == Named({
            "a": Repeated((Scalar("x"), Scalar("2"))),
            "b": Scalar(""),
            "c": Scalar("true"),
        })

    def test_nodes_are_kept(self) -> None:
        node = Named({"a": Scalar("1")})
        assert to_node(node) is node

    def test_unknown_objects_coerced_to_text(self) -> None:
        assert to_node(object).value.startswith("<class")


class TestNamedEntries:
    def test_one_element_per_key_nested_to_depth(self) -> None:
        root = build_tree({"a": {"b": {"c": "deep"}}, "d": "flat"}, "root")

        assert [child.tag for child in root] == ["a", "d"]
        assert len(root.find("a")) == 1
        assert root.findtext("a/b/c") == "deep"
        assert root.findtext("d") == "flat"
        assert len(root.findall(".//*")) == 4

    def test_key_order_is_preserved(self) -> None:
        root = build_tree({"z": "1", "a": "2", "m": "3"}, "root")
        assert [child.tag for child in root] == ["z", "a", "m"]

    def test_empty_mapping_gives_empty_element(self) -> None:
        root = build_tree({"subscription": {}}, "root")
        sub = root.find("subscription")
        assert sub is not None
        assert len(sub) == 0
        assert sub.text is None


class TestRepeatedEntries:
    def test_scalars_become_siblings(self) -> None:
        root = build_tree({"field": ["hello", "world"]}, "node")

        fields = root.findall("field")
        assert [f.text for f in fields] == ["hello", "world"]
        assert all(f.getparent() is root for f in fields)
        assert len(root) == 2

    @pytest.mark.parametrize("k", [1, 2, 3, 5])
    def test_k_items_give_k_siblings(self, k: int) -> None:
        root = build_tree({"item": [str(i) for i in range(k)], "after": "x"}, "root")

        assert len(root.findall("item")) == k
        assert len(root) == k + 1

    def test_siblings_follow_the_first_item(self) -> None:
        root = build_tree({"before": "b", "item": ["1", "2"], "after": "a"}, "root")
        assert [child.tag for child in root] == ["before", "item", "item", "after"]

    def test_mixed_scalar_and_mapping_items(self) -> None:
        data = {"nodes": {"node": ["text", {"field": ["hello", "world"]}]}}

        root = build_tree(data, "response")

        nodes = root.findall("nodes/node")
        assert len(nodes) == 2
        assert nodes[0].text == "text"
        assert [f.text for f in nodes[1].findall("field")] == ["hello", "world"]

    def test_empty_sequence_leaves_element_empty(self) -> None:
        root = build_tree({"item": []}, "root")
        assert len(root.findall("item")) == 1
        assert root.find("item").text is None

    def test_single_item_sequence_at_root(self) -> None:
        root = build_tree(["only"], "root")
        assert root.text == "only"

    def test_extra_items_at_root_are_dropped(self, caplog) -> None:
        with caplog.at_level("WARNING", logger="gatewayctl.xmltree"):
            root = build_tree(["one", "two"], "root")

        assert root.text == "one"
        assert len(root) == 0
        assert "single root" in caplog.text

    def test_integer_keys_become_siblings(self) -> None:
        root = build_tree({"item": {0: "a", 1: "b"}}, "root")

        items = root.findall("item")
        assert [i.text for i in items] == ["a", "b"]
        assert all(i.getparent() is root for i in items)
        assert all(len(i) == 0 for i in items)

    def test_mixed_integer_and_named_keys(self) -> None:
        root = build_tree({"item": {0: {"a": "1"}, 1: {"a": "2"}, "b": "3"}}, "root")

        items = root.findall("item")
        assert len(items) == 2
        assert items[0].findtext("a") == "1"
        assert items[0].findtext("b") == "3"
        assert items[1].findtext("a") == "2"

    def test_integer_keys_kept_by_to_node(self) -> None:
        assert to_node({0: "a", True: "b"}) == Named({0: Scalar("a"), "True": Scalar("b")})


class TestInvalidInput:
    @pytest.mark.parametrize("value", ["Jo\x0bhn", "nul\x00"])
    def test_control_characters_raise_protocol_error(self, value) -> None:
        with pytest.raises(GatewayProtocolError):
            build_tree({"name": value}, "root")

    def test_invalid_element_name(self) -> None:
        with pytest.raises(GatewayProtocolError):
            serialize({"bad name": "x"}, "root")


class TestSerialize:
    def test_rendering(self) -> None:
        xml = serialize({"refId": "123", "messages": {"code": "I00001"}}, "root")

        assert xml.startswith("<?xml version='1.0' encoding='utf-8'?>")
        assert "<refId>123</refId>" in xml
        assert "\n  <messages>\n    <code>I00001</code>\n  </messages>" in xml
        assert xml.rstrip().endswith("</root>")

    def test_text_is_escaped(self) -> None:
        xml = serialize({"name": "Fish & Chips <Ltd>"}, "root")
        assert "<name>Fish &amp; Chips &lt;Ltd&gt;</name>" in xml

    def test_non_ascii_text_kept_as_utf8(self) -> None:
        xml = serialize({"name": "Jürgen"}, "root")
        assert "<name>Jürgen</name>" in xml
