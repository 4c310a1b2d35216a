# =============================================================================
# GatewayClient Library – Structured data to XML serializer
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose, and non-infringement. In no event shall the
# authors or copyright holders be liable for any claim, damages, or other
# liability, whether in an action of contract, tort, or otherwise, arising from,
# out of, or in connection with the software or the use or other dealings in
# the software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license text should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

"""
Turn nested Python data into an XML element tree.

Repeated elements are expressed by position instead of a wrapper element.
Given::

    {"nodes": {"node": ["text", {"field": ["hello", "world"]}]}}

serialized under ``response`` the result is::

    <response>
      <nodes>
        <node>text</node>
        <node>
          <field>hello</field>
          <field>world</field>
        </node>
      </nodes>
    </response>

The first item of a sequence fills the element already created for its key,
every following item becomes a new sibling with the same tag.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from lxml import etree

from .exceptions import GatewayProtocolError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scalar:
    """Leaf value, rendered as element text."""

    value: str = ""


@dataclass(frozen=True)
class Named:
    """
    Mapping of entry key to child node.

    String keys create a child element with that name. Integer keys are
    positions and follow the same rule as the items of a `Repeated`.
    """

    children: Dict[Union[str, int], "Node"] = field(default_factory=dict)


@dataclass(frozen=True)
class Repeated:
    """Sequence of nodes sharing the tag of the element they are placed in."""

    items: Tuple["Node", ...] = ()


Node = Union[Scalar, Named, Repeated]


def _is_position(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def to_node(obj: Any) -> Node:
    """
    Convert plain Python data into a node.

    dicts become `Named`, lists and tuples become `Repeated`, nodes are kept
    as they are and anything else is coerced to a `Scalar` (None renders as
    empty text, booleans as "true"/"false"). Integer dict keys stay integers
    so they are placed by position.
    """
    if isinstance(obj, (Scalar, Named, Repeated)):
        return obj
    if isinstance(obj, dict):
        return Named({(k if _is_position(k) else str(k)): to_node(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return Repeated(tuple(to_node(v) for v in obj))
    if obj is None:
        return Scalar("")
    if isinstance(obj, bool):
        return Scalar("true" if obj else "false")
    return Scalar(str(obj))


def _append_text(element: etree._Element, text: str) -> None:
    # Text goes after any children already present, like a DOM text node.
    if len(element):
        last = element[-1]
        last.tail = (last.tail or "") + text
    else:
        element.text = (element.text or "") + text


def _position_target(element: etree._Element, position: int) -> Optional[etree._Element]:
    """
    Element receiving the item at `position` of a repeated entry.

    Position 0 reuses `element`, any other position appends a sibling with
    the same tag. Returns None when `element` is the root and has no parent.
    """
    if position == 0:
        return element
    parent = element.getparent()
    if parent is None:
        logger.warning(
            "Dropping item %s under root <%s>: a document has a single root",
            position,
            element.tag,
        )
        return None
    target = etree.Element(element.tag)
    parent.append(target)
    return target


def _populate(node: Node, element: etree._Element) -> None:
    if isinstance(node, Named):
        for key, child in node.children.items():
            if _is_position(key):
                target = _position_target(element, key)
            else:
                target = etree.SubElement(element, key)
            if target is not None:
                _populate(child, target)

    elif isinstance(node, Repeated):
        for position, item in enumerate(node.items):
            target = _position_target(element, position)
            if target is not None:
                _populate(item, target)

    else:
        _append_text(element, node.value)


def build_tree(data: Any, root_element: str = "response") -> etree._Element:
    """
    Build an element tree rooted at `root_element` from `data`.

    Items repeated directly at the root beyond the first are dropped with a
    warning.

    Args:
        data: A node or plain Python data (see `to_node`).
        root_element: Tag of the root element.

    Raises:
        GatewayProtocolError:
            If a key is not a valid element name or a value holds characters
            XML cannot carry (control characters, NUL).
    """
    try:
        root = etree.Element(root_element)
        _populate(to_node(data), root)
    except ValueError as exc:
        raise GatewayProtocolError(f"Cannot build <{root_element}> document: {exc}") from exc
    return root


def serialize(data: Any, root_element: str = "response") -> str:
    """
    Serialize `data` to pretty printed UTF-8 XML text with declaration.
    """
    root = build_tree(data, root_element)
    return etree.tostring(
        root,
        pretty_print=True,
        xml_declaration=True,
        encoding="utf-8",
    ).decode("utf-8")
