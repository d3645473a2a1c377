"""Namespace-agnostic element lookups.

Elements are matched on their local name, so rules see them whatever
default namespace the document declares.
"""

from __future__ import annotations

from lxml import etree

from unattend_validator.rules.constants import COMPONENT_ELEMENT, SETTINGS_ELEMENT


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def children(element: etree._Element, name: str) -> list[etree._Element]:
    return element.xpath("./*[local-name() = $name]", name=name)


def descendants(element: etree._Element, name: str) -> list[etree._Element]:
    return element.xpath(".//*[local-name() = $name]", name=name)


def first_descendant(element: etree._Element, name: str) -> etree._Element | None:
    found = descendants(element, name)
    return found[0] if found else None


def child_text(element: etree._Element | None, name: str) -> str | None:
    """Raw text of the first child called *name*, or ``None`` when absent."""
    if element is None:
        return None
    found = children(element, name)
    if not found:
        return None
    return found[0].text


def settings_blocks(root: etree._Element) -> list[etree._Element]:
    return descendants(root, SETTINGS_ELEMENT)


def components(root: etree._Element) -> list[etree._Element]:
    """Every component declared under any settings block, in document order."""
    found: list[etree._Element] = []
    for block in settings_blocks(root):
        found.extend(children(block, COMPONENT_ELEMENT))
    return found
