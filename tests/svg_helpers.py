"""Helpers for inspecting generated SVG in tests."""

import xml.etree.ElementTree as ET

from key_overlay.svg.utils import SVG_NS

NS = {"svg": SVG_NS}


def parse_svg(text: str) -> ET.Element:
    return ET.fromstring(text)


def key_groups(root: ET.Element) -> list[ET.Element]:
    return root.findall("svg:g", NS)


def rect_of(group: ET.Element) -> ET.Element:
    return group.find("svg:rect", NS)


def text_of(group: ET.Element) -> ET.Element:
    return group.find("svg:text", NS)
