"""XML and SVG helpers shared by the document builder."""

import xml.etree.ElementTree as ET

# SVG namespace constants
SVG_NS = "http://www.w3.org/2000/svg"


def register_namespaces() -> None:
    """Register the SVG namespace as the default for serialization."""
    ET.register_namespace("", SVG_NS)


def svg_tag(name: str) -> str:
    """Return the namespaced tag for an SVG element name."""
    return f"{{{SVG_NS}}}{name}"


def format_viewbox(viewbox: tuple[int, int, int, int]) -> str:
    """Format a (min_x, min_y, width, height) tuple as a viewBox attribute."""
    return " ".join(str(v) for v in viewbox)
