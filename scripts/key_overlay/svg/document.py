"""Build and serialize the overlay SVG document."""

import xml.etree.ElementTree as ET

from ..layout import KeyVisual, Layout
from .utils import format_viewbox, register_namespaces, svg_tag


def _key_group(parent: ET.Element, visual: KeyVisual) -> ET.Element:
    """Append a <g> holding the rectangle and label of one key visual."""
    rect, label = visual.rect, visual.label
    group = ET.SubElement(parent, svg_tag("g"))
    ET.SubElement(
        group,
        svg_tag("rect"),
        {
            "x": str(rect.x),
            "y": str(rect.y),
            "width": str(rect.width),
            "height": str(rect.height),
            "rx": str(rect.rx),
            "stroke-width": str(rect.stroke_width),
            "fill": rect.fill,
            "stroke": rect.stroke,
        },
    )
    text = ET.SubElement(
        group,
        svg_tag("text"),
        {
            "x": str(label.x),
            "y": str(label.y),
            "text-anchor": label.anchor,
            "fill": label.fill,
            "font-family": label.font_family,
            "font-size": str(label.font_size),
        },
    )
    text.text = label.text
    return group


def build_document(layout: Layout) -> ET.Element:
    """Build the <svg> element tree for a layout.

    Args:
        layout: Computed layout

    Returns:
        Root <svg> element with one <g> per key visual, in layout order
    """
    root = ET.Element(svg_tag("svg"), {"viewBox": format_viewbox(layout.viewbox)})
    for visual in layout.visuals:
        _key_group(root, visual)
    return root


def render_document(layout: Layout) -> str:
    """Serialize a layout as SVG markup.

    Output depends only on the layout: attribute order is fixed and nothing
    time- or environment-dependent is written.
    """
    register_namespaces()
    root = build_document(layout)
    ET.indent(root, space="  ")
    return ET.tostring(root, encoding="unicode") + "\n"
