"""SVG rendering of overlay layouts."""

from .utils import SVG_NS, format_viewbox, register_namespaces, svg_tag
from .document import build_document, render_document
from .writer import write_document

__all__ = [
    # Utils
    "SVG_NS",
    "format_viewbox",
    "register_namespaces",
    "svg_tag",
    # Document
    "build_document",
    "render_document",
    # Writer
    "write_document",
]
