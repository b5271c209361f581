"""
Generate SVG key overlays for the OBS Input Overlay plugin.

Each key is drawn twice: released ("up") in the top row and pressed ("down")
in the bottom row.

Usage:
    python -m key_overlay W A S D
    python -m key_overlay Q W E R -w 20 --rect-color-down "#444" -o keys.svg
    python -m key_overlay -c style.yaml Z X C
"""

from .config import (
    StateStyle,
    Settings,
    UP_STYLE,
    DOWN_STYLE,
    load_style_file,
    merge_overrides,
    resolve_settings,
)
from .errors import ConfigurationError, OverlayError
from .layout import KeyVisual, Label, Layout, Rect, compute_layout
from .svg import build_document, render_document, write_document

__all__ = [
    # Config
    "StateStyle",
    "Settings",
    "UP_STYLE",
    "DOWN_STYLE",
    "load_style_file",
    "merge_overrides",
    "resolve_settings",
    # Errors
    "ConfigurationError",
    "OverlayError",
    # Layout
    "KeyVisual",
    "Label",
    "Layout",
    "Rect",
    "compute_layout",
    # SVG
    "build_document",
    "render_document",
    "write_document",
]
