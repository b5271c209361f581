"""Key geometry: where each rectangle and label of the overlay goes."""

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .config import STATES, Settings

logger = logging.getLogger(__name__)

State = Literal["up", "down"]


class Rect(BaseModel):
    """Key rectangle with its stroke and fill."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    width: int
    height: int
    rx: int
    stroke_width: int
    fill: str
    stroke: str


class Label(BaseModel):
    """Key label anchored at its horizontal center and baseline."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    text: str
    fill: str
    font_family: str
    font_size: int
    anchor: str = "middle"


class KeyVisual(BaseModel):
    """One key drawn in one state."""

    model_config = ConfigDict(frozen=True)

    index: int
    state: State
    rect: Rect
    label: Label


class Layout(BaseModel):
    """Document size plus the key visuals in drawing order.

    Visuals are ordered key by key, up before down:
    key 0 up, key 0 down, key 1 up, key 1 down, ...
    """

    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    visuals: tuple[KeyVisual, ...]

    @property
    def viewbox(self) -> tuple[int, int, int, int]:
        return (0, 0, self.width, self.height)


def compute_layout(settings: Settings) -> Layout:
    """Lay out every key of ``settings`` in two stacked rows.

    The up row sits at y=0 and the down row one cell height below it. Keys
    tile left to right, one cell apart. Labels are centered on
    ``key_width // 2``, which is off by half a unit for odd widths.

    Args:
        settings: Resolved settings

    Returns:
        Layout with the document size and two visuals per key
    """
    cell_w = settings.cell_width
    cell_h = settings.cell_height
    row_y = {"up": 0, "down": cell_h}

    visuals = []
    for i, text in enumerate(settings.keys):
        rect_x = cell_w * i
        text_x = rect_x + settings.key_width // 2
        for state in STATES:
            style = settings.style_for(state)
            y = row_y[state]
            rect = Rect(
                x=rect_x,
                y=y,
                width=settings.key_width,
                height=settings.key_height,
                rx=style.stroke_radius,
                stroke_width=settings.stroke_width,
                fill=style.rect_color,
                stroke=style.stroke_color,
            )
            label = Label(
                x=text_x,
                y=y + settings.key_height - settings.text_offset_y,
                text=text,
                fill=style.text_color,
                font_family=style.font_family,
                font_size=style.font_size,
            )
            visuals.append(KeyVisual(index=i, state=state, rect=rect, label=label))

    layout = Layout(
        width=len(settings.keys) * cell_w,
        height=cell_h * 2,
        visuals=tuple(visuals),
    )
    logger.debug("Layout %dx%d with %d visuals", layout.width, layout.height, len(visuals))
    return layout
