"""Configuration models and loaders for overlay generation."""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

STATES = ("up", "down")


class StateStyle(BaseModel):
    """Visual style for one key state (released or pressed)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    stroke_color: str = Field(..., description="Stroke colour of rectangle")
    stroke_radius: int = Field(..., ge=0, description="Rounding radius on rectangle corners")
    rect_color: str = Field(..., description="Fill colour of rectangle")
    text_color: str = Field(..., description="Fill colour of text")
    font_family: str = Field(..., description="Font of text")
    font_size: int = Field(..., ge=0, description="Font size of text")


UP_STYLE = StateStyle(
    stroke_color="black",
    stroke_radius=1,
    rect_color="none",
    text_color="black",
    font_family="monospace",
    font_size=10,
)

DOWN_STYLE = StateStyle(
    stroke_color="gray",
    stroke_radius=1,
    rect_color="lightgray",
    text_color="black",
    font_family="monospace",
    font_size=10,
)

STATE_DEFAULTS = {"up": UP_STYLE, "down": DOWN_STYLE}


class Settings(BaseModel):
    """Everything needed to lay out one overlay document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    keys: tuple[str, ...] = Field(..., min_length=1, description="Key labels in order")
    text_offset_y: int = Field(2, description="Amount to raise the text by")
    stroke_width: int = Field(1, ge=0, description="Width of stroke on key rectangles")
    key_width: int = Field(16, ge=1, description="Interior width of a key")
    key_height: int = Field(16, ge=1, description="Interior height of a key")
    key_margin_x: int = Field(3, ge=0, description="Horizontal spacing between keys")
    key_margin_y: int = Field(3, ge=0, description="Vertical spacing between keys")
    up: StateStyle = Field(default_factory=lambda: UP_STYLE)
    down: StateStyle = Field(default_factory=lambda: DOWN_STYLE)

    @property
    def cell_width(self) -> int:
        """Horizontal footprint of one key, stroke and margin included."""
        return self.key_width + self.stroke_width + self.key_margin_x

    @property
    def cell_height(self) -> int:
        """Vertical footprint of one key row, stroke and margin included."""
        return self.key_height + self.stroke_width + self.key_margin_y

    def style_for(self, state: str) -> StateStyle:
        return self.up if state == "up" else self.down


def option_name(loc: Sequence[Any]) -> str:
    """Map a pydantic error location to the command-line option spelling.

    ("key_width",) -> "--key-width", ("up", "font_size") -> "--font-size-up",
    ("keys", 0) -> "keys".
    """
    if not loc:
        return "settings"
    head = str(loc[0])
    if head == "keys":
        return "keys"
    if head in STATES and len(loc) > 1:
        return f"--{str(loc[1]).replace('_', '-')}-{head}"
    return f"--{head.replace('_', '-')}"


def _normalize_names(data: Mapping[str, Any]) -> dict[str, Any]:
    """Convert hyphenated option names to field names, recursing into states."""
    result: dict[str, Any] = {}
    for name, value in data.items():
        field = str(name).replace("-", "_")
        if field in STATES and isinstance(value, Mapping):
            value = _normalize_names(value)
        result[field] = value
    return result


def merge_overrides(
    base: Mapping[str, Any] | None, extra: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Layer ``extra`` over ``base``.

    The nested ``up``/``down`` mappings are merged key by key, and ``None``
    values in ``extra`` leave the ``base`` value in place.
    """
    merged: dict[str, Any] = dict(base or {})
    for name, value in (extra or {}).items():
        if value is None:
            continue
        if name in STATES and isinstance(value, Mapping):
            current = merged.get(name) or {}
            if not isinstance(current, Mapping):
                raise ConfigurationError(name, "expected a mapping of style options")
            state = dict(current)
            state.update({k: v for k, v in value.items() if v is not None})
            merged[name] = state
        else:
            merged[name] = value
    return merged


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_style_file(path: Path) -> dict[str, Any]:
    """Load option overrides from a YAML style file.

    Option names may use hyphens or underscores. Per-state options live under
    ``up:`` and ``down:`` mappings, and ``keys:`` may list labels.

    Args:
        path: Path to the YAML file

    Returns:
        Override mapping suitable for resolve_settings()

    Raises:
        ConfigurationError: If the file is missing, unreadable, unparsable or not
            a mapping, or if ``up``/``down`` are not mappings
    """
    if not path.exists():
        raise ConfigurationError("--config", f"file not found: {path}")

    try:
        data = load_yaml(path)
    except yaml.YAMLError as exc:
        raise ConfigurationError("--config", f"invalid YAML in {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError("--config", f"cannot read {path}: {exc}") from exc

    if not isinstance(data, Mapping):
        raise ConfigurationError("--config", f"{path} must contain a mapping of options")

    overrides = _normalize_names(data)
    for state in STATES:
        value = overrides.get(state)
        if value is not None and not isinstance(value, Mapping):
            raise ConfigurationError(state, f"{path}: expected a mapping of style options")
    if "keys" in overrides:
        keys = overrides["keys"]
        if not isinstance(keys, list):
            raise ConfigurationError("keys", f"{path}: keys must be a list of labels")
        # YAML reads bare labels like 1 or yes as numbers and booleans
        overrides["keys"] = [str(k) for k in keys]

    logger.debug("Loaded style file %s with options %s", path, sorted(overrides))
    return overrides


def _from_validation_error(
    exc: ValidationError, prefix: tuple[str, ...] = ()
) -> ConfigurationError:
    """Report the first pydantic error against its command-line option."""
    error = exc.errors()[0]
    return ConfigurationError(option_name((*prefix, *error["loc"])), error["msg"])


def _resolve_state(state: str, overrides: Any) -> StateStyle:
    if overrides is None:
        return STATE_DEFAULTS[state]
    if not isinstance(overrides, Mapping):
        raise ConfigurationError(state, "expected a mapping of style options")
    values = STATE_DEFAULTS[state].model_dump()
    values.update(overrides)
    return StateStyle.model_validate(values)


def resolve_settings(
    keys: Sequence[str] | None, overrides: Mapping[str, Any] | None = None
) -> Settings:
    """Build validated Settings from key labels and option overrides.

    Args:
        keys: Key labels to render (at least one)
        overrides: Field name -> raw value, with nested ``up``/``down`` mappings.
            Absent entries fall back to the defaults.

    Returns:
        Immutable Settings

    Raises:
        ConfigurationError: Naming the offending option and the reason
    """
    if not keys:
        raise ConfigurationError("keys", "at least one key label is required")

    values = _normalize_names(overrides or {})
    values.pop("keys", None)

    for state in STATES:
        try:
            values[state] = _resolve_state(state, values.get(state))
        except ValidationError as exc:
            raise _from_validation_error(exc, prefix=(state,)) from exc

    try:
        settings = Settings.model_validate({"keys": tuple(keys), **values})
    except ValidationError as exc:
        raise _from_validation_error(exc) from exc

    logger.debug(
        "Resolved %d keys, cell %dx%d",
        len(settings.keys),
        settings.cell_width,
        settings.cell_height,
    )
    return settings
