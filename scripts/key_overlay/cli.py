"""Command-line interface for generating overlay SVGs."""

import argparse
import logging
import sys
from pathlib import Path

from .config import (
    STATE_DEFAULTS,
    STATES,
    Settings,
    load_style_file,
    merge_overrides,
    resolve_settings,
)
from .errors import ConfigurationError
from .layout import compute_layout
from .svg.document import render_document
from .svg.writer import write_document

DEFAULT_OUTPUT = Path("image.svg")

# Top-level options: (flags, field, help)
GEOMETRY_OPTIONS = [
    (("--text-offset-y",), "text_offset_y", "Amount to raise the text by"),
    (("--stroke-width", "--stroke-weight"), "stroke_width", "Width of stroke on key rectangles"),
    (("-w", "--key-width"), "key_width", "Base interior width of a key"),
    (("-h", "--key-height"), "key_height", "Base interior height of a key"),
    (
        ("--key-margin-x",),
        "key_margin_x",
        "Horizontal spacing between keys (Input Overlay needs at least 3)",
    ),
    (
        ("--key-margin-y",),
        "key_margin_y",
        "Vertical spacing between keys (Input Overlay needs at least 3)",
    ),
]

# Per-state options, suffixed with -up / -down: (name, field, help)
STATE_OPTIONS = [
    ("stroke-color", "stroke_color", "Stroke colour of rectangle"),
    ("stroke-radius", "stroke_radius", "Rounding radius on rectangle corners"),
    ("rect-color", "rect_color", "Fill colour of rectangle"),
    ("text-color", "text_color", "Fill colour of text"),
    ("font-family", "font_family", "Font of text"),
    ("font-size", "font_size", "Font size of text"),
]


def _add_state_options(parser: argparse.ArgumentParser, state: str) -> None:
    """Add the style options for one key state."""
    description = "pressed keys" if state == "down" else "released keys"
    group = parser.add_argument_group(f"{state} style", f"Style of {description}")
    defaults = STATE_DEFAULTS[state]
    for name, field, help_text in STATE_OPTIONS:
        group.add_argument(
            f"--{name}-{state}",
            dest=f"{state}_{field}",
            metavar="VALUE",
            help=f"{help_text} (default: {getattr(defaults, field)})",
        )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser.

    Option values are kept as strings so that parsing and range errors are
    reported by resolve_settings() with the option name.
    """
    parser = argparse.ArgumentParser(
        prog="key_overlay",
        description="Generate an SVG of up/down key states for the OBS Input Overlay plugin",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("keys", nargs="*", metavar="KEY", help="Labels of the keys to draw")
    parser.add_argument(
        "-o", "--output",
        default=str(DEFAULT_OUTPUT),
        help=f"Output SVG file, or - for stdout (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML style file with option overrides (command-line flags win)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    geometry = parser.add_argument_group("geometry")
    for flags, field, help_text in GEOMETRY_OPTIONS:
        default = Settings.model_fields[field].default
        geometry.add_argument(
            *flags,
            dest=field,
            metavar="N",
            help=f"{help_text} (default: {default})",
        )

    for state in STATES:
        _add_state_options(parser, state)

    return parser


def overrides_from_args(args: argparse.Namespace) -> dict:
    """Collect the option overrides given on the command line."""
    overrides: dict = {field: getattr(args, field) for _, field, _ in GEOMETRY_OPTIONS}
    for state in STATES:
        overrides[state] = {
            field: getattr(args, f"{state}_{field}") for _, field, _ in STATE_OPTIONS
        }
    return merge_overrides({}, overrides)


def load_settings(args: argparse.Namespace) -> Settings:
    """Resolve Settings from defaults, the style file and command-line flags."""
    file_overrides = load_style_file(args.config) if args.config else {}
    keys = args.keys or file_overrides.get("keys")
    overrides = merge_overrides(file_overrides, overrides_from_args(args))
    return resolve_settings(keys, overrides)


def write_stdout(content: str) -> None:
    """Write a document to stdout as UTF-8 whatever the console encoding."""
    sys.stdout.flush()
    sys.stdout.buffer.write(content.encode("utf-8"))
    sys.stdout.buffer.flush()


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, generate the overlay and return an exit status."""
    parser = create_parser()
    # keys may follow options, e.g. "-c style.yaml W A S D"
    args = parser.parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args)
    except ConfigurationError as e:
        print(f"Error: configuration: {e}", file=sys.stderr)
        return 2

    layout = compute_layout(settings)

    if args.output == "-":
        write_stdout(render_document(layout))
        return 0

    output = Path(args.output)
    try:
        write_document(layout, output)
    except OSError as e:
        print(f"Error: writing {output}: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {output} ({len(settings.keys)} keys)")
    return 0


def main() -> None:
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
