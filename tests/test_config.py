import pytest

from key_overlay.config import (
    DOWN_STYLE,
    UP_STYLE,
    load_style_file,
    merge_overrides,
    option_name,
    resolve_settings,
)
from key_overlay.errors import ConfigurationError


def test_defaults():
    settings = resolve_settings(["A"])
    assert settings.keys == ("A",)
    assert settings.text_offset_y == 2
    assert settings.stroke_width == 1
    assert (settings.key_width, settings.key_height) == (16, 16)
    assert (settings.key_margin_x, settings.key_margin_y) == (3, 3)
    assert settings.up == UP_STYLE
    assert settings.down == DOWN_STYLE
    assert settings.cell_width == 20
    assert settings.cell_height == 20


def test_state_defaults_differ():
    assert UP_STYLE.stroke_color == "black"
    assert UP_STYLE.rect_color == "none"
    assert DOWN_STYLE.stroke_color == "gray"
    assert DOWN_STYLE.rect_color == "lightgray"
    for style in (UP_STYLE, DOWN_STYLE):
        assert style.text_color == "black"
        assert style.font_family == "monospace"
        assert style.font_size == 10
        assert style.stroke_radius == 1


def test_string_overrides_are_parsed():
    settings = resolve_settings(
        ["A"],
        {
            "key_width": "24",
            "key-margin-x": "5",
            "text_offset_y": "-1",
            "down": {"font_size": "12", "rect_color": "#333"},
        },
    )
    assert settings.key_width == 24
    assert settings.key_margin_x == 5
    assert settings.text_offset_y == -1
    assert settings.cell_width == 24 + 1 + 5
    assert settings.down.font_size == 12
    assert settings.down.rect_color == "#333"
    # untouched fields keep the state's own defaults
    assert settings.down.stroke_color == "gray"
    assert settings.up == UP_STYLE


def test_keys_keep_order_and_whitespace():
    settings = resolve_settings([" A ", "Shift", "⌘"])
    assert settings.keys == (" A ", "Shift", "⌘")


@pytest.mark.parametrize("keys", [None, [], ()])
def test_missing_keys(keys):
    with pytest.raises(ConfigurationError) as exc:
        resolve_settings(keys)
    assert exc.value.option == "keys"
    assert "at least one" in exc.value.reason


def test_unparsable_integer_names_option():
    with pytest.raises(ConfigurationError) as exc:
        resolve_settings(["A"], {"key_width": "wide"})
    assert exc.value.option == "--key-width"
    assert str(exc.value).startswith("--key-width: ")


def test_zero_key_width_rejected():
    with pytest.raises(ConfigurationError) as exc:
        resolve_settings(["A"], {"key_width": "0"})
    assert exc.value.option == "--key-width"
    assert "greater than or equal to 1" in exc.value.reason


def test_negative_stroke_width_rejected():
    with pytest.raises(ConfigurationError) as exc:
        resolve_settings(["A"], {"stroke_width": "-1"})
    assert exc.value.option == "--stroke-width"


def test_state_error_names_state_option():
    with pytest.raises(ConfigurationError) as exc:
        resolve_settings(["A"], {"down": {"font_size": "big"}})
    assert exc.value.option == "--font-size-down"


def test_unknown_option_rejected():
    with pytest.raises(ConfigurationError) as exc:
        resolve_settings(["A"], {"key_depth": 4})
    assert exc.value.option == "--key-depth"


def test_settings_are_frozen():
    settings = resolve_settings(["A"])
    with pytest.raises(ValueError):
        settings.key_width = 30


@pytest.mark.parametrize(
    "loc, expected",
    [
        (("key_margin_y",), "--key-margin-y"),
        (("up", "stroke_radius"), "--stroke-radius-up"),
        (("keys", 0), "keys"),
    ],
)
def test_option_name(loc, expected):
    assert option_name(loc) == expected


def test_merge_overrides_nested_and_none():
    base = {"key_width": 20, "up": {"stroke_color": "white", "font_size": 8}}
    extra = {"key_width": None, "key_height": 18, "up": {"font_size": 9, "text_color": None}}
    merged = merge_overrides(base, extra)
    assert merged == {
        "key_width": 20,
        "key_height": 18,
        "up": {"stroke_color": "white", "font_size": 9},
    }
    # inputs untouched
    assert base["up"] == {"stroke_color": "white", "font_size": 8}


def test_load_style_file(tmp_path):
    path = tmp_path / "style.yaml"
    path.write_text(
        "keys: [W, A, 1]\n"
        "key-width: 20\n"
        "up:\n"
        "  stroke-color: white\n"
        "down:\n"
        "  rect-color: '#444'\n",
        encoding="utf-8",
    )
    overrides = load_style_file(path)
    assert overrides == {
        "keys": ["W", "A", "1"],
        "key_width": 20,
        "up": {"stroke_color": "white"},
        "down": {"rect_color": "#444"},
    }
    settings = resolve_settings(overrides["keys"], overrides)
    assert settings.key_width == 20
    assert settings.up.stroke_color == "white"
    assert settings.down.rect_color == "#444"


def test_empty_style_file(tmp_path):
    path = tmp_path / "style.yaml"
    path.write_text("", encoding="utf-8")
    assert load_style_file(path) == {}


def test_missing_style_file(tmp_path):
    with pytest.raises(ConfigurationError) as exc:
        load_style_file(tmp_path / "nope.yaml")
    assert exc.value.option == "--config"
    assert "not found" in exc.value.reason


def test_style_file_must_be_mapping(tmp_path):
    path = tmp_path / "style.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc:
        load_style_file(path)
    assert exc.value.option == "--config"


def test_style_file_invalid_yaml(tmp_path):
    path = tmp_path / "style.yaml"
    path.write_text("up: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc:
        load_style_file(path)
    assert "invalid YAML" in exc.value.reason


def test_style_file_keys_must_be_list(tmp_path):
    path = tmp_path / "style.yaml"
    path.write_text("keys: WASD\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc:
        load_style_file(path)
    assert exc.value.option == "keys"


@pytest.mark.parametrize("value", ["red", "[ab]", "3"])
def test_style_file_state_must_be_mapping(tmp_path, value):
    path = tmp_path / "style.yaml"
    path.write_text(f"up: {value}\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc:
        load_style_file(path)
    assert exc.value.option == "up"
    assert "mapping" in exc.value.reason


def test_style_file_empty_state_is_allowed(tmp_path):
    path = tmp_path / "style.yaml"
    path.write_text("down:\n", encoding="utf-8")
    settings = resolve_settings(["A"], load_style_file(path))
    assert settings.down == DOWN_STYLE


def test_merge_overrides_rejects_non_mapping_state():
    with pytest.raises(ConfigurationError) as exc:
        merge_overrides({"down": "red"}, {"down": {"font_size": "9"}})
    assert exc.value.option == "down"


def test_style_file_is_directory(tmp_path):
    with pytest.raises(ConfigurationError) as exc:
        load_style_file(tmp_path)
    assert exc.value.option == "--config"
    assert "cannot read" in exc.value.reason


def test_style_file_not_utf8(tmp_path):
    path = tmp_path / "style.yaml"
    path.write_bytes(b"up:\n  font-family: \xff\xfe\n")
    with pytest.raises(ConfigurationError) as exc:
        load_style_file(path)
    assert exc.value.option == "--config"
    assert "cannot read" in exc.value.reason
