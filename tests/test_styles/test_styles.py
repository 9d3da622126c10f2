"""Tests for value normalization, inline-style parsing, shadows, box properties and the resolver."""

import pytest

from pagetree.source.soup import load_html
from pagetree.styles.box import (
    Spacing,
    background_params,
    border_params,
    parse_background,
    parse_border,
    parse_spacing,
    spacing_style_params,
)
from pagetree.styles.declarations import parse_declarations
from pagetree.styles.resolver import Source, resolve
from pagetree.styles.shadow import Shadow, parse_shadow, shadow_params
from pagetree.styles.values import (
    Measure,
    js_round,
    normalize_color,
    normalize_font_family,
    normalize_font_weight,
    parse_line_height,
    parse_measure,
    parse_number,
)


# ---------------------------------------------------------------------------
# Measures and numbers
# ---------------------------------------------------------------------------


class TestParseMeasure:
    def test_pixels(self):
        assert parse_measure("20px") == Measure(20, "px")

    def test_rem_is_not_read_as_em(self):
        assert parse_measure("1.5rem") == Measure(1.5, "rem")

    def test_percent(self):
        assert parse_measure("50%") == Measure(50, "%")

    def test_bare_number_takes_default_unit(self):
        assert parse_measure("12", "em") == Measure(12, "em")

    def test_unknown_unit_takes_default_unit(self):
        assert parse_measure("20vh") == Measure(20, "px")
        assert parse_measure("3ch", "rem") == Measure(3, "rem")

    def test_integral_float_collapses_to_int(self):
        measure = parse_measure("20.0px")
        assert measure == Measure(20, "px")
        assert isinstance(measure.value, int)

    @pytest.mark.parametrize("raw", [None, "", "   ", "auto", "abc"])
    def test_unusable_input_is_none(self, raw):
        assert parse_measure(raw) is None

    def test_parse_number_reads_leading_number(self):
        assert parse_number("75%") == 75
        assert parse_number("-0.5") == -0.5
        assert parse_number("x1") is None
        assert parse_number(True) is None

    def test_js_round_rounds_half_up(self):
        assert js_round(2.5) == 3
        assert js_round(-2.5) == -2
        assert js_round(31.25) == 31


# ---------------------------------------------------------------------------
# Colors and typography keywords
# ---------------------------------------------------------------------------


class TestNormalizeColor:
    def test_six_digit_hex(self):
        assert normalize_color("#112233") == "rgb(17, 34, 51)"

    def test_three_digit_hex(self):
        assert normalize_color("#fff") == "rgb(255, 255, 255)"

    def test_eight_digit_hex_has_alpha(self):
        assert normalize_color("#11223380") == "rgba(17, 34, 51, 0.50)"

    def test_rgb_passes_through(self):
        assert normalize_color("rgba(0, 0, 0, 0.5)") == "rgba(0, 0, 0, 0.5)"

    def test_named_color_passes_through(self):
        assert normalize_color("red") == "red"

    def test_idempotent(self):
        once = normalize_color("#3b82f6")
        assert normalize_color(once) == once

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_empty_is_none(self, raw):
        assert normalize_color(raw) is None


class TestTypographyKeywords:
    def test_weight_keyword(self):
        assert normalize_font_weight("bold") == "700"
        assert normalize_font_weight("semibold") == "600"

    def test_numeric_weight_unchanged(self):
        assert normalize_font_weight("500") == "500"

    def test_single_family_gets_fallback(self):
        assert normalize_font_family("Poppins") == '"Poppins", sans-serif'

    def test_quoted_stack_is_normalized(self):
        assert normalize_font_family("'Inter', Arial, sans-serif") == '"Inter", Arial, sans-serif'

    def test_line_height_multiplier(self):
        assert parse_line_height("1.5") == Measure(150, "%")

    def test_line_height_keyword(self):
        assert parse_line_height("relaxed") == Measure(160, "%")

    def test_line_height_percent(self):
        assert parse_line_height("120%") == Measure(120, "%")


# ---------------------------------------------------------------------------
# Inline style declarations
# ---------------------------------------------------------------------------


class TestParseDeclarations:
    def test_basic(self):
        assert parse_declarations("color: #112233; font-size: 20px") == {
            "color": "#112233",
            "font-size": "20px",
        }

    def test_url_with_colon(self):
        props = parse_declarations("background-image: url(https://x.test/a.png)")
        assert props["background-image"] == "url(https://x.test/a.png)"

    def test_semicolon_inside_parentheses(self):
        props = parse_declarations(
            "background-image: url(data:image/png;base64,iVBORw0KGgo=); color: red"
        )
        assert props == {
            "background-image": "url(data:image/png;base64,iVBORw0KGgo=)",
            "color": "red",
        }

    def test_later_declaration_wins(self):
        assert parse_declarations("color: red; color: blue") == {"color": "blue"}

    def test_empty_value_dropped(self):
        assert parse_declarations("color: ; margin-top: 4px") == {"margin-top": "4px"}

    def test_property_names_lowercased(self):
        assert parse_declarations("COLOR: red") == {"color": "red"}

    def test_none_and_empty(self):
        assert parse_declarations(None) == {}
        assert parse_declarations("") == {}


# ---------------------------------------------------------------------------
# Shadows
# ---------------------------------------------------------------------------


class TestShadow:
    def test_preset(self):
        assert parse_shadow("0 4px 6px rgba(0,0,0,0.1)") == Shadow(0, 4, 6, 0, "rgba(0, 0, 0, 0.1)")

    def test_named_size(self):
        assert parse_shadow("lg") == Shadow(0, 10, 15, 0, "rgba(0, 0, 0, 0.1)")

    def test_none_keyword(self):
        assert parse_shadow("none") is None

    def test_shorthand_with_hex_color(self):
        assert parse_shadow("2px 3px 4px #000") == Shadow(2, 3, 4, 0, "rgb(0, 0, 0)")

    def test_spread_and_function_color(self):
        shadow = parse_shadow("0 2px 8px 1px rgba(10, 20, 30, 0.4)")
        assert shadow == Shadow(0, 2, 8, 1, "rgba(10, 20, 30, 0.4)")

    def test_inset(self):
        shadow = parse_shadow("inset 0 2px 4px red")
        assert shadow is not None
        assert shadow.inset is True
        assert shadow.color == "red"

    def test_first_layer_only(self):
        shadow = parse_shadow("0 1px 2px red, 0 9px 9px blue")
        assert shadow == Shadow(0, 1, 2, 0, "red")

    def test_missing_color_uses_default(self):
        shadow = parse_shadow("1px 1px 1px")
        assert shadow is not None
        assert shadow.color == "rgba(0, 0, 0, 0.1)"

    @pytest.mark.parametrize("raw", [None, "", "banana", "1px"])
    def test_unparsable_is_none(self, raw):
        assert parse_shadow(raw) is None

    def test_params(self):
        params = shadow_params(Shadow(1, 2, 3, 4, "red", inset=True))
        assert params["--style-box-shadow-distance-x"] == 1
        assert params["--style-box-shadow-distance-y"] == 2
        assert params["--style-box-shadow-blur"] == 3
        assert params["--style-box-shadow-spread"] == 4
        assert params["--style-box-shadow-color"] == "red"
        assert params["--style-box-shadow-blur--unit"] == "px"
        assert params["--style-box-shadow-style-type"] == "inset"

    def test_params_of_none(self):
        assert shadow_params(None) == {}


# ---------------------------------------------------------------------------
# Box properties
# ---------------------------------------------------------------------------


class TestBox:
    def test_border_shorthand(self):
        border = parse_border({"border": "2px solid #ff0000"})
        assert border.width == Measure(2, "px")
        assert border.style == "solid"
        assert border.color == "rgb(255, 0, 0)"
        assert border_params(border) == {
            "--style-border-width": 2,
            "--style-border-width--unit": "px",
            "--style-border-style": "solid",
            "--style-border-color": "rgb(255, 0, 0)",
        }

    def test_border_function_color_kept_whole(self):
        border = parse_border({"border": "1px dashed rgba(0, 0, 0, 0.2)"})
        assert border.color == "rgba(0, 0, 0, 0.2)"

    def test_border_longhand_overrides_shorthand(self):
        border = parse_border({"border": "1px solid red", "border-color": "#000"})
        assert border.color == "rgb(0, 0, 0)"

    def test_no_border_is_falsy(self):
        assert not parse_border({})

    def test_background_color_and_image(self):
        background = parse_background(
            {"background-color": "#000", "background-image": "url('https://x.test/bg.jpg')"}
        )
        assert background.color == "rgb(0, 0, 0)"
        assert background.image_url == "https://x.test/bg.jpg"

    def test_image_url_param_always_present(self):
        params = background_params(parse_background({"background-color": "#fff"}))
        assert params == {
            "--style-background-color": "rgb(255, 255, 255)",
            "--style-background-image-url": "",
        }

    def test_gradient_travels_as_color(self):
        params = background_params(parse_background({"background": "linear-gradient(red, blue)"}))
        assert params["--style-background-color"] == "linear-gradient(red, blue)"

    def test_spacing(self):
        style, params = spacing_style_params(
            parse_spacing({"padding-top": "10px", "padding-left": "2rem"})
        )
        assert style == {"padding-top": 10}
        assert params == {
            "padding-top--unit": "px",
            "--style-padding-horizontal": 2,
            "--style-padding-horizontal--unit": "rem",
        }

    def test_spacing_defaults(self):
        style, params = spacing_style_params(Spacing().with_defaults())
        assert style == {"padding-top": 0, "padding-bottom": 0, "margin-top": 0}
        assert params["--style-padding-horizontal"] == 0


# ---------------------------------------------------------------------------
# Resolver precedence chain
# ---------------------------------------------------------------------------


def _headline(headline_attrs: str = "", inner_style: str = "", root_attrs: str = ""):
    html = (
        f'<div data-type="ContentNode" {root_attrs}>'
        f'<div data-type="Headline/V1" {headline_attrs}>'
        f'<h1 style="{inner_style}">Title</h1></div></div>'
    )
    document = load_html(html)
    element = document.select_one('[data-type="Headline/V1"]')
    return element, element.select_one("h1")


class TestResolver:
    def test_override_beats_everything(self):
        element, inner = _headline(
            'data-color="#ff0000" style="color: #00ff00"',
            "color: #ffffff",
            'data-text-color="#0000ff"',
        )
        resolved = resolve(element, "color", inner=inner)
        assert resolved.value == "rgb(255, 0, 0)"
        assert resolved.source is Source.OVERRIDE

    def test_inner_style_beats_own_style(self):
        element, inner = _headline('style="color: #00ff00"', "color: #ffffff")
        resolved = resolve(element, "color", inner=inner)
        assert resolved.value == "rgb(255, 255, 255)"
        assert resolved.source is Source.INLINE

    def test_own_style(self):
        element, inner = _headline('style="color: #00ff00"')
        assert resolve(element, "color", inner=inner).value == "rgb(0, 255, 0)"

    def test_inherited_document_default(self):
        element, inner = _headline(root_attrs='data-text-color="#0000ff"')
        resolved = resolve(element, "color", inner=inner)
        assert resolved.value == "rgb(0, 0, 255)"
        assert resolved.source is Source.INHERITED

    def test_fallback(self):
        element, inner = _headline()
        resolved = resolve(element, "color", inner=inner)
        assert resolved.value == "rgb(0, 0, 0)"
        assert resolved.source is Source.FALLBACK

    def test_malformed_override_falls_through(self):
        element, inner = _headline('data-size="huge" style="font-size: 20px"')
        resolved = resolve(element, "font-size", inner=inner)
        assert (resolved.value, resolved.unit) == (20, "px")
        assert resolved.source is Source.INLINE

    def test_inheritance_stops_at_content_root(self):
        html = (
            '<div data-text-color="#123456"><div data-type="ContentNode">'
            '<div data-type="Headline/V1"><h1>x</h1></div></div></div>'
        )
        element = load_html(html).select_one('[data-type="Headline/V1"]')
        assert resolve(element, "color").source is Source.FALLBACK

    def test_letter_spacing_default_unit(self):
        element, inner = _headline('data-tracking="0.1"')
        resolved = resolve(element, "letter-spacing", inner=inner)
        assert (resolved.value, resolved.unit) == (0.1, "rem")

    def test_property_without_fallback_is_none(self):
        element, inner = _headline()
        assert resolve(element, "text-transform", inner=inner) is None
