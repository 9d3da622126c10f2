"""Tests for the styleguide decorator and typescale."""

import json
import logging

from pagetree.source.soup import load_html
from pagetree.transforms.styleguide import (
    StyleguideDecorator,
    load_embedded_styleguide,
    typescale,
)

GUIDE = {
    "typography": {
        "baseSize": 16,
        "scaleRatio": 1.25,
        "headlineFont": "Poppins",
        "contentFont": "Inter",
    },
    "colors": [
        {"id": 1, "hex": "#ffffff"},
        {"id": 2, "hex": "#fbbf24"},
        {"id": 3, "hex": "#111111"},
    ],
    "paintThemes": [
        {
            "id": "dark",
            "headlineColorId": 1,
            "subheadlineColorId": 1,
            "contentColorId": 1,
            "iconColorId": 2,
            "linkColorId": 2,
        },
        {
            "id": "light",
            "headlineColorId": 3,
            "subheadlineColorId": 3,
            "contentColorId": 3,
            "iconColorId": 3,
        },
    ],
}


def _decorate(html: str, guide: dict | None = None):
    document = load_html(html)
    StyleguideDecorator(guide or GUIDE).apply(document)
    return document


# ---------------------------------------------------------------------------
# Typescale
# ---------------------------------------------------------------------------


class TestTypescale:
    def test_headline_scale(self):
        headline = typescale({"baseSize": 16, "scaleRatio": 1.25})["headline"]
        assert headline["5xl"] == 95
        assert headline["2xl"] == 49
        assert headline["xl"] == 39
        assert headline["lg"] == 31
        assert headline["md"] == 25
        assert headline["sm"] == 20
        assert headline["xs"] == 16

    def test_paragraph_scale(self):
        paragraph = typescale({"baseSize": 16, "scaleRatio": 1.25})["paragraph"]
        assert (paragraph["md"], paragraph["sm"], paragraph["xs"]) == (16, 13, 10)

    def test_short_aliases(self):
        headline = typescale({"baseSize": 16, "scaleRatio": 1.25})["headline"]
        assert headline["l"] == headline["lg"]
        assert headline["m"] == headline["md"]

    def test_defaults_apply(self):
        assert typescale({"headlineFont": "X"})["paragraph"]["md"] == 16

    def test_missing_typography(self):
        assert typescale(None) is None
        assert typescale({}) is None


# ---------------------------------------------------------------------------
# Decorator
# ---------------------------------------------------------------------------


class TestFonts:
    def test_font_written_when_absent(self):
        document = _decorate('<div data-type="Headline/V1"><h1>x</h1></div>')
        assert document.select_one('[data-type="Headline/V1"]').attribute("data-font") == "Poppins"

    def test_existing_font_kept(self):
        document = _decorate('<div data-type="Headline/V1" data-font="Lato"></div>')
        assert document.select_one('[data-type="Headline/V1"]').attribute("data-font") == "Lato"

    def test_kind_without_font_untouched(self):
        document = _decorate('<div data-type="SubHeadline/V1"></div>')
        assert document.select_one('[data-type="SubHeadline/V1"]').attribute("data-font") is None


class TestPaintThemes:
    def test_theme_colors_applied(self):
        document = _decorate(
            '<section data-paint-colors="dark">'
            '<div data-type="Headline/V1" data-color="#000"></div>'
            '<div data-type="Icon/V1"></div>'
            "</section>"
        )
        headline = document.select_one('[data-type="Headline/V1"]')
        assert headline.attribute("data-color") == "#ffffff"
        assert headline.attribute("data-link-color") == "#fbbf24"
        icon = document.select_one('[data-type="Icon/V1"]')
        assert icon.attribute("data-color") == "#fbbf24"
        assert icon.attribute("data-link-color") is None

    def test_explicit_marker_protects_color(self):
        document = _decorate(
            '<section data-paint-colors="dark">'
            '<div data-type="Paragraph/V1" data-color="#123456" data-color-explicit></div>'
            "</section>"
        )
        paragraph = document.select_one('[data-type="Paragraph/V1"]')
        assert paragraph.attribute("data-color") == "#123456"

    def test_nearest_theme_wins(self):
        document = _decorate(
            '<section data-paint-colors="dark">'
            '<div data-paint-colors="light"><div data-type="Headline/V1" id="inner"></div></div>'
            '<div data-type="Headline/V1" id="outer"></div>'
            "</section>"
        )
        assert document.select_one("#inner").attribute("data-color") == "#111111"
        assert document.select_one("#outer").attribute("data-color") == "#ffffff"

    def test_bullet_list_colors(self):
        document = _decorate(
            '<section data-paint-colors="dark">'
            '<div data-type="BulletList/V1" data-icon-color="#000" data-icon-color-explicit></div>'
            "</section>"
        )
        bullets = document.select_one('[data-type="BulletList/V1"]')
        assert bullets.attribute("data-text-color") == "#ffffff"
        assert bullets.attribute("data-icon-color") == "#000"
        assert bullets.attribute("data-link-color") == "#fbbf24"

    def test_unknown_color_id(self):
        guide = dict(GUIDE, paintThemes=[{"id": "odd", "headlineColorId": 99}])
        document = _decorate(
            '<div data-paint-colors="odd"><div data-type="Headline/V1"></div></div>', guide
        )
        assert document.select_one('[data-type="Headline/V1"]').attribute("data-color") == "#000000"


class TestSizes:
    def test_preset_resolved(self):
        document = _decorate(
            '<div data-type="Headline/V1" data-size="2xl"></div>'
            '<div data-type="Paragraph/V1" data-size="sm"></div>'
        )
        assert document.select_one('[data-type="Headline/V1"]').attribute(
            "data-size-resolved"
        ) == "49px"
        assert document.select_one('[data-type="Paragraph/V1"]').attribute(
            "data-size-resolved"
        ) == "13px"

    def test_literal_size_not_resolved(self):
        document = _decorate('<div data-type="Headline/V1" data-size="32px"></div>')
        element = document.select_one('[data-type="Headline/V1"]')
        assert element.attribute("data-size-resolved") is None


# ---------------------------------------------------------------------------
# Embedded styleguide
# ---------------------------------------------------------------------------


class TestEmbeddedStyleguide:
    def test_loaded_from_script(self):
        document = load_html(
            '<script id="cf-styleguide-data" type="application/json">'
            f"{json.dumps(GUIDE)}</script>"
        )
        assert load_embedded_styleguide(document) == GUIDE

    def test_absent(self):
        assert load_embedded_styleguide(load_html("<div></div>")) is None

    def test_malformed_json_is_ignored(self, caplog):
        document = load_html('<script id="cf-styleguide-data">{not json</script>')
        with caplog.at_level(logging.WARNING, logger="pagetree.transforms.styleguide"):
            assert load_embedded_styleguide(document) is None
        assert "malformed styleguide" in caplog.text

    def test_non_object_is_ignored(self):
        document = load_html('<script id="cf-styleguide-data">[1, 2]</script>')
        assert load_embedded_styleguide(document) is None
