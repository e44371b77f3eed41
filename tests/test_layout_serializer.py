"""Tests for layout serialization to standalone HTML."""

import pytest

from sitecanvas.models.layout_models import BlockLayout, MarkupLayout
from sitecanvas.services.layout_serializer import (
    EMPTY_DOCUMENT,
    UNRECOGNIZED_DOCUMENT,
    escape_html,
    serialize,
)


def test_none_layout_yields_empty_document():
    out = serialize(None)
    assert out == EMPTY_DOCUMENT
    assert "<html>" in out and "<body>" in out
    assert "No content available" in out


@pytest.mark.parametrize("raw", ["", 0, False])
def test_falsy_layout_yields_empty_document(raw):
    assert serialize(raw) == EMPTY_DOCUMENT


@pytest.mark.parametrize("raw", [{}, [], {"blocks": "not-a-list"}, {"foo": 1}, "text", 42])
def test_unrecognized_layout_yields_fallback_document(raw):
    out = serialize(raw)
    assert out == UNRECOGNIZED_DOCUMENT
    assert "<html" in out and "<body>" in out


def test_markup_layout_passes_html_and_css_verbatim():
    layout = {
        "html": "<section><h1>Hi</h1></section>",
        "css": "h1 { color: red; }",
        "settings": {"title": "Home"},
    }
    out = serialize(layout)
    assert out.startswith("<!DOCTYPE html>")
    assert "<section><h1>Hi</h1></section>" in out
    assert "<style>h1 { color: red; }</style>" in out
    assert "<title>Home</title>" in out


def test_markup_takes_precedence_over_blocks():
    layout = {
        "html": "<p>markup</p>",
        "blocks": [{"type": "text", "content": "block"}],
    }
    out = serialize(layout)
    assert "<p>markup</p>" in out
    assert 'data-block-type' not in out


def test_css_alone_selects_markup_form():
    out = serialize({"css": "body{}", "blocks": [{"type": "text", "content": "x"}]})
    assert "<style>body{}</style>" in out
    assert "container" not in out


def test_single_text_block_scenario():
    layout = {"blocks": [{"type": "text", "content": "Hello"}], "settings": {"title": "T"}}
    out = serialize(layout)

    assert out.count('<div class="block"') == 1
    assert '<div class="block" data-block-type="text">Hello</div>' in out
    container = out.index('<div class="container">')
    assert container < out.index('data-block-type="text"')
    assert "<title>T</title>" in out


def test_block_order_and_missing_fields():
    layout = {"blocks": [
        {"type": "hero", "content": "<h1>Top</h1>"},
        {"content": "no type"},
        {"type": "text"},
    ]}
    out = serialize(layout)
    assert '<div class="block" data-block-type="hero"><h1>Top</h1></div>' in out
    assert '<div class="block" data-block-type="unknown">no type</div>' in out
    assert '<div class="block" data-block-type="text"></div>' in out
    assert out.index("hero") < out.index("unknown") < out.index('data-block-type="text"')


def test_block_global_styles_and_defaults():
    default_out = serialize({"blocks": []})
    assert "font-family: Inter, system-ui, sans-serif;" in default_out
    assert "max-width: 1200px;" in default_out
    assert "background-color: #ffffff;" in default_out

    styled = serialize({"blocks": [], "globalStyles": {"fontSize": "18px", "maxWidth": "960px"}})
    assert "font-size: 18px;" in styled
    assert "max-width: 960px;" in styled
    assert "line-height: 1.6;" in styled


def test_title_defaults_to_website():
    assert "<title>Website</title>" in serialize({"html": ""})


def test_metadata_is_escaped():
    layout = {
        "html": "<b>ok</b>",
        "settings": {
            "title": "<script>alert(1)</script>",
            "description": 'Say "hi" & bye',
            "keywords": "a'b",
        },
    }
    out = serialize(layout)
    assert "<script>alert(1)</script>" not in out
    assert "<title>&lt;script&gt;alert(1)&lt;/script&gt;</title>" in out
    assert '<meta name="description" content="Say &quot;hi&quot; &amp; bye">' in out
    assert '<meta name="keywords" content="a&#039;b">' in out
    assert "<b>ok</b>" in out


def test_optional_metas_omitted_when_absent():
    out = serialize({"html": "x"})
    assert 'name="description"' not in out
    assert 'name="keywords"' not in out


def test_escape_html_stringifies_non_strings():
    assert escape_html(5) == "5"
    assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#039;"


def test_serialize_is_idempotent():
    layout = {"blocks": [{"type": "text", "content": "Hello"}], "settings": {"title": "A & B"}}
    assert serialize(layout) == serialize(layout)
    assert serialize(None) == serialize(None)


def test_parsed_models_serialize_like_raw_mappings():
    raw_markup = {"html": "<p>x</p>", "css": "p{}"}
    raw_blocks = {"blocks": [{"type": "text", "content": "Hello"}]}
    assert serialize(MarkupLayout(html="<p>x</p>", css="p{}")) == serialize(raw_markup)
    assert serialize(BlockLayout.model_validate(raw_blocks)) == serialize(raw_blocks)
