"""Tests for element renderers."""

from conftest import make_element

from sitecanvas.elements.base import ElementCommands, css_property, px, style_attr
from sitecanvas.models.element_models import Position
from sitecanvas.models.session_models import ResizeHandle


class RecordingCommands(ElementCommands):
    def __init__(self):
        self.calls = []
        super().__init__(
            select=lambda *a: self.calls.append(("select",) + a),
            update=lambda *a: self.calls.append(("update",) + a),
            delete=lambda *a: self.calls.append(("delete",) + a),
            begin_drag=lambda *a: self.calls.append(("begin_drag",) + a),
            begin_resize=lambda *a: self.calls.append(("begin_resize",) + a),
        )


def test_style_helpers():
    assert css_property("backgroundColor") == "background-color"
    assert css_property("zIndex") == "z-index"
    assert css_property("border-top") == "border-top"
    assert px(10) == "10px"
    assert px(10.5) == "10.5px"
    assert style_attr({"fontSize": "12px", "color": None}) == "font-size: 12px"


def test_unselected_render_has_geometry_and_no_editor(registry):
    element = make_element("t1", "text", x=10, y=20, width=200, height=40, content="Hi")
    out = registry.get_renderer("text").render(element, False)
    assert 'data-element-id="t1"' in out
    assert "left: 10px; top: 20px; width: 200px; height: 40px" in out
    assert "Hi" in out
    assert "data-inline-editor" not in out
    assert "resize-handle" not in out
    assert "selected" not in out


def test_selected_text_render_shows_editor_and_handles(registry):
    element = make_element("t1", "text", content="Hi")
    out = registry.get_renderer("text").render(element, True)
    assert "canvas-element element-text selected" in out
    assert "<textarea data-inline-editor" in out
    assert out.count('class="resize-handle') == 8


def test_content_is_escaped(registry):
    element = make_element("t1", "text", content="<b>x</b>")
    out = registry.get_renderer("text").render(element, False)
    assert "<b>x</b>" not in out
    assert "&lt;b&gt;x&lt;/b&gt;" in out


def test_defaults_fill_missing_styles_without_mutation(registry):
    element = make_element("b1", "button", content="Go", styles={"color": "black"})
    renderer = registry.get_renderer("button")
    styles = renderer.effective_styles(element)
    assert styles["color"] == "black"
    assert styles["backgroundColor"] == "#ff6b6b"
    assert element.styles == {"color": "black"}


def test_button_uses_single_line_editor(registry):
    element = make_element("b1", "button", content="Go")
    renderer = registry.get_renderer("button")
    assert "<button" in renderer.render(element, False)
    assert '<input type="text" data-inline-editor value="Go"' in renderer.render(element, True)


def test_image_placeholder_and_uploaded_image(registry):
    renderer = registry.get_renderer("image")
    placeholder = make_element("i1", "image", content="Caption")
    assert not renderer.accepts_text(placeholder)
    assert "image-placeholder" in renderer.render(placeholder, False)
    assert 'type="file"' in renderer.render(placeholder, True)

    uploaded = make_element("i2", "image", content="Alt", image_url="https://cdn/x.png")
    out = renderer.render(uploaded, True)
    assert '<img src="https://cdn/x.png" alt="Alt"' in out
    assert "data-inline-editor" not in out


def test_logo_accepts_text_until_image_set(registry):
    renderer = registry.get_renderer("logo")
    assert renderer.accepts_text(make_element("l1", "logo", content="Brand"))
    assert not renderer.accepts_text(make_element("l2", "logo", image_url="data:image/png;base64,AA"))


def test_visual_types_ignore_content_edits(registry):
    commands = RecordingCommands()
    for element_type in ("divider", "spacer", "image", "footer", "projects", "section"):
        element = make_element("v", element_type)
        assert registry.get_renderer(element_type).on_content_change(element, "x", commands) is False
    assert commands.calls == []


def test_spacer_only_labelled_when_selected(registry):
    renderer = registry.get_renderer("spacer")
    element = make_element("s1", "spacer")
    assert "Spacer" not in renderer.render(element, False)
    assert "<span>Spacer</span>" in renderer.render(element, True)


def test_section_types_fall_back_to_titles(registry):
    assert "Company Name" in registry.get_renderer("footer").render(make_element("f", "footer"), False)
    assert "My Projects" in registry.get_renderer("projects").render(make_element("p", "projects"), False)
    assert "Section Title" in registry.get_renderer("section").render(make_element("s", "section"), False)


def test_handlers_route_through_commands(registry):
    commands = RecordingCommands()
    renderer = registry.get_renderer("text")
    element = make_element("t1", "text")
    pointer = Position(x=5, y=6)

    assert renderer.on_content_change(element, "new", commands) is True
    renderer.on_delete(element, commands)
    renderer.on_drag_start(element, pointer, commands)
    renderer.on_resize_start(element, ResizeHandle.SE, pointer, commands)

    assert commands.calls == [
        ("update", "t1", {"content": "new"}),
        ("delete", "t1"),
        ("begin_drag", "t1", pointer),
        ("begin_resize", "t1", ResizeHandle.SE, pointer),
    ]


def test_link_renders_anchor_with_target(registry):
    element = make_element("l1", "link", content="Docs", url="https://x.io/docs?a=1&b=2")
    out = registry.get_renderer("link").render(element, False)
    assert '<a href="https://x.io/docs?a=1&amp;b=2"' in out
    assert ">Docs</a>" in out


def test_link_target_from_click_action_and_script_urls(registry):
    renderer = registry.get_renderer("link")
    clicked = make_element("l1", "link", content="Go", interaction={"click": {"action": "link", "target": "/about"}})
    assert 'href="/about"' in renderer.render(clicked, False)

    scripted = make_element("l2", "link", content="Go", url="JavaScript:alert(1)")
    out = renderer.render(scripted, False)
    assert 'href="#"' in out
    assert "alert(1)" not in out

    bare = make_element("l3", "link", content="Go")
    assert 'href="#"' in renderer.render(bare, False)


def test_divider_size_styles_apply_to_inner_line(registry):
    element = make_element("d1", "divider", width=300, height=40, styles={"width": "50%", "height": "4px"})
    out = registry.get_renderer("divider").render(element, False)
    assert "width: 300px; height: 40px" in out
    line = out.split('class="divider"')[1]
    assert "width: 50%; height: 4px" in line
    assert "background-color: #e0e0e0" in line
