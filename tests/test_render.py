"""Tests for HTML projection of elements and forms."""

from __future__ import annotations

from playground_py.core.applier import apply_property
from playground_py.core.forms import generate_form
from playground_py.core.models import Canvas, Element, create_element
from playground_py.services.render import TEXT_PLACEHOLDER, RenderService


class TestElementToHtml:
    """Tests for element rendering."""

    def test_wrapper(self, renderer: RenderService, text_element: Element) -> None:
        """Test every element is wrapped in a positioned container."""
        html = renderer.element_to_html(text_element)
        assert html.startswith('<div class="element"')
        assert f'data-id="{text_element.id}"' in html
        assert 'data-type="text"' in html
        assert "left: 50px; top: 80px; width: 100px; height: 100px" in html

    def test_selected_class(self, renderer: RenderService, text_element: Element) -> None:
        """Test the selected element carries the highlight class."""
        assert 'class="element selected"' in renderer.element_to_html(text_element, selected=True)

    def test_text_defaults(self, renderer: RenderService, text_element: Element) -> None:
        """Test default text styling."""
        html = renderer.element_to_html(text_element)
        assert "font-family: Arial" in html
        assert "font-size: 16px" in html
        assert "font-weight: normal" in html
        assert "font-style: normal" in html
        assert "text-decoration: none" in html
        assert TEXT_PLACEHOLDER in html

    def test_text_styling_follows_model(self, renderer: RenderService, text_element: Element) -> None:
        """Test rendered styling reflects applied properties."""
        apply_property(text_element, "bold", True)
        apply_property(text_element, "italic", True)
        apply_property(text_element, "underline", True)
        apply_property(text_element, "fontFamily", "Times New Roman")
        html = renderer.element_to_html(text_element)
        assert "font-weight: bold" in html
        assert "font-style: italic" in html
        assert "text-decoration: underline" in html
        assert "font-family: Times New Roman" in html

    def test_image(self, renderer: RenderService, image_element: Element) -> None:
        """Test images render their source."""
        html = renderer.element_to_html(image_element)
        assert '<img src="https://placehold.co/600x400"' in html

    def test_image_source_is_escaped(self, renderer: RenderService, image_element: Element) -> None:
        """Test attribute values cannot break out of the markup."""
        apply_property(image_element, "src", 'x" onerror="alert(1)')
        html = renderer.element_to_html(image_element)
        assert 'onerror="' not in html
        assert "&quot;" in html

    def test_shape(self, renderer: RenderService, shape_element: Element) -> None:
        """Test shapes render their path, fill, stroke and stroke width."""
        apply_property(shape_element, "strokeWidth", "2.5")
        html = renderer.element_to_html(shape_element)
        assert 'viewBox="0 0 100 100"' in html
        assert 'd="M50 0 L100 50 L50 100 L0 50 Z"' in html
        assert 'fill="#dddddd"' in html
        assert 'stroke="#000000"' in html
        assert 'stroke-width="2.5"' in html

    def test_rendering_does_not_mutate(self, renderer: RenderService, shape_element: Element) -> None:
        """Test rendering is a pure projection of the model."""
        before = dict(shape_element.properties)
        renderer.element_to_html(shape_element, selected=True)
        assert shape_element.properties == before


class TestCanvasToHtml:
    """Tests for rendering the whole canvas."""

    def test_canvas(self, renderer: RenderService) -> None:
        """Test elements render in insertion order inside the drop zone."""
        canvas = Canvas(width=640, height=480)
        first = canvas.add(create_element("shape", 0, 0))
        second = canvas.add(create_element("text", 10, 10))
        html = renderer.canvas_to_html(canvas, selected_id=second.id)

        assert html.startswith('<div id="drop-zone"')
        assert "width: 640px; height: 480px" in html
        assert html.index(f'data-id="{first.id}"') < html.index(f'data-id="{second.id}"')
        assert html.count("element selected") == 1


class TestFormToHtml:
    """Tests for properties panel rendering."""

    def test_text_form(self, renderer: RenderService, text_element: Element) -> None:
        """Test each field becomes a control wired by data-prop."""
        html = renderer.form_to_html(generate_form(text_element))
        assert f'data-element-id="{text_element.id}"' in html
        assert '<input type="number" data-prop="width" min="1" value="100">' in html
        assert '<input type="range" data-prop="fontSize" min="8" max="72" value="16">' in html
        assert "<option selected>Arial</option>" in html
        assert "<option>Courier New</option>" in html
        assert '<input type="checkbox" data-prop="bold"> Bold' in html

    def test_checked_checkbox(self, renderer: RenderService, text_element: Element) -> None:
        """Test a true boolean renders a checked box."""
        apply_property(text_element, "italic", True)
        html = renderer.form_to_html(generate_form(text_element))
        assert 'data-prop="italic" checked' in html

    def test_shape_form(self, renderer: RenderService, shape_element: Element) -> None:
        """Test shape fields use text, color and number controls."""
        html = renderer.form_to_html(generate_form(shape_element))
        assert '<input type="text" data-prop="pathData"' in html
        assert '<input type="color" data-prop="fill" value="#dddddd">' in html
        assert '<input type="number" data-prop="strokeWidth" min="0" value="1">' in html

    def test_image_form(self, renderer: RenderService, image_element: Element) -> None:
        """Test the image source uses a URL control."""
        html = renderer.form_to_html(generate_form(image_element))
        assert '<label>Image URL<input type="url" data-prop="src"' in html
