"""Tests for core domain models."""

from __future__ import annotations

from datetime import datetime

import pytest

from playground_py.core.models import Canvas, Element, Point, Size, create_element
from playground_py.core.types import ElementType
from playground_py.exceptions import ElementNotFoundError, UnknownElementTypeError, UnknownPropertyError
from playground_py.services.render import RenderService


class TestCreateElement:
    """Tests for element creation from a drop."""

    def test_create_text_element(self) -> None:
        """Test a dropped text element gets its type, position and defaults."""
        element = create_element("text", 50, 80)
        assert element.element_type == ElementType.TEXT
        assert element.position == Point(50, 80)
        assert element.size == Size(100, 100)
        assert element.properties["fontFamily"] == "Arial"
        assert element.properties["fontSize"] == 16
        assert element.properties["bold"] is False
        assert element.properties["italic"] is False
        assert element.properties["underline"] is False

    def test_create_shape_element(self) -> None:
        """Test a dropped shape element gets the diamond path and fill defaults."""
        element = create_element("shape", 0, 0)
        assert element.element_type == ElementType.SHAPE
        assert element.properties["pathData"] == "M50 0 L100 50 L50 100 L0 50 Z"
        assert element.properties["fill"] == "#dddddd"
        assert element.properties["stroke"] == "#000000"
        assert element.properties["strokeWidth"] == 1

    def test_create_image_element(self) -> None:
        """Test a dropped image element gets the placeholder source."""
        element = create_element(ElementType.IMAGE, 5, 6)
        assert element.element_type == ElementType.IMAGE
        assert element.properties == {"src": "https://placehold.co/600x400"}

    def test_properties_only_hold_schema_keys(self) -> None:
        """Test no property leaks across element types."""
        text = create_element("text", 0, 0)
        shape = create_element("shape", 0, 0)
        assert "fill" not in text.properties
        assert "fontSize" not in shape.properties
        assert "width" not in text.properties

    def test_properties_are_not_shared(self) -> None:
        """Test each element gets its own property map."""
        first = create_element("text", 0, 0)
        second = create_element("text", 0, 0)
        first.properties["bold"] = True
        assert second.properties["bold"] is False

    def test_ids_are_unique_and_increasing(self) -> None:
        """Test IDs are drawn from a monotonic sequence."""
        ids = [create_element("shape", 0, 0).id for _ in range(5)]
        assert len(set(ids)) == 5
        assert ids == sorted(ids)

    def test_unknown_type_raises(self) -> None:
        """Test an unknown type is a contract violation."""
        with pytest.raises(UnknownElementTypeError) as exc_info:
            create_element("video", 0, 0)
        assert exc_info.value.element_type == "video"

    def test_created_at(self) -> None:
        """Test that elements carry a creation timestamp."""
        element = create_element("text", 0, 0)
        assert isinstance(element.created_at, datetime)


class TestElement:
    """Tests for the Element model."""

    def test_type_is_immutable(self, text_element: Element) -> None:
        """Test the element type cannot be reassigned."""
        with pytest.raises(AttributeError):
            text_element.element_type = ElementType.SHAPE
        assert text_element.element_type == ElementType.TEXT

    def test_rejects_other_type_properties(self) -> None:
        """Test a shape cannot be constructed with a text property."""
        with pytest.raises(UnknownPropertyError) as exc_info:
            Element(ElementType.SHAPE, properties={"fontSize": 12})
        assert exc_info.value.property_name == "fontSize"

    def test_missing_properties_get_defaults(self) -> None:
        """Test properties left out of the constructor take schema defaults."""
        element = Element(ElementType.SHAPE, properties={"fill": "#ff0000"})
        assert element.properties == {
            "pathData": "M50 0 L100 50 L50 100 L0 50 Z",
            "fill": "#ff0000",
            "stroke": "#000000",
            "strokeWidth": 1,
        }

    def test_constructed_element_renders(self) -> None:
        """Test a directly constructed element has everything the renderer reads."""
        element = Element(ElementType.SHAPE)
        assert 'stroke-width="1"' in RenderService().element_to_html(element)

    def test_constructor_accepts_type_value(self) -> None:
        """Test the type may be given by value and is stored as the enum."""
        element = Element("image")
        assert element.element_type is ElementType.IMAGE

    def test_constructor_rejects_unknown_type(self) -> None:
        """Test an unknown type is rejected by the constructor too."""
        with pytest.raises(UnknownElementTypeError):
            Element("video")

    def test_position_is_mutable(self, text_element: Element) -> None:
        """Test the position can be updated."""
        text_element.position = Point(1, 2)
        assert text_element.position.x == 1
        assert text_element.position.y == 2


class TestCanvas:
    """Tests for the Canvas element collection."""

    def test_add_and_get(self, canvas: Canvas, text_element: Element) -> None:
        """Test adding an element and retrieving it by ID."""
        canvas.add(text_element)
        assert canvas.get(text_element.id) is text_element
        assert text_element.id in canvas
        assert len(canvas) == 1

    def test_insertion_order(self, canvas: Canvas) -> None:
        """Test elements keep insertion order."""
        elements = [canvas.add(create_element(kind, 0, 0)) for kind in ("shape", "text", "image")]
        assert canvas.elements == elements
        assert list(canvas) == elements

    def test_add_duplicate_raises(self, canvas: Canvas, text_element: Element) -> None:
        """Test the same element cannot be registered twice."""
        canvas.add(text_element)
        with pytest.raises(ValueError, match="already on the canvas"):
            canvas.add(text_element)

    def test_get_missing_raises(self, canvas: Canvas) -> None:
        """Test retrieving an unknown ID raises."""
        with pytest.raises(ElementNotFoundError) as exc_info:
            canvas.get(-1)
        assert exc_info.value.element_id == -1

    def test_remove(self, canvas: Canvas, text_element: Element) -> None:
        """Test removing an element."""
        canvas.add(text_element)
        assert canvas.remove(text_element.id) is text_element
        assert text_element.id not in canvas
        assert len(canvas) == 0

    def test_remove_missing_raises(self, canvas: Canvas) -> None:
        """Test removing an unknown ID raises."""
        with pytest.raises(ElementNotFoundError):
            canvas.remove(12345678)

    def test_ids_not_reused_after_removal(self, canvas: Canvas) -> None:
        """Test a new element never takes a removed element's ID."""
        first = canvas.add(create_element("text", 0, 0))
        canvas.remove(first.id)
        second = canvas.add(create_element("text", 0, 0))
        assert second.id != first.id
