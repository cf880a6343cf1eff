"""Render service projecting elements and forms to HTML markup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from playground_py.core.types import ControlKind, ElementType

if TYPE_CHECKING:
    from collections.abc import Callable

    from playground_py.core.forms import FieldDescriptor, FormDescription
    from playground_py.core.models import Canvas, Element

TEXT_PLACEHOLDER = "Sample Text"


class RenderService:
    """Service for projecting the element model to HTML.

    Rendering only ever reads from the model. Each element type has its own
    body renderer in a dispatch table; the positioned wrapper is shared.
    """

    def __init__(self) -> None:
        """Initialize the per-type body renderer table."""
        self._renderers: dict[ElementType, Callable[[Element], str]] = {
            ElementType.TEXT: self._text_to_html,
            ElementType.IMAGE: self._image_to_html,
            ElementType.SHAPE: self._shape_to_html,
        }

    def element_to_html(self, element: Element, *, selected: bool = False) -> str:
        """Render an element as an absolutely positioned container.

        Args:
            element: The element to render.
            selected: Whether to add the selection highlight.

        Returns:
            HTML markup for the element.
        """
        body = self._renderers[element.element_type](element)
        classes = "element selected" if selected else "element"
        style = (
            f"position: absolute; left: {self._fmt(element.position.x)}px; top: {self._fmt(element.position.y)}px; "
            f"width: {self._fmt(element.size.width)}px; height: {self._fmt(element.size.height)}px"
        )
        return (
            f'<div class="{classes}" data-id="{element.id}" data-type="{element.element_type.value}" '
            f'style="{style}">{body}</div>'
        )

    def canvas_to_html(self, canvas: Canvas, *, selected_id: int | None = None) -> str:
        """Render every element of a canvas inside the drop zone container.

        Args:
            canvas: The canvas to render.
            selected_id: ID of the selected element, if any.

        Returns:
            HTML markup for the drop zone.
        """
        children = "\n".join(
            f"  {self.element_to_html(element, selected=element.id == selected_id)}" for element in canvas
        )
        return (
            f'<div id="drop-zone" style="position: relative; width: {self._fmt(canvas.width)}px; '
            f'height: {self._fmt(canvas.height)}px">\n{children}\n</div>'
        )

    def form_to_html(self, form: FormDescription) -> str:
        """Render a form description as a properties panel.

        Every control carries a ``data-prop`` attribute naming the property
        its change events must be routed to.

        Args:
            form: The form description to render.

        Returns:
            HTML markup for the properties panel.
        """
        rows = "\n".join(f"  {self._field_to_html(form_field)}" for form_field in form.fields)
        return f'<div id="properties-panel" data-element-id="{form.element_id}">\n{rows}\n</div>'

    def _text_to_html(self, element: Element) -> str:
        """Convert a text element to a styled div."""
        props = element.properties
        style = (
            f"font-family: {self._escape(props['fontFamily'])}; "
            f"font-size: {props['fontSize']}px; "
            f"font-weight: {'bold' if props['bold'] else 'normal'}; "
            f"font-style: {'italic' if props['italic'] else 'normal'}; "
            f"text-decoration: {'underline' if props['underline'] else 'none'}"
        )
        return f'<div contenteditable="true" style="{style}">{TEXT_PLACEHOLDER}</div>'

    def _image_to_html(self, element: Element) -> str:
        """Convert an image element to an img tag."""
        src = self._escape(element.properties["src"])
        return f'<img src="{src}" style="width: 100%; height: 100%; object-fit: contain">'

    def _shape_to_html(self, element: Element) -> str:
        """Convert a shape element to an inline SVG path."""
        props = element.properties
        return (
            '<svg width="100%" height="100%" viewBox="0 0 100 100">'
            f'<path d="{self._escape(props["pathData"])}" '
            f'fill="{self._escape(props["fill"])}" '
            f'stroke="{self._escape(props["stroke"])}" '
            f'stroke-width="{self._fmt(props["strokeWidth"])}"/>'
            "</svg>"
        )

    def _field_to_html(self, form_field: FieldDescriptor) -> str:
        """Convert a form field to a labelled input control."""
        name = form_field.property_name
        label = self._escape(form_field.label)
        value = form_field.current_value
        kind = form_field.control_kind

        if kind == ControlKind.CHECKBOX:
            checked = " checked" if value else ""
            return f'<label><input type="checkbox" data-prop="{name}"{checked}> {label}</label>'

        if kind == ControlKind.SELECT:
            options = "".join(
                f"<option{' selected' if choice == value else ''}>{self._escape(choice)}</option>"
                for choice in form_field.constraints.choices
            )
            return f'<label>{label}<select data-prop="{name}">{options}</select></label>'

        bounds = ""
        if form_field.constraints.minimum is not None:
            bounds += f' min="{self._fmt(form_field.constraints.minimum)}"'
        if form_field.constraints.maximum is not None:
            bounds += f' max="{self._fmt(form_field.constraints.maximum)}"'
        return (
            f'<label>{label}<input type="{kind.value}" data-prop="{name}"{bounds} '
            f'value="{self._escape(self._fmt(value))}"></label>'
        )

    def _fmt(self, value: Any) -> str:
        """Format a number without a trailing ``.0``."""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def _escape(self, text: str) -> str:
        """Escape special HTML characters."""
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&#x27;")
        )
