"""Protocol definition for the host rendering layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from playground_py.core.forms import FormDescription
    from playground_py.core.models import Element


@runtime_checkable
class RenderHost(Protocol):
    """Protocol for the layer that paints the canvas and the properties panel.

    The core calls these methods after every state change. Implementations
    must treat their arguments as read-only projections of the model.
    """

    def render_element(self, element: Element, *, selected: bool) -> None:
        """Paint an element's type, position, size and property values.

        Args:
            element: The element to paint.
            selected: Whether the element is the active selection.
        """
        ...

    def render_form(self, form: FormDescription | None) -> None:
        """Paint the properties panel, one control per field.

        Each control's change event must be wired back to the session's
        ``on_field_change`` handler.

        Args:
            form: The form to paint, or None to clear the panel.
        """
        ...

    def remove_element(self, element_id: int) -> None:
        """Remove an element's visual representation.

        Args:
            element_id: ID of the removed element.
        """
        ...
