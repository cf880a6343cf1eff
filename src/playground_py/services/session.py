"""Playground session wiring host events to the element model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

from playground_py.config import PlaygroundConfig
from playground_py.core.applier import ApplyResult, apply_property
from playground_py.core.forms import generate_form
from playground_py.core.models import Canvas, Point, create_element
from playground_py.core.selection import SelectionController
from playground_py.core.types import ApplyStatus

if TYPE_CHECKING:
    from playground_py.core.forms import FormDescription
    from playground_py.core.models import Element
    from playground_py.host.base import RenderHost

logger = structlog.get_logger(__name__)


class PlaygroundSession:
    """One canvas editing session.

    The session owns the canvas and the selection and exposes one handler per
    inbound host event. Handlers run synchronously to completion, so events
    are applied strictly in delivery order. After each state change the
    session pushes fresh projections to the host.

    Attributes:
        session_id: Identifier bound to every log event of this session.
        config: Session configuration.
        canvas: The element collection.
        selection: The selection controller.
        host: The render host receiving projections.
        form: The form for the current selection, or None.
    """

    def __init__(self, host: RenderHost, config: PlaygroundConfig | None = None) -> None:
        """Initialize an empty session.

        Args:
            host: Render host receiving element and form projections.
            config: Session configuration. Defaults to environment values.
        """
        self.session_id = uuid4().hex[:12]
        self.config = config or PlaygroundConfig()
        self.canvas = Canvas(
            name=self.config.canvas_name,
            width=self.config.canvas_width,
            height=self.config.canvas_height,
        )
        self.host = host
        self.form: FormDescription | None = None
        self.selection = SelectionController(self.canvas, on_change=self._selection_changed)

    # Inbound events

    def on_drop(self, element_type: str, x: float, y: float) -> Element:
        """Handle a template dropped on the canvas.

        Creates the element with schema defaults, registers it and selects it.

        Args:
            element_type: Type name of the dropped template.
            x: Drop X-coordinate in canvas-local space.
            y: Drop Y-coordinate in canvas-local space.

        Returns:
            The created element.

        Raises:
            UnknownElementTypeError: If the template type is not known.
        """
        with structlog.contextvars.bound_contextvars(session_id=self.session_id):
            element = self.canvas.add(create_element(element_type, x, y))
            logger.info("Element created", element_id=element.id, element_type=element.element_type.value, x=x, y=y)
            self._select(element.id)
            return element

    def on_drag_move(self, element_id: int, new_x: float, new_y: float) -> Element:
        """Handle an element being dragged to a new position.

        Args:
            element_id: ID of the dragged element.
            new_x: New X-coordinate in canvas-local space.
            new_y: New Y-coordinate in canvas-local space.

        Returns:
            The moved element.

        Raises:
            ElementNotFoundError: If the element is not on the canvas.
        """
        with structlog.contextvars.bound_contextvars(session_id=self.session_id):
            element = self.canvas.get(element_id)
            element.position = self._contain(element, new_x, new_y)
            logger.debug("Element moved", element_id=element.id, x=element.position.x, y=element.position.y)
            self.host.render_element(element, selected=self.selection.is_selected(element.id))
            return element

    def on_select(self, element_id: int) -> FormDescription:
        """Handle a click on an element.

        Args:
            element_id: ID of the clicked element.

        Returns:
            The regenerated form for the element.

        Raises:
            ElementNotFoundError: If the element is not on the canvas.
        """
        with structlog.contextvars.bound_contextvars(session_id=self.session_id):
            element = self._select(element_id)
            return self.form or generate_form(element)

    def on_field_change(self, property_name: str, raw_value: Any) -> ApplyResult:
        """Handle a form control change for the selected element.

        A changed value re-renders the element and the form. A rejected
        value, or one coerced onto the value already held, re-renders the
        form so the host control matches the model. With drag containment
        enabled, a resize also pulls the element back inside the canvas.

        Args:
            property_name: The ``data-prop`` of the changed control.
            raw_value: The control's new value.

        Returns:
            The outcome of the edit.
        """
        with structlog.contextvars.bound_contextvars(session_id=self.session_id):
            element = self.selection.current()
            if element is None:
                logger.debug("Ignoring field change without selection", property=property_name)
                return ApplyResult(ApplyStatus.NO_SELECTION, property_name, message="No element selected")

            result = apply_property(element, property_name, raw_value)
            if result.changed:
                logger.info("Property applied", element_id=element.id, property=property_name, value=result.value)
                if property_name in ("width", "height"):
                    element.position = self._contain(element, element.position.x, element.position.y)
                self.host.render_element(element, selected=True)
                self._refresh_form(element)
            elif result.ok and result.value != raw_value:
                # Clamped or rounded onto the current value; the control still shows the raw input.
                self._refresh_form(element)
            elif result.status == ApplyStatus.INVALID_VALUE:
                logger.warning(
                    "Property edit rejected", element_id=element.id, property=property_name, reason=result.message
                )
                self._refresh_form(element)
            return result

    def remove_element(self, element_id: int) -> Element:
        """Remove an element from the canvas.

        Clears the selection when the removed element was active.

        Args:
            element_id: ID of the element to remove.

        Returns:
            The removed element.

        Raises:
            ElementNotFoundError: If the element is not on the canvas.
        """
        with structlog.contextvars.bound_contextvars(session_id=self.session_id):
            was_selected = self.selection.is_selected(element_id)
            element = self.canvas.remove(element_id)
            if was_selected:
                self.selection.clear()
            self.host.remove_element(element_id)
            logger.info("Element removed", element_id=element_id)
            return element

    # Helpers

    @property
    def selected(self) -> Element | None:
        """The selected element, or None."""
        return self.selection.current()

    def _select(self, element_id: int) -> Element:
        previous = self.selection.current()
        element = self.selection.select(element_id)
        if previous is not None and previous.id != element.id:
            self.host.render_element(previous, selected=False)
        self.host.render_element(element, selected=True)
        return element

    def _selection_changed(self, element: Element | None) -> None:
        if element is None:
            self.form = None
            self.host.render_form(None)
        else:
            self._refresh_form(element)

    def _refresh_form(self, element: Element) -> None:
        self.form = generate_form(element)
        self.host.render_form(self.form)

    def _contain(self, element: Element, x: float, y: float) -> Point:
        """Clamp a position so the element stays inside the canvas."""
        if not self.config.contain_drag:
            return Point(x, y)
        max_x = max(self.canvas.width - element.size.width, 0)
        max_y = max(self.canvas.height - element.size.height, 0)
        return Point(min(max(x, 0), max_x), min(max(y, 0), max_y))
