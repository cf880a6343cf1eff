"""Selection controller tracking the single active element."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    from playground_py.core.models import Canvas, Element

logger = structlog.get_logger(__name__)


class SelectionController:
    """Owns the "currently selected element" state for one canvas.

    At most one element is selected. Selecting another element overwrites the
    selection directly; there is no separate deselect step.

    Attributes:
        canvas: The canvas whose elements can be selected.
    """

    def __init__(self, canvas: Canvas, on_change: Callable[[Element | None], None] | None = None) -> None:
        """Initialize the controller with nothing selected.

        Args:
            canvas: The canvas whose elements can be selected.
            on_change: Called with the new selection whenever it changes.
        """
        self.canvas = canvas
        self._on_change = on_change
        self._selected_id: int | None = None

    def select(self, element_id: int) -> Element:
        """Make an element the active selection.

        Args:
            element_id: ID of an element on the canvas.

        Returns:
            The selected element.

        Raises:
            ElementNotFoundError: If the element is not on the canvas.
        """
        element = self.canvas.get(element_id)
        previous_id = self._selected_id
        self._selected_id = element.id
        logger.debug("Element selected", element_id=element.id, previous_id=previous_id)
        if self._on_change is not None:
            self._on_change(element)
        return element

    def current(self) -> Element | None:
        """Get the selected element, or None if nothing is selected."""
        if self._selected_id is None or self._selected_id not in self.canvas:
            return None
        return self.canvas.get(self._selected_id)

    def is_selected(self, element_id: int) -> bool:
        """Check whether an element is the active selection."""
        return self._selected_id is not None and self._selected_id == element_id

    def clear(self) -> None:
        """Drop the selection, e.g. when the active element is removed."""
        if self._selected_id is None:
            return
        logger.debug("Selection cleared", element_id=self._selected_id)
        self._selected_id = None
        if self._on_change is not None:
            self._on_change(None)
