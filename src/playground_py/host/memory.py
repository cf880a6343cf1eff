"""In-memory render host for playground-py."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from playground_py.services.render import RenderService

if TYPE_CHECKING:
    from playground_py.core.forms import FormDescription
    from playground_py.core.models import Element


@dataclass(frozen=True)
class RenderCall:
    """A single call received from the core.

    Attributes:
        method: Name of the host method that was called.
        target: Element ID, or None for form renders.
        payload: The rendered HTML, or None for removals and cleared forms.
    """

    method: str
    target: int | None
    payload: Any = None


class InMemoryHost:
    """Render host that keeps the latest markup in memory.

    Elements and forms are projected to HTML through ``RenderService``. Every
    call is recorded, which makes the host suitable for tests, the CLI, and
    as a reference for real hosts.

    Attributes:
        elements: Latest HTML per element ID, in first-render order.
        form_html: Latest properties panel HTML, or None if cleared.
        form: Latest form description, or None if cleared.
        calls: Log of every call received.
    """

    def __init__(self, renderer: RenderService | None = None) -> None:
        """Initialize an empty host.

        Args:
            renderer: Render service to use. Defaults to a new instance.
        """
        self._renderer = renderer or RenderService()
        self.elements: dict[int, str] = {}
        self.form_html: str | None = None
        self.form: FormDescription | None = None
        self.calls: list[RenderCall] = []

    def render_element(self, element: Element, *, selected: bool) -> None:
        """Store the HTML for an element."""
        html = self._renderer.element_to_html(element, selected=selected)
        self.elements[element.id] = html
        self.calls.append(RenderCall("render_element", element.id, html))

    def render_form(self, form: FormDescription | None) -> None:
        """Store the HTML for the properties panel."""
        self.form = form
        self.form_html = self._renderer.form_to_html(form) if form is not None else None
        self.calls.append(RenderCall("render_form", form.element_id if form else None, self.form_html))

    def remove_element(self, element_id: int) -> None:
        """Drop the stored HTML for an element."""
        self.elements.pop(element_id, None)
        self.calls.append(RenderCall("remove_element", element_id))

    def calls_for(self, method: str) -> list[RenderCall]:
        """Get the recorded calls to one host method."""
        return [call for call in self.calls if call.method == method]

    def reset_calls(self) -> None:
        """Forget recorded calls, keeping the latest markup."""
        self.calls.clear()
