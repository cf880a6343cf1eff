"""Example driving a playground session without a browser.

This example demonstrates:
- Dropping text, image and shape templates onto a canvas
- Editing the selected element through form field changes
- How rejected and clamped edits are reported
- Reading back the HTML the host would paint

Running the Example:
    python examples/session_demo.py
"""

from __future__ import annotations

from playground_py import InMemoryHost, PlaygroundSession, RenderService
from playground_py.core.logging import configure_logging


def main() -> None:
    """Demonstrate a short editing session."""
    configure_logging(debug=True)

    host = InMemoryHost()
    session = PlaygroundSession(host)

    print("=== Playground Session Demo ===\n")

    # 1. Drop a text element; it becomes the selection
    text = session.on_drop("text", 50, 80)
    print(f"1. Dropped text #{text.id}, form fields: {list(session.form.values()) if session.form else []}\n")

    # 2. Edit it: one valid edit, one clamped, one rejected, one unknown
    for name, raw in [("bold", True), ("fontSize", "999"), ("width", "wide"), ("fill", "#ff0000")]:
        result = session.on_field_change(name, raw)
        print(f"2. {name}={raw!r}: {result.status.value} {result.value if result.ok else result.message}")
    print()

    # 3. Drop a shape and drag it past the canvas edge
    shape = session.on_drop("shape", 0, 0)
    session.on_drag_move(shape.id, 5000, 20)
    print(f"3. Shape #{shape.id} contained at ({shape.position.x}, {shape.position.y})\n")

    # 4. Switch back to the text element; its values are untouched
    form = session.on_select(text.id)
    print(f"4. Text form after reselect: {form.values()}\n")

    # 5. Paint the whole canvas
    print("5. Canvas markup:")
    print(RenderService().canvas_to_html(session.canvas, selected_id=text.id))
    print()
    print(host.form_html)


if __name__ == "__main__":
    main()
