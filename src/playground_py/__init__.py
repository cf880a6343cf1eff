"""Playground-py: the element model behind a drag-and-drop canvas editor.

Users drop text, image and shape templates onto a canvas, move them around,
and edit their visual properties through a generated form. This package holds
the part of that editor with real design content: the typed property schema
for each element type, the form generated from it, and the applier that
validates form edits and writes them back onto the element.

Key Components:
    - Core Models: Element, Canvas, Point, Size
    - Schema Registry: schema_for, PropertyDescriptor
    - Forms: generate_form, FormDescription
    - Applier: apply_property, ApplyResult
    - Selection: SelectionController
    - Session: PlaygroundSession (inbound host events)
    - Host: RenderHost protocol, InMemoryHost

Quick Start:
    >>> from playground_py import InMemoryHost, PlaygroundSession
    >>>
    >>> host = InMemoryHost()
    >>> session = PlaygroundSession(host)
    >>> element = session.on_drop("text", 50, 80)
    >>> session.on_field_change("bold", True).ok
    True
"""

from __future__ import annotations

from playground_py.config import PlaygroundConfig
from playground_py.core import (
    ApplyResult,
    ApplyStatus,
    Canvas,
    ControlKind,
    Element,
    ElementType,
    FieldDescriptor,
    FormDescription,
    Point,
    PropertyDescriptor,
    SelectionController,
    Size,
    ValueKind,
    apply_property,
    create_element,
    generate_form,
    schema_for,
)
from playground_py.exceptions import (
    ElementNotFoundError,
    InvalidValueError,
    PlaygroundError,
    UnknownElementTypeError,
    UnknownPropertyError,
)
from playground_py.host import InMemoryHost, RenderHost
from playground_py.services import PlaygroundSession, RenderService

__all__ = [
    "ApplyResult",
    "ApplyStatus",
    "Canvas",
    "ControlKind",
    "Element",
    "ElementNotFoundError",
    "ElementType",
    "FieldDescriptor",
    "FormDescription",
    "InMemoryHost",
    "InvalidValueError",
    "PlaygroundConfig",
    "PlaygroundError",
    "PlaygroundSession",
    "Point",
    "PropertyDescriptor",
    "RenderHost",
    "RenderService",
    "SelectionController",
    "Size",
    "UnknownElementTypeError",
    "UnknownPropertyError",
    "ValueKind",
    "apply_property",
    "create_element",
    "generate_form",
    "schema_for",
]

__version__ = "0.1.0"
