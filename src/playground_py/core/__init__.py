"""Core domain models for playground-py."""

from playground_py.core.applier import ApplyResult, apply_property, coerce_value
from playground_py.core.forms import FieldDescriptor, FormDescription, generate_form
from playground_py.core.models import Canvas, Element, Point, Size, create_element
from playground_py.core.schema import (
    COMMON_PROPERTIES,
    Constraints,
    PropertyDescriptor,
    default_properties,
    find_descriptor,
    schema_for,
)
from playground_py.core.selection import SelectionController
from playground_py.core.types import ApplyStatus, ControlKind, ElementType, ValueKind

__all__ = [
    "COMMON_PROPERTIES",
    "ApplyResult",
    "ApplyStatus",
    "Canvas",
    "Constraints",
    "ControlKind",
    "Element",
    "ElementType",
    "FieldDescriptor",
    "FormDescription",
    "Point",
    "PropertyDescriptor",
    "SelectionController",
    "Size",
    "ValueKind",
    "apply_property",
    "coerce_value",
    "create_element",
    "default_properties",
    "find_descriptor",
    "generate_form",
    "schema_for",
]
