"""Form generator: derives a declarative editing form from an element."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from playground_py.core.schema import COMMON_PROPERTIES, DEFAULT_SIZE, schema_for

if TYPE_CHECKING:
    from playground_py.core.models import Element
    from playground_py.core.schema import Constraints, PropertyDescriptor
    from playground_py.core.types import ControlKind, ElementType


@dataclass(frozen=True)
class FieldDescriptor:
    """A single editable field of a property form.

    Attributes:
        property_name: The property the field edits.
        control_kind: The kind of input control to render.
        current_value: The value the control is pre-populated with.
        constraints: Range or membership constraints for the control.
        label: Human readable label for the control.
    """

    property_name: str
    control_kind: ControlKind
    current_value: Any
    constraints: Constraints
    label: str


@dataclass(frozen=True)
class FormDescription:
    """Declarative description of the property form for one element.

    Attributes:
        element_id: ID of the element the form edits.
        element_type: Type of the element the form edits.
        fields: Fields in display order.
    """

    element_id: int
    element_type: ElementType
    fields: tuple[FieldDescriptor, ...]

    def field(self, property_name: str) -> FieldDescriptor:
        """Get a field by property name.

        Raises:
            KeyError: If the form has no such field.
        """
        for form_field in self.fields:
            if form_field.property_name == property_name:
                return form_field
        raise KeyError(property_name)

    def values(self) -> dict[str, Any]:
        """Map of property name to current value, in field order."""
        return {form_field.property_name: form_field.current_value for form_field in self.fields}


def _field(descriptor: PropertyDescriptor, value: Any) -> FieldDescriptor:
    return FieldDescriptor(
        property_name=descriptor.name,
        control_kind=descriptor.control_kind,
        current_value=value,
        constraints=descriptor.constraints,
        label=descriptor.label or descriptor.name,
    )


def generate_form(element: Element) -> FormDescription:
    """Generate the property form for an element.

    Width and height always lead the form and are read from the element's
    size. The type's schema follows in declared order, with values read from
    the element's properties. Values come from the model only, so calling
    this twice on an unmodified element yields equal descriptions.

    Args:
        element: The element to describe.

    Returns:
        The form description.
    """
    width, height = COMMON_PROPERTIES
    fields = [
        _field(width, element.size.width or DEFAULT_SIZE),
        _field(height, element.size.height or DEFAULT_SIZE),
    ]
    fields.extend(
        _field(descriptor, element.properties.get(descriptor.name, descriptor.default))
        for descriptor in schema_for(element.element_type)
    )
    return FormDescription(element_id=element.id, element_type=element.element_type, fields=tuple(fields))
