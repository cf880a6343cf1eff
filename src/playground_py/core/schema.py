"""Property schema registry for canvas element types.

Each element type declares an ordered, static set of editable properties. The
registry is consumed by both the form generator (what to render) and the
property applier (what to validate), so it is the only place property names,
kinds, defaults and constraints are defined.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from playground_py.core.types import ControlKind, ElementType, ValueKind

FONT_FAMILIES: tuple[str, ...] = ("Arial", "Times New Roman", "Verdana", "Courier New")

DEFAULT_IMAGE_SRC = "https://placehold.co/600x400"
DEFAULT_PATH_DATA = "M50 0 L100 50 L50 100 L0 50 Z"
DEFAULT_SIZE = 100.0

_DEFAULT_CONTROLS: dict[ValueKind, ControlKind] = {
    ValueKind.NUMBER: ControlKind.NUMBER,
    ValueKind.STRING: ControlKind.TEXT,
    ValueKind.BOOLEAN: ControlKind.CHECKBOX,
    ValueKind.ENUM: ControlKind.SELECT,
    ValueKind.COLOR: ControlKind.COLOR,
}


@dataclass(frozen=True)
class Constraints:
    """Value constraints for a property.

    Attributes:
        minimum: Lower clamp bound for numeric values.
        maximum: Upper clamp bound for numeric values.
        choices: Allowed members for enum values.
        integer: Whether numeric values are rounded to whole numbers.
    """

    minimum: float | None = None
    maximum: float | None = None
    choices: tuple[str, ...] = ()
    integer: bool = False


@dataclass(frozen=True)
class PropertyDescriptor:
    """Declaration of a single editable property.

    Attributes:
        name: Property name as used by the form and the element model.
        value_kind: Kind of value the property holds.
        default: Value assigned when an element is created.
        constraints: Range or membership constraints for the value.
        label: Human readable label for the form control.
        control: Explicit control kind, or None to derive it from value_kind.
    """

    name: str
    value_kind: ValueKind
    default: Any
    constraints: Constraints = Constraints()
    label: str = ""
    control: ControlKind | None = None

    @property
    def control_kind(self) -> ControlKind:
        """Control used to edit this property."""
        return self.control or _DEFAULT_CONTROLS[self.value_kind]


COMMON_PROPERTIES: tuple[PropertyDescriptor, ...] = (
    PropertyDescriptor("width", ValueKind.NUMBER, DEFAULT_SIZE, Constraints(minimum=1), "Width"),
    PropertyDescriptor("height", ValueKind.NUMBER, DEFAULT_SIZE, Constraints(minimum=1), "Height"),
)

_SCHEMAS: dict[ElementType, tuple[PropertyDescriptor, ...]] = {
    ElementType.TEXT: (
        PropertyDescriptor(
            "fontFamily", ValueKind.ENUM, "Arial", Constraints(choices=FONT_FAMILIES), "Font Family"
        ),
        PropertyDescriptor(
            "fontSize",
            ValueKind.NUMBER,
            16,
            Constraints(minimum=8, maximum=72, integer=True),
            "Font Size",
            ControlKind.RANGE,
        ),
        PropertyDescriptor("bold", ValueKind.BOOLEAN, False, label="Bold"),
        PropertyDescriptor("italic", ValueKind.BOOLEAN, False, label="Italic"),
        PropertyDescriptor("underline", ValueKind.BOOLEAN, False, label="Underline"),
    ),
    ElementType.IMAGE: (
        PropertyDescriptor("src", ValueKind.STRING, DEFAULT_IMAGE_SRC, label="Image URL", control=ControlKind.URL),
    ),
    ElementType.SHAPE: (
        PropertyDescriptor("pathData", ValueKind.STRING, DEFAULT_PATH_DATA, label="SVG Path Data"),
        PropertyDescriptor("fill", ValueKind.COLOR, "#dddddd", label="Fill Color"),
        PropertyDescriptor("stroke", ValueKind.COLOR, "#000000", label="Stroke Color"),
        PropertyDescriptor("strokeWidth", ValueKind.NUMBER, 1, Constraints(minimum=0), "Stroke Width"),
    ),
}

_COMMON_BY_NAME = {descriptor.name: descriptor for descriptor in COMMON_PROPERTIES}
_SCHEMA_BY_NAME = {
    element_type: {descriptor.name: descriptor for descriptor in schema} for element_type, schema in _SCHEMAS.items()
}


def schema_for(element_type: ElementType) -> tuple[PropertyDescriptor, ...]:
    """Get the ordered type-specific property schema for an element type.

    The common ``width``/``height`` descriptors are not included; see
    ``COMMON_PROPERTIES``.

    Args:
        element_type: The element type.

    Returns:
        The declared property descriptors in form order.
    """
    return _SCHEMAS[ElementType(element_type)]


def find_descriptor(element_type: ElementType, name: str) -> PropertyDescriptor | None:
    """Find the descriptor for a property name on an element type.

    Args:
        element_type: The element type.
        name: The property name, including the common ``width``/``height``.

    Returns:
        The matching descriptor, or None if the property does not apply.
    """
    if name in _COMMON_BY_NAME:
        return _COMMON_BY_NAME[name]
    return _SCHEMA_BY_NAME[ElementType(element_type)].get(name)


def default_properties(element_type: ElementType) -> dict[str, Any]:
    """Build a fresh property map holding the schema defaults for a type."""
    return {descriptor.name: descriptor.default for descriptor in schema_for(element_type)}
