"""Property applier: validates form edits and writes them onto elements."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from playground_py.core.schema import find_descriptor
from playground_py.core.types import ApplyStatus, ValueKind
from playground_py.exceptions import InvalidValueError, UnknownPropertyError

if TYPE_CHECKING:
    from playground_py.core.models import Element
    from playground_py.core.schema import PropertyDescriptor

logger = structlog.get_logger(__name__)

_TRUE_STRINGS = frozenset({"true", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "off", "0"})
_SIZE_PROPERTIES = frozenset({"width", "height"})


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of a single property edit.

    Attributes:
        status: Whether the edit was applied or why it was rejected.
        property_name: The property the edit targeted.
        value: The coerced value now held by the element, if applied.
        previous: The value held before the edit, if applied.
        message: Description of the rejection, if any.
    """

    status: ApplyStatus
    property_name: str
    value: Any = None
    previous: Any = None
    message: str = ""

    @property
    def ok(self) -> bool:
        """Whether the edit was accepted."""
        return self.status == ApplyStatus.APPLIED

    @property
    def changed(self) -> bool:
        """Whether the element's visual representation needs a refresh."""
        return self.ok and self.value != self.previous


def _coerce_number(descriptor: PropertyDescriptor, raw: Any) -> int | float:
    if isinstance(raw, bool):
        raise InvalidValueError(descriptor.name, raw, "expected a number")
    if isinstance(raw, int | float):
        try:
            number = float(raw)
        except OverflowError:
            raise InvalidValueError(descriptor.name, raw, "number out of range") from None
    elif isinstance(raw, str):
        try:
            number = float(raw.strip())
        except ValueError:
            raise InvalidValueError(descriptor.name, raw, "expected a number") from None
    else:
        raise InvalidValueError(descriptor.name, raw, "expected a number")
    if not math.isfinite(number):
        raise InvalidValueError(descriptor.name, raw, "expected a finite number")

    constraints = descriptor.constraints
    if constraints.minimum is not None:
        number = float(max(number, constraints.minimum))
    if constraints.maximum is not None:
        number = float(min(number, constraints.maximum))
    if constraints.integer or number.is_integer():
        return int(round(number))
    return number


def _coerce_boolean(descriptor: PropertyDescriptor, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise InvalidValueError(descriptor.name, raw, "expected a boolean")


def _coerce_string(descriptor: PropertyDescriptor, raw: Any) -> str:
    if not isinstance(raw, str):
        raise InvalidValueError(descriptor.name, raw, "expected a string")
    return raw


def _coerce_enum(descriptor: PropertyDescriptor, raw: Any) -> str:
    if not isinstance(raw, str) or raw not in descriptor.constraints.choices:
        choices = ", ".join(descriptor.constraints.choices)
        raise InvalidValueError(descriptor.name, raw, f"expected one of {choices}")
    return raw


_COERCERS = {
    ValueKind.NUMBER: _coerce_number,
    ValueKind.BOOLEAN: _coerce_boolean,
    ValueKind.STRING: _coerce_string,
    ValueKind.COLOR: _coerce_string,
    ValueKind.ENUM: _coerce_enum,
}


def coerce_value(descriptor: PropertyDescriptor, raw: Any) -> Any:
    """Convert a raw form value into the descriptor's typed value.

    Numbers are parsed and clamped to the declared range, and rounded when
    the descriptor requires whole numbers. Booleans accept checkbox wire
    values. Strings and colors are taken as-is.

    Args:
        descriptor: The property descriptor to coerce for.
        raw: The raw value delivered by the form.

    Returns:
        The coerced value.

    Raises:
        InvalidValueError: If the value cannot be coerced.
    """
    return _COERCERS[descriptor.value_kind](descriptor, raw)


def _resolve(element: Element, property_name: str) -> PropertyDescriptor:
    descriptor = find_descriptor(element.element_type, property_name)
    if descriptor is None:
        raise UnknownPropertyError(property_name, element.element_type.value)
    return descriptor


def current_value(element: Element, property_name: str) -> Any:
    """Read the model value backing a form field."""
    if property_name in _SIZE_PROPERTIES:
        return getattr(element.size, property_name)
    return element.properties[property_name]


def apply_property(element: Element, property_name: str, raw_value: Any) -> ApplyResult:
    """Validate a form edit and apply it to an element.

    At most one property or dimension changes. A rejected edit leaves the
    element untouched and is reported in the returned result rather than
    raised.

    Args:
        element: The element to edit.
        property_name: The form field that changed.
        raw_value: The raw value delivered by the form.

    Returns:
        The outcome of the edit.
    """
    try:
        descriptor = _resolve(element, property_name)
        value = coerce_value(descriptor, raw_value)
    except UnknownPropertyError as exc:
        logger.debug("Ignoring unknown property", element_id=element.id, property=property_name)
        return ApplyResult(ApplyStatus.UNKNOWN_PROPERTY, property_name, message=str(exc))
    except InvalidValueError as exc:
        return ApplyResult(ApplyStatus.INVALID_VALUE, property_name, message=str(exc))

    previous = current_value(element, property_name)
    if property_name in _SIZE_PROPERTIES:
        setattr(element.size, property_name, value)
    else:
        element.properties[property_name] = value

    logger.debug("Applied property", element_id=element.id, property=property_name, value=value)
    return ApplyResult(ApplyStatus.APPLIED, property_name, value=value, previous=previous)
