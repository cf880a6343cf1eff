"""Custom exceptions for playground-py."""

from __future__ import annotations

from typing import Any


class PlaygroundError(Exception):
    """Base exception class for all playground-py errors."""


class UnknownElementTypeError(PlaygroundError):
    """Raised when an element is created with a type outside the closed set.

    This indicates a caller bug rather than bad user input.

    Attributes:
        element_type: The rejected type value.
    """

    def __init__(self, element_type: Any) -> None:
        """Initialize the exception with the rejected type.

        Args:
            element_type: The type value that is not a known element type.
        """
        self.element_type = element_type
        super().__init__(f"Unknown element type: {element_type!r}")


class ElementNotFoundError(PlaygroundError):
    """Raised when an element with the specified ID is not on the canvas.

    Attributes:
        element_id: The ID of the element that was not found.
    """

    def __init__(self, element_id: int) -> None:
        """Initialize the exception with the element ID.

        Args:
            element_id: The ID of the element that was not found.
        """
        self.element_id = element_id
        super().__init__(f"Element with ID {element_id} not found")


class UnknownPropertyError(PlaygroundError):
    """Raised when a property does not exist in an element type's schema.

    Attributes:
        property_name: The name of the unknown property.
        element_type: The type of the element the edit targeted.
    """

    def __init__(self, property_name: str, element_type: str) -> None:
        """Initialize the exception.

        Args:
            property_name: The name of the unknown property.
            element_type: The type of the element the edit targeted.
        """
        self.property_name = property_name
        self.element_type = element_type
        super().__init__(f"Property {property_name!r} does not apply to {element_type} elements")


class InvalidValueError(PlaygroundError):
    """Raised when a raw value cannot be coerced to a property's value kind.

    Attributes:
        property_name: The name of the property being edited.
        raw_value: The rejected raw value.
    """

    def __init__(self, property_name: str, raw_value: Any, reason: str) -> None:
        """Initialize the exception.

        Args:
            property_name: The name of the property being edited.
            raw_value: The rejected raw value.
            reason: Description of why the value was rejected.
        """
        self.property_name = property_name
        self.raw_value = raw_value
        super().__init__(f"Invalid value {raw_value!r} for {property_name}: {reason}")
