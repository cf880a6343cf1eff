"""Core type definitions for playground-py."""

from __future__ import annotations

from enum import StrEnum


class ElementType(StrEnum):
    """Enumeration of element types that can be dropped on the canvas."""

    TEXT = "text"
    IMAGE = "image"
    SHAPE = "shape"


class ValueKind(StrEnum):
    """Enumeration of value kinds a property can hold."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ENUM = "enum"
    COLOR = "color"


class ControlKind(StrEnum):
    """Enumeration of form controls used to edit a property."""

    NUMBER = "number"
    RANGE = "range"
    CHECKBOX = "checkbox"
    SELECT = "select"
    TEXT = "text"
    URL = "url"
    COLOR = "color"


class ApplyStatus(StrEnum):
    """Outcome of applying a form edit to an element."""

    APPLIED = "applied"
    UNKNOWN_PROPERTY = "unknown_property"
    INVALID_VALUE = "invalid_value"
    NO_SELECTION = "no_selection"
