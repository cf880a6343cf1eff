"""Core domain models for the playground canvas."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from playground_py.core.schema import DEFAULT_SIZE, default_properties
from playground_py.core.types import ElementType
from playground_py.exceptions import ElementNotFoundError, UnknownElementTypeError, UnknownPropertyError

if TYPE_CHECKING:
    from collections.abc import Iterator

# Process-wide so ids are never reused, even across canvases.
_element_ids = itertools.count(1)


def next_element_id() -> int:
    """Draw the next element ID from the monotonic sequence."""
    return next(_element_ids)


@dataclass
class Point:
    """Represents a position in canvas-local coordinates.

    Attributes:
        x: X-coordinate position.
        y: Y-coordinate position.
    """

    x: float
    y: float


@dataclass
class Size:
    """Represents the rendered dimensions of an element.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
    """

    width: float = DEFAULT_SIZE
    height: float = DEFAULT_SIZE


@dataclass
class Element:
    """A single object placed on the canvas.

    ``element_type`` is fixed at creation. ``properties`` only ever holds the
    keys declared by the type's schema; width and height live in ``size``.

    Attributes:
        element_type: Type of the element (text, image or shape).
        id: Unique identifier, assigned at creation and never reused.
        position: Position of the element on the canvas.
        size: Dimensions of the element.
        properties: Current typed property values keyed by property name.
        created_at: Timestamp when the element was created.
    """

    element_type: ElementType
    id: int = field(default_factory=next_element_id)
    position: Point = field(default_factory=lambda: Point(0.0, 0.0))
    size: Size = field(default_factory=Size)
    properties: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate property keys against the type's schema and fill in defaults.

        Raises:
            UnknownElementTypeError: If the type is not a known element type.
            UnknownPropertyError: If a property is not declared by the type's schema.
        """
        try:
            object.__setattr__(self, "element_type", ElementType(self.element_type))
        except ValueError:
            raise UnknownElementTypeError(self.element_type) from None
        properties = default_properties(self.element_type)
        for name, value in dict(self.properties).items():
            if name not in properties:
                raise UnknownPropertyError(name, self.element_type.value)
            properties[name] = value
        self.properties = properties

    def __setattr__(self, name: str, value: Any) -> None:
        """Reject reassignment of the element type after creation."""
        if name == "element_type" and "element_type" in self.__dict__:
            msg = "element_type is immutable after creation"
            raise AttributeError(msg)
        super().__setattr__(name, value)


def create_element(element_type: ElementType | str, x: float, y: float) -> Element:
    """Create a new element with schema defaults.

    Registration on a canvas is the caller's responsibility.

    Args:
        element_type: The element type, as an ``ElementType`` or its value.
        x: Drop X-coordinate in canvas-local space.
        y: Drop Y-coordinate in canvas-local space.

    Returns:
        The newly created element.

    Raises:
        UnknownElementTypeError: If the type is not a known element type.
    """
    return Element(element_type=element_type, position=Point(x, y))


@dataclass
class Canvas:
    """The in-memory element collection for one editing session.

    Elements keep insertion order, which is also their paint order.

    Attributes:
        name: Display name for the canvas.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        created_at: Timestamp when the canvas was created.
    """

    name: str = "Untitled Canvas"
    width: float = 800
    height: float = 600
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    _elements: dict[int, Element] = field(default_factory=dict, repr=False)

    @property
    def elements(self) -> list[Element]:
        """Elements on the canvas in insertion order."""
        return list(self._elements.values())

    def add(self, element: Element) -> Element:
        """Register an element on the canvas.

        Args:
            element: The element to add.

        Returns:
            The added element.
        """
        if element.id in self._elements:
            msg = f"Element with ID {element.id} is already on the canvas"
            raise ValueError(msg)
        self._elements[element.id] = element
        return element

    def get(self, element_id: int) -> Element:
        """Get an element by ID.

        Raises:
            ElementNotFoundError: If the element is not on the canvas.
        """
        try:
            return self._elements[element_id]
        except KeyError:
            raise ElementNotFoundError(element_id) from None

    def remove(self, element_id: int) -> Element:
        """Remove an element from the canvas.

        Raises:
            ElementNotFoundError: If the element is not on the canvas.
        """
        try:
            return self._elements.pop(element_id)
        except KeyError:
            raise ElementNotFoundError(element_id) from None

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._elements.values()))

    def __len__(self) -> int:
        return len(self._elements)
