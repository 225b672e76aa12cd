"""Factory Method: pick the concrete shape from a ShapeType discriminator.

Every ShapeType member maps to exactly one Shape subclass.  There is no
default branch; a member without a class fails the import of this
module rather than a later call.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Type, Union

from creational_patterns.patterns.enums import parse_enum

if TYPE_CHECKING:
    from creational_patterns.config import AppConfig

logger = logging.getLogger(__name__)


class ShapeType(str, Enum):
    SQUARE = "Square"
    CIRCLE = "Circle"
    TRIANGLE = "Triangle"


class Shape:
    """Product base.  draw() is shared by every shape."""

    shape_type: ShapeType

    def draw(self) -> str:
        return f"{self.shape_type.value} is drawing"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Square(Shape):
    shape_type = ShapeType.SQUARE


class Circle(Shape):
    shape_type = ShapeType.CIRCLE


class Triangle(Shape):
    shape_type = ShapeType.TRIANGLE


_SHAPES: Dict[ShapeType, Type[Shape]] = {
    ShapeType.SQUARE: Square,
    ShapeType.CIRCLE: Circle,
    ShapeType.TRIANGLE: Triangle,
}

_missing = set(ShapeType) - set(_SHAPES)
if _missing:
    raise RuntimeError(f"No shape class for: {sorted(m.name for m in _missing)}")


def parse_shape_type(value: Union[ShapeType, str]) -> ShapeType:
    """Accept a ShapeType, its display name, or its member name (any case)."""
    return parse_enum(ShapeType, value)


class ShapeFactory:
    """Concrete factory."""

    @staticmethod
    def create_shape(shape_type: Union[ShapeType, str]) -> Shape:
        kind = parse_shape_type(shape_type)
        shape = _SHAPES[kind]()
        logger.debug("Created %r for %s", shape, kind.name)
        return shape


def run_demo(config: AppConfig) -> List[str]:
    shapes = [ShapeFactory.create_shape(name) for name in config.demos.factory_method.shapes]
    return [", ".join(shape.draw() for shape in shapes)]
