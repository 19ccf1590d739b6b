"""
Prototype pattern: shapes that copy themselves.

Common attributes live in an embedded :class:`ShapeAttributes` record instead
of a base-class constructor. A variant copies that record first and then its
own fields, so a clone never shares mutable state with its source.
"""
from __future__ import annotations
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional
from utils.logging_config import get_logger
from utils.exceptions import UninitializedAttributeError

logger = get_logger(__name__)


@dataclass
class ShapeAttributes:
    """Attributes every shape carries."""

    x: Optional[float] = None
    y: Optional[float] = None
    color: Optional[str] = None

    def copy(self) -> ShapeAttributes:
        return replace(self)


class Shape(ABC):
    """Capability shared by every clonable shape."""

    common: ShapeAttributes

    @property
    def x(self) -> Optional[float]:
        return self.common.x

    @x.setter
    def x(self, value: Optional[float]):
        self.common.x = value

    @property
    def y(self) -> Optional[float]:
        return self.common.y

    @y.setter
    def y(self, value: Optional[float]):
        self.common.y = value

    @property
    def color(self) -> Optional[str]:
        return self.common.color

    @color.setter
    def color(self, value: Optional[str]):
        self.common.color = value

    @abstractmethod
    def clone(self) -> Shape:
        """Return an independent copy of this shape."""
        pass

    @abstractmethod
    def area(self) -> float:
        pass

    def _require(self, name: str, value: Optional[float]) -> float:
        if value is None:
            raise UninitializedAttributeError(
                f"{self.__class__.__name__}.{name} has not been set",
                details={'shape': self.__class__.__name__, 'attribute': name}
            )
        return value


@dataclass
class Rectangle(Shape):
    width: Optional[float] = None
    height: Optional[float] = None
    common: ShapeAttributes = field(default_factory=ShapeAttributes)

    @classmethod
    def from_source(cls, source: Rectangle) -> Rectangle:
        """Copy constructor: common attributes first, then the rectangle's own."""
        return cls(common=source.common.copy(), width=source.width, height=source.height)

    def clone(self) -> Rectangle:
        logger.debug(f"Cloning {self!r}")
        return Rectangle.from_source(self)

    def area(self) -> float:
        return self._require('width', self.width) * self._require('height', self.height)


@dataclass
class Circle(Shape):
    radius: Optional[float] = None
    common: ShapeAttributes = field(default_factory=ShapeAttributes)

    @classmethod
    def from_source(cls, source: Circle) -> Circle:
        """Copy constructor: common attributes first, then the circle's own."""
        return cls(common=source.common.copy(), radius=source.radius)

    def clone(self) -> Circle:
        logger.debug(f"Cloning {self!r}")
        return Circle.from_source(self)

    def area(self) -> float:
        return math.pi * self._require('radius', self.radius) ** 2


def clone_all(shapes: Iterable[Shape]) -> List[Shape]:
    """Copy a mixed collection without knowing each shape's concrete class."""
    return [shape.clone() for shape in shapes]
