"""
Composite pattern: graphics arranged in a tree with uniform operations.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple
from utils.logging_config import get_logger
from utils.exceptions import CompositionError, CyclicCompositionError

logger = get_logger(__name__)


class Graphic(ABC):
    """Component interface shared by leaves and compounds."""

    _parent: Optional[CompoundGraphic] = None

    @property
    def parent(self) -> Optional[CompoundGraphic]:
        return self._parent

    def ancestors(self) -> Iterator[CompoundGraphic]:
        """Yield parents from the closest up to the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    @abstractmethod
    def move(self, dx: float, dy: float):
        pass

    @abstractmethod
    def draw(self) -> List[str]:
        """Return render records in draw order."""
        pass


class Dot(Graphic):
    def __init__(self, x: float = 0, y: float = 0):
        self.x = x
        self.y = y

    def move(self, dx: float, dy: float):
        self.x += dx
        self.y += dy

    def draw(self) -> List[str]:
        return [f"Dot({self.x}, {self.y})"]

    def __repr__(self) -> str:
        return f"Dot(x={self.x}, y={self.y})"


class Circle(Dot):
    def __init__(self, x: float = 0, y: float = 0, radius: float = 1):
        super().__init__(x, y)
        self.radius = radius

    def draw(self) -> List[str]:
        return [f"Circle({self.x}, {self.y}, r={self.radius})"]

    def __repr__(self) -> str:
        return f"Circle(x={self.x}, y={self.y}, radius={self.radius})"


class CompoundGraphic(Graphic):
    """
    A graphic made of other graphics.

    Children are kept in insertion order and owned by exactly one compound.
    ``move`` and ``draw`` forward to every child in that order; on an empty
    compound they do nothing.
    """

    def __init__(self, *children: Graphic):
        self._children: List[Graphic] = []
        try:
            for child in children:
                self.add(child)
        except CompositionError:
            # Release the children already taken so they can be added elsewhere
            for child in self._children:
                child._parent = None
            self._children.clear()
            raise

    @property
    def children(self) -> Tuple[Graphic, ...]:
        return tuple(self._children)

    def __iter__(self) -> Iterator[Graphic]:
        return iter(tuple(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def add(self, child: Graphic):
        """
        Append ``child``.

        Raises:
            CyclicCompositionError: if ``child`` is this compound or one of its ancestors
            CompositionError: if ``child`` already belongs to a compound
        """
        if child is self or any(child is ancestor for ancestor in self.ancestors()):
            raise CyclicCompositionError(
                f"Adding {child!r} would make the graphic contain itself",
                details={'child': repr(child), 'parent': repr(self)}
            )
        if child._parent is not None:
            raise CompositionError(
                f"{child!r} already belongs to {child._parent!r}; remove it first",
                details={'child': repr(child), 'current_parent': repr(child._parent)}
            )

        self._children.append(child)
        child._parent = self
        logger.debug(f"Added {child!r} to compound with {len(self._children)} children")

    def remove(self, child: Graphic):
        """Detach ``child`` so it can be added elsewhere."""
        if child._parent is not self:
            raise CompositionError(
                f"{child!r} is not a child of this compound",
                details={'child': repr(child)}
            )

        self._children.remove(child)
        child._parent = None
        logger.debug(f"Removed {child!r}")

    def leaves(self) -> Iterator[Graphic]:
        """Yield every non-compound graphic, depth first."""
        for child in self._children:
            if isinstance(child, CompoundGraphic):
                yield from child.leaves()
            else:
                yield child

    def move(self, dx: float, dy: float):
        for child in self._children:
            child.move(dx, dy)

    def draw(self) -> List[str]:
        records: List[str] = []
        for child in self._children:
            records.extend(child.draw())
        return records

    def __repr__(self) -> str:
        return f"CompoundGraphic({len(self._children)} children)"
