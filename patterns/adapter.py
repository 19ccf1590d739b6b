"""
Adapter pattern: fitting square pegs into round holes.
"""
import math
from utils.logging_config import get_logger

logger = get_logger(__name__)


class RoundPeg:
    """A peg described by its radius."""

    def __init__(self, radius: float):
        self._radius = radius

    @property
    def radius(self) -> float:
        return self._radius

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(radius={self.radius})"


class RoundHole:
    """A hole that accepts any round peg no wider than itself."""

    def __init__(self, radius: float):
        self.radius = radius

    def fits(self, peg: RoundPeg) -> bool:
        """Return True when ``peg`` fits through this hole."""
        fits = self.radius >= peg.radius
        logger.debug(f"{peg!r} {'fits' if fits else 'does not fit'} hole of radius {self.radius}")
        return fits


class SquarePeg:
    """A peg described by its side width. Not compatible with round holes."""

    def __init__(self, width: float):
        self.width = width

    def __repr__(self) -> str:
        return f"SquarePeg(width={self.width})"


class SquarePegAdapter(RoundPeg):
    """
    Presents a square peg as a round one.

    The radius is the smallest circle that contains the square, derived from
    the wrapped peg's current width on every access.
    """

    def __init__(self, peg: SquarePeg):
        self._peg = peg

    @property
    def peg(self) -> SquarePeg:
        return self._peg

    @property
    def radius(self) -> float:
        return self._peg.width * math.sqrt(2) / 2

    def __repr__(self) -> str:
        return f"SquarePegAdapter({self._peg!r})"
