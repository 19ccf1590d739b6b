"""
Builder pattern for step-by-step burger construction.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple
from utils.logging_config import get_logger
from utils.exceptions import AlreadyBuiltError

logger = get_logger(__name__)


class Builder(ABC):
    """Abstract builder base class."""

    @abstractmethod
    def reset(self):
        """Reset the builder."""
        pass

    @abstractmethod
    def build(self) -> Any:
        """Build and return the final product."""
        pass


@dataclass(frozen=True)
class Burger:
    """A finished burger. Every part is optional and unset by default."""

    buns: Optional[str] = None
    patty: Optional[str] = None
    sauce: Optional[str] = None
    cheese: Optional[str] = None

    @property
    def ingredients(self) -> Tuple[str, ...]:
        """Set parts in stacking order."""
        return tuple(
            getattr(self, f.name) for f in fields(self)
            if getattr(self, f.name) is not None
        )


class BurgerBuilder(Builder):
    """
    Fluent builder for :class:`Burger`.

    Each setter returns the builder itself so calls can be chained. ``build()``
    finalizes the builder: building again, or setting a part afterwards,
    raises :class:`AlreadyBuiltError` until ``reset()`` is called.
    """

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)
        self.reset()

    def reset(self):
        """Discard all parts and make the builder usable again."""
        self._parts: Dict[str, Optional[str]] = {}
        self._product: Optional[Burger] = None
        return self

    @property
    def built(self) -> bool:
        return self._product is not None

    def _set(self, part: str, value: str):
        if self._product is not None:
            raise AlreadyBuiltError(
                f"Cannot set {part} on a builder that already built {self._product!r}",
                details={'part': part}
            )
        self._parts[part] = value
        self.logger.debug(f"Set {part}: {value}")
        return self

    def buns(self, buns: str):
        return self._set('buns', buns)

    def patty(self, patty: str):
        return self._set('patty', patty)

    def sauce(self, sauce: str):
        return self._set('sauce', sauce)

    def cheese(self, cheese: str):
        return self._set('cheese', cheese)

    def build(self) -> Burger:
        """Build and return the burger."""
        if self._product is not None:
            raise AlreadyBuiltError(
                "Builder was already finalized; call reset() to build another burger",
                details={'product': repr(self._product)}
            )

        self._product = Burger(**self._parts)
        self.logger.info(f"Built burger with {len(self._product.ingredients)} ingredients")
        return self._product
