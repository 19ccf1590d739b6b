"""
Factory and abstract factory implementations for platform UI widgets.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Type, Union
from utils.logging_config import get_logger
from utils.exceptions import UnsupportedVariantError

logger = get_logger(__name__)


class Platform(Enum):
    """Closed set of UI platforms the factories can target."""

    IOS = 'ios'
    ANDROID = 'android'

    @classmethod
    def parse(cls, value: Union['Platform', str]) -> 'Platform':
        """Resolve a platform or its tag (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedVariantError(
            f"Unsupported platform: {value!r}",
            details={'available_types': [platform.value for platform in cls]}
        )


PlatformLike = Union[Platform, str]


# Products

@dataclass(frozen=True)
class Button(ABC):
    """A clickable widget tagged with the platform it belongs to."""

    label: str = ""
    platform: ClassVar[Platform]

    @abstractmethod
    def render(self) -> str:
        """Describe how the button looks on its platform."""


@dataclass(frozen=True)
class Checkbox(ABC):
    """A two-state widget tagged with the platform it belongs to."""

    label: str = ""
    checked: bool = False
    platform: ClassVar[Platform]

    @abstractmethod
    def render(self) -> str:
        """Describe how the checkbox looks on its platform."""

    def toggle(self) -> 'Checkbox':
        """Return a copy with the opposite state."""
        return replace(self, checked=not self.checked)


@dataclass(frozen=True)
class IOSButton(Button):
    platform: ClassVar[Platform] = Platform.IOS

    def render(self) -> str:
        return f"( {self.label} )"


@dataclass(frozen=True)
class AndroidButton(Button):
    platform: ClassVar[Platform] = Platform.ANDROID

    def render(self) -> str:
        return f"[ {self.label.upper()} ]"


@dataclass(frozen=True)
class IOSCheckbox(Checkbox):
    platform: ClassVar[Platform] = Platform.IOS

    def render(self) -> str:
        mark = '●' if self.checked else '○'
        return f"{self.label} {mark}"


@dataclass(frozen=True)
class AndroidCheckbox(Checkbox):
    platform: ClassVar[Platform] = Platform.ANDROID

    def render(self) -> str:
        mark = 'x' if self.checked else ' '
        return f"[{mark}] {self.label}"


def _require_exhaustive(mapping: Mapping[Platform, Any], name: str):
    """Fail at import time when a platform has no variant."""
    missing = [platform.value for platform in Platform if platform not in mapping]
    if missing:
        raise UnsupportedVariantError(
            f"{name} has no variant for: {', '.join(missing)}",
            details={'missing': missing}
        )


_BUTTON_VARIANTS: Dict[Platform, Type[Button]] = {
    Platform.IOS: IOSButton,
    Platform.ANDROID: AndroidButton,
}
_require_exhaustive(_BUTTON_VARIANTS, 'create_button')


def create_button(platform: PlatformLike, label: str = "") -> Button:
    """
    Factory method: build the button variant for ``platform``.

    Args:
        platform: Platform or its tag
        label: Button caption

    Raises:
        UnsupportedVariantError: for an unknown platform
    """
    button_cls = _BUTTON_VARIANTS[Platform.parse(platform)]
    logger.debug(f"Creating {button_cls.__name__}")
    return button_cls(label=label)


# Registry

class Factory(ABC):
    """Abstract registry-backed factory base class."""

    _registry: Dict[str, Type] = {}

    @classmethod
    def register(cls, name: str, implementation: Type):
        """Register an implementation with a name."""
        cls._registry[name] = implementation
        logger.debug(f"Registered {name} in {cls.__name__}")

    @classmethod
    def create(cls, name: str, **kwargs) -> Any:
        """Create an instance by name."""
        if name not in cls._registry:
            raise UnsupportedVariantError(
                f"Unknown type: {name}",
                details={'available_types': cls.list_available()}
            )

        implementation = cls._registry[name]
        return implementation(**kwargs)

    @classmethod
    def list_available(cls) -> list:
        """List all registered implementations."""
        return sorted(cls._registry.keys())


class UIFactoryRegistry(Factory):
    """Registry of widget families keyed by platform tag."""
    _registry: Dict[str, Type] = {}


def register_ui_factory(platform: Platform):
    """Decorator for registering a widget family for a platform."""
    def decorator(cls):
        UIFactoryRegistry.register(platform.value, cls)
        return cls
    return decorator


# Abstract factory

class UIFactory(ABC):
    """A family of widgets that are guaranteed to match each other."""

    platform: ClassVar[Platform]

    @abstractmethod
    def create_button(self, label: str = "") -> Button:
        """Create a button of this family."""
        pass

    @abstractmethod
    def create_checkbox(self, label: str = "", checked: bool = False) -> Checkbox:
        """Create a checkbox of this family."""
        pass


@register_ui_factory(Platform.IOS)
class IOSUIFactory(UIFactory):
    platform = Platform.IOS

    def create_button(self, label: str = "") -> Button:
        return IOSButton(label=label)

    def create_checkbox(self, label: str = "", checked: bool = False) -> Checkbox:
        return IOSCheckbox(label=label, checked=checked)


@register_ui_factory(Platform.ANDROID)
class AndroidUIFactory(UIFactory):
    platform = Platform.ANDROID

    def create_button(self, label: str = "") -> Button:
        return AndroidButton(label=label)

    def create_checkbox(self, label: str = "", checked: bool = False) -> Checkbox:
        return AndroidCheckbox(label=label, checked=checked)


_require_exhaustive(
    {Platform(name): family for name, family in UIFactoryRegistry._registry.items()},
    'UIFactoryRegistry'
)


def get_ui_factory(platform: PlatformLike) -> UIFactory:
    """
    Return the widget family for ``platform``.

    Raises:
        UnsupportedVariantError: for an unknown platform
    """
    resolved = Platform.parse(platform)
    factory = UIFactoryRegistry.create(resolved.value)
    logger.debug(f"Selected {factory.__class__.__name__} for {resolved.value}")
    return factory
