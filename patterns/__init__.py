"""
Creational and structural design patterns.
"""
from .factory import (
    Platform,
    Button,
    Checkbox,
    IOSButton,
    AndroidButton,
    IOSCheckbox,
    AndroidCheckbox,
    create_button,
    Factory,
    UIFactoryRegistry,
    register_ui_factory,
    UIFactory,
    IOSUIFactory,
    AndroidUIFactory,
    get_ui_factory
)
from .builder import (
    Builder,
    Burger,
    BurgerBuilder
)
from .prototype import (
    ShapeAttributes,
    Shape,
    Rectangle,
    Circle,
    clone_all
)
from .singleton import (
    Singleton,
    SingletonMeta,
    Database
)
from .adapter import (
    RoundHole,
    RoundPeg,
    SquarePeg,
    SquarePegAdapter
)
from .bridge import (
    Device,
    Tv,
    Radio,
    RemoteControl,
    AdvancedRemoteControl
)
from .composite import (
    Graphic,
    Dot,
    CompoundGraphic
)
from .composite import Circle as CircleGraphic
from .proxy import (
    ThirdPartyYouTubeLib,
    ThirdPartyYouTubeClass,
    CachedYouTubeClass,
    YouTubeManager
)

__all__ = [
    'Platform',
    'Button',
    'Checkbox',
    'IOSButton',
    'AndroidButton',
    'IOSCheckbox',
    'AndroidCheckbox',
    'create_button',
    'Factory',
    'UIFactoryRegistry',
    'register_ui_factory',
    'UIFactory',
    'IOSUIFactory',
    'AndroidUIFactory',
    'get_ui_factory',
    'Builder',
    'Burger',
    'BurgerBuilder',
    'ShapeAttributes',
    'Shape',
    'Rectangle',
    'Circle',
    'clone_all',
    'Singleton',
    'SingletonMeta',
    'Database',
    'RoundHole',
    'RoundPeg',
    'SquarePeg',
    'SquarePegAdapter',
    'Device',
    'Tv',
    'Radio',
    'RemoteControl',
    'AdvancedRemoteControl',
    'Graphic',
    'Dot',
    'CircleGraphic',
    'CompoundGraphic',
    'ThirdPartyYouTubeLib',
    'ThirdPartyYouTubeClass',
    'CachedYouTubeClass',
    'YouTubeManager',
]
