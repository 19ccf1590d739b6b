"""
Bridge pattern: remotes (abstraction) decoupled from devices (implementation).
"""
from abc import ABC, abstractmethod
from utils.logging_config import get_logger

logger = get_logger(__name__)

MIN_VOLUME = 0
MAX_VOLUME = 100
MIN_CHANNEL = 1


class Device(ABC):
    """Capability every controllable device implements."""

    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def enable(self):
        pass

    @abstractmethod
    def disable(self):
        pass

    @abstractmethod
    def get_volume(self) -> int:
        pass

    @abstractmethod
    def set_volume(self, percent: int):
        pass

    @abstractmethod
    def get_channel(self) -> int:
        pass

    @abstractmethod
    def set_channel(self, channel: int):
        pass


class _StatefulDevice(Device):
    """Shared state keeping for the concrete devices."""

    def __init__(self, volume: int = 30, channel: int = MIN_CHANNEL):
        self._on = False
        self._volume = self._clamp_volume(volume)
        self._channel = max(MIN_CHANNEL, channel)
        self.logger = get_logger(self.__class__.__name__)

    @staticmethod
    def _clamp_volume(percent: int) -> int:
        return max(MIN_VOLUME, min(MAX_VOLUME, percent))

    def is_enabled(self) -> bool:
        return self._on

    def enable(self):
        self._on = True
        self.logger.debug(f"{self.__class__.__name__} turned on")

    def disable(self):
        self._on = False
        self.logger.debug(f"{self.__class__.__name__} turned off")

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, percent: int):
        self._volume = self._clamp_volume(percent)

    def get_channel(self) -> int:
        return self._channel

    def set_channel(self, channel: int):
        self._channel = max(MIN_CHANNEL, channel)

    def __repr__(self) -> str:
        state = 'on' if self._on else 'off'
        return f"{self.__class__.__name__}({state}, volume={self._volume}, channel={self._channel})"


class Tv(_StatefulDevice):
    pass


class Radio(_StatefulDevice):
    def __init__(self, volume: int = 50, channel: int = 88):
        super().__init__(volume=volume, channel=channel)


class RemoteControl:
    """
    Remote control abstraction.

    Holds a reference to a device it does not own; every action goes through
    the :class:`Device` capability.
    """

    def __init__(self, device: Device):
        self._device = device
        self.logger = get_logger(self.__class__.__name__)

    @property
    def device(self) -> Device:
        return self._device

    def toggle_power(self):
        if self._device.is_enabled():
            self._device.disable()
        else:
            self._device.enable()
        self.logger.debug(f"Toggled power on {self._device!r}")

    def volume_down(self, step: int = 10):
        self._device.set_volume(self._device.get_volume() - step)

    def volume_up(self, step: int = 10):
        self._device.set_volume(self._device.get_volume() + step)

    def channel_down(self):
        self._device.set_channel(self._device.get_channel() - 1)

    def channel_up(self):
        self._device.set_channel(self._device.get_channel() + 1)


class AdvancedRemoteControl(RemoteControl):
    """Remote with a mute button."""

    def mute(self):
        self._device.set_volume(MIN_VOLUME)
        self.logger.debug(f"Muted {self._device!r}")
