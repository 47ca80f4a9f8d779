"""Messagers whose features and platform vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MessagerImp(ABC):
    """The platform side: low-level actions a messager relies on."""

    platform: str = ""

    def __init__(self) -> None:
        if not self.platform:
            raise TypeError(f"{type(self).__name__} names no platform")
        self.log: list[str] = []

    def _act(self, action: str) -> str:
        entry = f"{self.platform} {action}"
        self.log.append(entry)
        return entry

    def play_sound(self) -> str:
        return self._act("play sound")

    def draw_shape(self) -> str:
        return self._act("draw shape")

    def write_text(self) -> str:
        return self._act("write text")

    def connect(self) -> str:
        return self._act("connect")


class PCMessagerImp(MessagerImp):
    platform = "PC"


class MobileMessagerImp(MessagerImp):
    platform = "Mobile"


class Messager(ABC):
    """The feature side: what a user can do, carried out on a platform."""

    def __init__(self, imp: MessagerImp) -> None:
        self.imp = imp

    @abstractmethod
    def login(self, username: str, password: str) -> list[str]:
        """Log in and return the platform actions taken."""

    @abstractmethod
    def send_message(self, message: str) -> list[str]:
        """Send text and return the platform actions taken."""

    @abstractmethod
    def send_picture(self, image) -> list[str]:
        """Send a picture and return the platform actions taken."""


class MessagerLite(Messager):
    """Basic features, no sounds."""

    def login(self, username: str, password: str) -> list[str]:
        return [self.imp.connect()]

    def send_message(self, message: str) -> list[str]:
        return [self.imp.write_text()]

    def send_picture(self, image) -> list[str]:
        return [self.imp.draw_shape()]


class MessagerPerfect(Messager):
    """Full features: every action is announced with a sound."""

    def login(self, username: str, password: str) -> list[str]:
        return [self.imp.play_sound(), self.imp.connect()]

    def send_message(self, message: str) -> list[str]:
        return [self.imp.play_sound(), self.imp.write_text()]

    def send_picture(self, image) -> list[str]:
        return [self.imp.play_sound(), self.imp.draw_shape()]