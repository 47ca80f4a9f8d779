"""A network connection whose state decides what each operation does."""

from __future__ import annotations

from enum import Enum


class NetworkState(Enum):
    """The states a network connection moves between."""

    OPEN = "open"
    CLOSE = "close"
    CONNECT = "connect"

    def after_operation1(self) -> NetworkState:
        return _OPERATION1[self]

    def after_operation2(self) -> NetworkState:
        return _OPERATION2[self]

    def after_operation3(self) -> NetworkState:
        return self


_OPERATION1 = {
    NetworkState.OPEN: NetworkState.CLOSE,
    NetworkState.CLOSE: NetworkState.CONNECT,
    NetworkState.CONNECT: NetworkState.OPEN,
}

_OPERATION2 = {
    NetworkState.OPEN: NetworkState.CONNECT,
    NetworkState.CLOSE: NetworkState.OPEN,
    NetworkState.CONNECT: NetworkState.CLOSE,
}


class NetworkProcessor:
    """Runs operations and lets the current state choose the next one."""

    def __init__(self, state: NetworkState = NetworkState.OPEN) -> None:
        self.state = NetworkState(state)

    def operation1(self) -> NetworkState:
        self.state = self.state.after_operation1()
        return self.state

    def operation2(self) -> NetworkState:
        self.state = self.state.after_operation2()
        return self.state

    def operation3(self) -> NetworkState:
        self.state = self.state.after_operation3()
        return self.state