"""Subjects that notify their observers of new data or progress."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Observer(ABC):
    """Receives weather measurements."""

    @abstractmethod
    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        """Take new measurements."""


class DisplayElement(ABC):
    """Something that can show itself."""

    @abstractmethod
    def display(self):
        """Show the current state."""


class Subject(ABC):
    """Keeps observers and tells them of changes."""

    @abstractmethod
    def register_observer(self, observer: Observer) -> None:
        """Start notifying an observer."""

    @abstractmethod
    def remove_observer(self, observer: Observer) -> None:
        """Stop notifying an observer."""

    @abstractmethod
    def notify_observers(self) -> None:
        """Send the current state to every observer."""


class WeatherData(Subject):
    """Weather measurements that observers follow."""

    def __init__(self) -> None:
        self._observers: dict[Observer, None] = {}
        self.temperature = 0.0
        self.humidity = 0.0
        self.pressure = 0.0

    def register_observer(self, observer: Observer) -> None:
        self._observers[observer] = None

    def remove_observer(self, observer: Observer) -> None:
        self._observers.pop(observer, None)

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self.temperature, self.humidity, self.pressure)

    def measurements_changed(self) -> None:
        self.notify_observers()

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.pressure = pressure
        self.measurements_changed()


class CurrentConditionsDisplay(Observer, DisplayElement):
    """Shows the latest temperature and humidity."""

    def __init__(self, weather_data: Subject) -> None:
        self.temperature = 0.0
        self.humidity = 0.0
        self.weather_data = weather_data

    def register(self) -> None:
        self.weather_data.register_observer(self)

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.display()

    def display(self) -> str:
        text = (
            f"Current condidions: {self.temperature:g}F degrees and "
            f"{self.humidity:g}% humidity"
        )
        print(text)
        return text


class ProgressListener(ABC):
    """Told how far a file split has got."""

    @abstractmethod
    def do_progress(self, value: float) -> None:
        """Receive progress as a fraction from 0 to 1."""


class FileSplitter:
    """Splits a file into parts and reports progress to its listeners."""

    def __init__(self, file_path: str, file_number: int) -> None:
        self.file_path = file_path
        self.file_number = file_number
        self._listeners: list[ProgressListener] = []

    def split(self) -> list[float]:
        """Write each part in turn and return the progress values sent."""
        values = []
        for part in range(1, self.file_number + 1):
            value = part / self.file_number
            self._on_progress(value)
            values.append(value)
        return values

    def add_progress(self, listener: ProgressListener) -> None:
        self._listeners.append(listener)

    def remove_progress(self, listener: ProgressListener) -> None:
        self._listeners = [item for item in self._listeners if item is not listener]

    def _on_progress(self, value: float) -> None:
        for listener in self._listeners:
            listener.do_progress(value)


def weather_station() -> CurrentConditionsDisplay:
    """Feed three sets of measurements to a display and return it."""
    weather = WeatherData()
    current = CurrentConditionsDisplay(weather)
    current.register()
    weather.set_measurements(80, 65, 30.4)
    weather.set_measurements(82, 70, 29.2)
    weather.set_measurements(78, 90, 29.2)
    weather.remove_observer(current)
    return current


def main(argv: list[str] | None = None) -> int:
    """Run the weather station."""
    if argv is None:
        argv = sys.argv[1:]
    weather_station()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())