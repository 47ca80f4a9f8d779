import pytest

from patterngallery.observer import (
    CurrentConditionsDisplay,
    FileSplitter,
    Observer,
    ProgressListener,
    Subject,
    WeatherData,
    main,
    weather_station,
)


class RecordingObserver(Observer):
    def __init__(self):
        self.calls = []

    def update(self, temperature, humidity, pressure):
        self.calls.append((temperature, humidity, pressure))


class RecordingListener(ProgressListener):
    def __init__(self):
        self.values = []

    def do_progress(self, value):
        self.values.append(value)


def test_display_follows_measurements(capsys):
    weather = WeatherData()
    display = CurrentConditionsDisplay(weather)
    display.register()
    weather.set_measurements(80, 65, 30.4)
    assert (display.temperature, display.humidity) == (80, 65)
    assert capsys.readouterr().out == "Current condidions: 80F degrees and 65% humidity\n"


def test_observer_gets_all_values():
    weather = WeatherData()
    observer = RecordingObserver()
    weather.register_observer(observer)
    weather.set_measurements(1.5, 2.5, 3.5)
    assert observer.calls == [(1.5, 2.5, 3.5)]


def test_register_twice_notifies_once():
    weather = WeatherData()
    observer = RecordingObserver()
    weather.register_observer(observer)
    weather.register_observer(observer)
    weather.set_measurements(1, 2, 3)
    assert len(observer.calls) == 1


def test_removed_observer_not_notified():
    weather = WeatherData()
    observer = RecordingObserver()
    weather.register_observer(observer)
    weather.remove_observer(observer)
    weather.remove_observer(observer)
    weather.set_measurements(1, 2, 3)
    assert observer.calls == []


def test_weather_station_keeps_last_measurement(capsys):
    display = weather_station()
    assert (display.temperature, display.humidity) == (78, 90)
    assert len(capsys.readouterr().out.splitlines()) == 3


def test_split_reports_progress():
    splitter = FileSplitter("big.bin", 4)
    listener = RecordingListener()
    splitter.add_progress(listener)
    values = splitter.split()
    assert listener.values == values
    assert len(values) == 4
    assert values == sorted(values)
    assert values[-1] == 1.0


def test_split_with_several_listeners():
    splitter = FileSplitter("big.bin", 3)
    first, second = RecordingListener(), RecordingListener()
    splitter.add_progress(first)
    splitter.add_progress(second)
    splitter.split()
    assert first.values == second.values
    assert len(first.values) == 3


def test_remove_progress_stops_updates():
    splitter = FileSplitter("big.bin", 2)
    listener = RecordingListener()
    splitter.add_progress(listener)
    splitter.remove_progress(listener)
    assert len(splitter.split()) == 2
    assert listener.values == []


def test_split_zero_parts():
    assert FileSplitter("big.bin", 0).split() == []


def test_interfaces_are_abstract():
    with pytest.raises(TypeError):
        Subject()
    with pytest.raises(TypeError):
        ProgressListener()


def test_main(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.count("Current condidions") == 3