"""Observer pattern: weather displays notified of new measurements."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod


def _fmt(value: float) -> str:
    return f"{value:g}"


class Observer(ABC):
    """Something that wants to hear about changes in a subject."""

    @abstractmethod
    def update(self) -> None:
        """React to a change in the observed subject."""


class WeatherData:
    """Holds the latest weather measurements and notifies its observers."""

    def __init__(self) -> None:
        self._observers: dict[Observer, None] = {}
        self._temperature = 0.0
        self._humidity = 0.0
        self._pressure = 0.0
        self._wind_speed = 0.0

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def humidity(self) -> float:
        return self._humidity

    @property
    def pressure(self) -> float:
        return self._pressure

    @property
    def wind_speed(self) -> float:
        return self._wind_speed

    def add_observer(self, observer: Observer) -> None:
        self._observers[observer] = None

    def remove_observer(self, observer: Observer) -> None:
        self._observers.pop(observer, None)

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update()

    def set_measurements(
        self, temperature: float, humidity: float, pressure: float, wind_speed: float
    ) -> None:
        self._temperature = temperature
        self._humidity = humidity
        self._pressure = pressure
        self._wind_speed = wind_speed
        self.notify_observers()


class Display(Observer):
    """An observer of one WeatherData that redraws itself on every update."""

    def __init__(self, weather_data: WeatherData) -> None:
        self.weather_data = weather_data
        weather_data.add_observer(self)

    def update(self) -> None:
        self.display()

    @abstractmethod
    def display(self) -> str:
        """Render the display, print it and return the text."""

    @staticmethod
    def _show(lines: list[str]) -> str:
        text = "\n".join(lines)
        print(text)
        print()
        return text


class CurrentConditionsDisplay(Display):
    def display(self) -> str:
        data = self.weather_data
        return self._show(
            [
                "--- Current Conditions Display ---",
                f"--- TEMP: {_fmt(data.temperature)}",
                f"--- HUMI: {_fmt(data.humidity)}",
                f"--- PRES: {_fmt(data.pressure)}",
            ]
        )


class WeatherStatsDisplay(Display):
    """Keeps running minimum, maximum and average temperature."""

    def __init__(self, weather_data: WeatherData) -> None:
        self.total_temp = 0.0
        self.readings = 0
        self.min_temp = math.inf
        self.max_temp = -math.inf
        super().__init__(weather_data)

    @property
    def average(self) -> float:
        return self.total_temp / self.readings if self.readings else math.nan

    def display(self) -> str:
        temp = self.weather_data.temperature
        self.min_temp = min(self.min_temp, temp)
        self.max_temp = max(self.max_temp, temp)
        self.total_temp += temp
        self.readings += 1
        return self._show(
            [
                "--- Weather Stats ---",
                f"--- Avg Temp: {_fmt(self.average)}",
                f"--- Min Temp: {_fmt(self.min_temp)}",
                f"--- Max Temp: {_fmt(self.max_temp)}",
            ]
        )


class ForecastDisplay(Display):
    def display(self) -> str:
        data = self.weather_data
        tomorrow = data.temperature + (2 if data.humidity > 5 else -2)
        return self._show(
            ["--- Simple Forecast  ---", f"--- Temp tomorrow: {_fmt(tomorrow)}"]
        )


class HeatIndexDisplay(Display):
    def display(self) -> str:
        data = self.weather_data
        index = data.temperature * data.humidity * data.pressure
        return self._show(["--- DisplayHeatIndex  ---", f"--- Fake Heat Index: {_fmt(index)}"])


class WindSpeedDisplay(Display):
    def display(self) -> str:
        return self._show(
            ["~~~ Wind Speed  ~~~", f"~~~ Value: {_fmt(self.weather_data.wind_speed)}"]
        )