import pytest

from patternpad.observer import (
    CurrentConditionsDisplay,
    Display,
    ForecastDisplay,
    HeatIndexDisplay,
    Observer,
    WeatherData,
    WeatherStatsDisplay,
    WindSpeedDisplay,
)


class CountingObserver(Observer):
    def __init__(self):
        self.calls = 0

    def update(self):
        self.calls += 1


def test_measurements_are_stored():
    data = WeatherData()
    data.set_measurements(10, 0.4, 2.0, 30)
    assert (data.temperature, data.humidity, data.pressure, data.wind_speed) == (10, 0.4, 2.0, 30)


def test_new_weather_data_starts_at_zero():
    data = WeatherData()
    assert (data.temperature, data.humidity, data.pressure, data.wind_speed) == (0, 0, 0, 0)


def test_observers_notified_on_each_measurement():
    data = WeatherData()
    observer = CountingObserver()
    data.add_observer(observer)
    data.set_measurements(1, 1, 1, 1)
    data.set_measurements(2, 2, 2, 2)
    assert observer.calls == 2


def test_observer_added_twice_is_notified_once():
    data = WeatherData()
    observer = CountingObserver()
    data.add_observer(observer)
    data.add_observer(observer)
    data.notify_observers()
    assert observer.calls == 1


def test_removed_observer_is_not_notified():
    data = WeatherData()
    kept, removed = CountingObserver(), CountingObserver()
    data.add_observer(kept)
    data.add_observer(removed)
    data.remove_observer(removed)
    data.remove_observer(CountingObserver())
    data.notify_observers()
    assert (kept.calls, removed.calls) == (1, 0)


def test_current_conditions_display(capsys):
    data = WeatherData()
    display = CurrentConditionsDisplay(data)
    data.set_measurements(10, 0.4, 2.0, 30)
    out = capsys.readouterr().out
    assert "--- Current Conditions Display ---" in out
    assert "--- TEMP: 10\n" in out
    assert "--- HUMI: 0.4\n" in out
    assert display.display().endswith("--- PRES: 2")


def test_weather_stats_tracks_extremes():
    data = WeatherData()
    stats = WeatherStatsDisplay(data)
    for temp in (10, 13, 12, 12):
        data.set_measurements(temp, 0.4, 2.0, 30)
    assert stats.min_temp == 10
    assert stats.max_temp == 13
    assert stats.readings == 4
    assert stats.min_temp <= stats.average <= stats.max_temp


def test_forecast_depends_on_humidity():
    data = WeatherData()
    forecast = ForecastDisplay(data)
    data.set_measurements(10, 6, 1, 1)
    assert forecast.display().endswith("--- Temp tomorrow: 12")


def test_heat_index_display():
    data = WeatherData()
    display = HeatIndexDisplay(data)
    data.set_measurements(2, 3, 4, 0)
    assert display.display() == "--- DisplayHeatIndex  ---\n--- Fake Heat Index: 24"


def test_wind_speed_display():
    data = WeatherData()
    display = WindSpeedDisplay(data)
    data.set_measurements(10, 0.4, 2.0, 30)
    assert display.display() == "~~~ Wind Speed  ~~~\n~~~ Value: 30"


def test_display_cannot_be_built_without_display_method():
    with pytest.raises(TypeError):
        Display(WeatherData())