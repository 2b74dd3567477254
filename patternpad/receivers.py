"""Household devices driven by remote-control commands."""

from __future__ import annotations

from enum import Enum


class GarageDoor:
    """A garage door with its own light."""

    def __init__(self) -> None:
        self.is_open = False
        self.is_moving = False
        self.light_is_on = False

    def up(self) -> None:
        print("Garage door : up")
        self.is_open = True
        self.is_moving = True

    def down(self) -> None:
        print("Garage door : down")
        self.is_open = False
        self.is_moving = True

    def stop(self) -> None:
        print("Garage door : stop")
        self.is_moving = False

    def light_on(self) -> None:
        print("Garage door : lightOn")
        self.light_is_on = True

    def light_off(self) -> None:
        print("GarageDoor : off")
        self.light_is_on = False


class CeilingLight:
    """A ceiling light that can be dimmed."""

    def __init__(self) -> None:
        self.is_on = False
        self.dimmed = False

    def on(self) -> None:
        print("CeilingLight : on")
        self.is_on = True
        self.dimmed = False

    def off(self) -> None:
        print("CeilingLight : off")
        self.is_on = False
        self.dimmed = False

    def dim(self) -> None:
        print("CeilingLight : dim")
        self.dimmed = True


class Speed(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    OFF = "off"


class CeilingFan:
    """A fan that remembers its current speed."""

    def __init__(self) -> None:
        self._speed = Speed.OFF

    @property
    def speed(self) -> Speed:
        print("CeilingFan : getSpeed")
        return self._speed

    def high(self) -> None:
        print("CeilingFan : high")
        self._speed = Speed.HIGH

    def medium(self) -> None:
        print("CeilingFan : medium")
        self._speed = Speed.MEDIUM

    def low(self) -> None:
        print("CeilingFan : low")
        self._speed = Speed.LOW

    def off(self) -> None:
        print("CeilingFan : off")
        self._speed = Speed.OFF

    def set_speed(self, speed: Speed) -> None:
        """Switch to the given speed through the matching control."""
        actions = {
            Speed.HIGH: self.high,
            Speed.MEDIUM: self.medium,
            Speed.LOW: self.low,
            Speed.OFF: self.off,
        }
        actions[Speed(speed)]()


class OutdoorLight:
    def __init__(self) -> None:
        self.is_on = False

    def on(self) -> None:
        print("OutdoorLight : on")
        self.is_on = True

    def off(self) -> None:
        print("OutdoorLight : off")
        self.is_on = False


class GardenLight:
    def __init__(self) -> None:
        self.dusk_time_set = False
        self.dawn_time_set = False
        self.is_on = False

    def set_dusk_time(self) -> None:
        print("GardenLight : setDuskTime")
        self.dusk_time_set = True

    def set_dawn_time(self) -> None:
        print("GardenLight : setDawnTime")
        self.dawn_time_set = True

    def manual_on(self) -> None:
        print("GardenLight : manualOn")
        self.is_on = True

    def manual_off(self) -> None:
        print("GardenLight : manualOff")
        self.is_on = False


class Sprinkler:
    def __init__(self) -> None:
        self.watering = False

    def water_on(self) -> None:
        print("Sprinkler : waterOn")
        self.watering = True

    def water_off(self) -> None:
        print("Sprinkler : waterOff")
        self.watering = False


class TV:
    def __init__(self) -> None:
        self.is_on = False
        self.channel: int | None = None
        self.volume: int | None = None

    def on(self) -> None:
        print("TV : on")
        self.is_on = True

    def off(self) -> None:
        print("TV : off")
        self.is_on = False

    def set_input_channel(self, channel: int) -> None:
        print("TV : channe")
        self.channel = channel

    def set_volume(self, volume: int) -> None:
        print("TV : volum")
        self.volume = volume


class Light:
    def __init__(self) -> None:
        self.is_on = False

    def on(self) -> None:
        print("Light : on")
        self.is_on = True

    def off(self) -> None:
        print("Light : off")
        self.is_on = False


class SecurityControl:
    def __init__(self) -> None:
        self.armed = False

    def arm(self) -> None:
        print("SecurityControl : arm")
        self.armed = True

    def disarm(self) -> None:
        print("SecurityControl : disarm")
        self.armed = False


class Stereo:
    def __init__(self) -> None:
        self.is_on = False
        self.source: str | None = None
        self.volume: int | None = None

    def on(self) -> None:
        print("Stereo : on")
        self.is_on = True

    def off(self) -> None:
        print("Stereo : off")
        self.is_on = False

    def set_cd(self) -> None:
        print("Stereo : setCd")
        self.source = "cd"

    def set_dvd(self) -> None:
        print("Stereo : setDvd")
        self.source = "dvd"

    def set_radio(self) -> None:
        print("Stereo : setRadio")
        self.source = "radio"

    def set_volume(self, volume: int) -> None:
        print("Stereo : volum")
        self.volume = volume


class Hottub:
    def __init__(self) -> None:
        self.circulating = False
        self.jets_running = False
        self.temperature_set = False

    def circulate(self) -> None:
        print("Hottub : circulate")
        self.circulating = True

    def jets_on(self) -> None:
        print("Hottub : jetsOn")
        self.jets_running = True

    def jets_off(self) -> None:
        print("Hottub : jetsOff")
        self.jets_running = False

    def set_temperature(self) -> None:
        print("Hottub : setTemperature")
        self.temperature_set = True