import pytest

from patternpad.receivers import (
    TV,
    CeilingFan,
    CeilingLight,
    GarageDoor,
    GardenLight,
    Hottub,
    Light,
    SecurityControl,
    Speed,
    Sprinkler,
    Stereo,
)


def test_fan_starts_off(capsys):
    fan = CeilingFan()
    assert fan.speed is Speed.OFF
    assert capsys.readouterr().out == "CeilingFan : getSpeed\n"


@pytest.mark.parametrize(
    "method, speed, line",
    [
        ("high", Speed.HIGH, "CeilingFan : high"),
        ("medium", Speed.MEDIUM, "CeilingFan : medium"),
        ("low", Speed.LOW, "CeilingFan : low"),
        ("off", Speed.OFF, "CeilingFan : off"),
    ],
)
def test_fan_controls(method, speed, line, capsys):
    fan = CeilingFan()
    getattr(fan, method)()
    assert capsys.readouterr().out == line + "\n"
    assert fan.speed is speed


@pytest.mark.parametrize("speed", list(Speed))
def test_set_speed_round_trip(speed):
    fan = CeilingFan()
    fan.set_speed(speed)
    assert fan.speed is speed


def test_set_speed_rejects_unknown():
    with pytest.raises(ValueError):
        CeilingFan().set_speed("turbo")


def test_garage_door_messages(capsys):
    door = GarageDoor()
    door.up()
    door.down()
    door.stop()
    door.light_on()
    door.light_off()
    assert capsys.readouterr().out.splitlines() == [
        "Garage door : up",
        "Garage door : down",
        "Garage door : stop",
        "Garage door : lightOn",
        "GarageDoor : off",
    ]


def test_tv_remembers_settings(capsys):
    tv = TV()
    tv.set_input_channel(3)
    tv.set_volume(7)
    assert (tv.channel, tv.volume) == (3, 7)
    assert capsys.readouterr().out.splitlines() == ["TV : channe", "TV : volum"]


def test_stereo_volume(capsys):
    stereo = Stereo()
    stereo.set_volume(11)
    stereo.set_cd()
    assert stereo.volume == 11
    assert capsys.readouterr().out.splitlines() == ["Stereo : volum", "Stereo : setCd"]


def test_other_devices(capsys):
    CeilingLight().dim()
    GardenLight().set_dusk_time()
    Sprinkler().water_on()
    Light().off()
    SecurityControl().arm()
    Hottub().jets_on()
    assert capsys.readouterr().out.splitlines() == [
        "CeilingLight : dim",
        "GardenLight : setDuskTime",
        "Sprinkler : waterOn",
        "Light : off",
        "SecurityControl : arm",
        "Hottub : jetsOn",
    ]