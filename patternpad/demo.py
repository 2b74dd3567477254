"""Runs one worked example of each design pattern in the package."""

from __future__ import annotations

from typing import Callable

from patternpad.commands import (
    CeilingFanHighCommand,
    CeilingFanLowCommand,
    CeilingFanMediumCommand,
    CeilingFanOffCommand,
    GarageLightOffCommand,
    GarageLightOnCommand,
    MacroCommand,
    RemoteControl,
)
from patternpad.composite import File, Folder
from patternpad.decorator import Beverage, HouseBlend, Mocha, Size, SteamedMilk
from patternpad.factory import ChicagoStylePizzaStore, NYStylePizzaStore, Pizza
from patternpad.iterator import DinerMenu, PancakeHouseMenu, Waitress
from patternpad.observer import (
    CurrentConditionsDisplay,
    Display,
    ForecastDisplay,
    HeatIndexDisplay,
    WeatherData,
    WeatherStatsDisplay,
    WindSpeedDisplay,
)
from patternpad.receivers import CeilingFan, GarageDoor
from patternpad.singleton import ChocolateBoiler
from patternpad.state import Mp3Player
from patternpad.strategy import (
    Duck,
    DuckCall,
    FlyNoWay,
    FlyWithWings,
    MallardDuck,
    Quack,
    QuackSilent,
    QuackSqueak,
    RedheadDuck,
    RubberDuck,
    WoodenDuck,
)
from patternpad.template import Coffee, Tea


def strategy_example() -> list[Duck]:
    """Ducks with interchangeable fly and quack behaviours, then a duck call."""
    ducks = [
        Duck(Quack(), FlyWithWings()),
        MallardDuck(Quack(), FlyWithWings()),
        RedheadDuck(Quack(), FlyWithWings()),
        RubberDuck(QuackSqueak(), FlyNoWay()),
        WoodenDuck(QuackSilent(), FlyNoWay()),
    ]
    for duck in ducks:
        duck.display()
        duck.fly()
        duck.quack()
        print("\n")

    DuckCall().mimic()
    return ducks


def observer_example() -> tuple[WeatherData, list[Display]]:
    """Several displays follow one weather station through four updates."""
    weather_data = WeatherData()
    displays: list[Display] = [
        CurrentConditionsDisplay(weather_data),
        ForecastDisplay(weather_data),
        WeatherStatsDisplay(weather_data),
        HeatIndexDisplay(weather_data),
        WindSpeedDisplay(weather_data),
    ]
    weather_data.set_measurements(10, 0.4, 2.0, 30)
    weather_data.set_measurements(13, 1, 2.0, 30)
    weather_data.set_measurements(12, 0.4, 1.7, 30)
    weather_data.set_measurements(12, 0.9, 2.1, 30)
    return weather_data, displays


def decorator_example() -> Beverage:
    """A venti house blend with steamed milk and mocha, shown layer by layer."""
    house_blend = HouseBlend()
    house_blend.size = Size.VENTI

    with_milk = SteamedMilk(house_blend)
    with_milk_and_mocha = Mocha(with_milk)

    for beverage in (house_blend, with_milk, with_milk_and_mocha):
        description = beverage.description()
        cost = beverage.cost()
        print(f"{description} Cost: {cost:g}")
    return with_milk_and_mocha


def factory_example() -> list[Pizza | None]:
    """Order the same pizzas from two franchises with their own ingredients."""
    print("\n\n~~~Factory pattern example~~~\n")

    chicago_store = ChicagoStylePizzaStore()
    ny_store = NYStylePizzaStore()
    pizzas: list[Pizza | None] = []

    print("Ordering all pizzas from the Chicago style store")
    pizzas.append(chicago_store.order("four cheese"))
    pizzas.append(chicago_store.order("pepperoni"))

    print()

    print("Ordering all pizzas from the NY style store")
    pizzas.append(ny_store.order("four cheese"))
    pizzas.append(ny_store.order("pepperoni"))
    return pizzas


def singleton_example() -> ChocolateBoiler:
    """Two handles on the single boiler share its state."""
    print()
    print("Singleton Pattern Example")
    boiler = ChocolateBoiler.instance()
    same_boiler = ChocolateBoiler.instance()

    boiler.fill()
    same_boiler.fill()

    boiler.boil()
    boiler.drain()

    same_boiler.fill()
    return boiler


def command_example() -> CeilingFan:
    """Drive a garage door and a ceiling fan through a remote with undo."""
    print()
    print("Starting Command Pattern Example")

    garage_door = GarageDoor()
    ceiling_fan = CeilingFan()

    garage_light_on = GarageLightOnCommand(garage_door)
    garage_light_off = GarageLightOffCommand(garage_door)
    fan_high = CeilingFanHighCommand(ceiling_fan)
    fan_medium = CeilingFanMediumCommand(ceiling_fan)
    fan_low = CeilingFanLowCommand(ceiling_fan)
    fan_off = CeilingFanOffCommand(ceiling_fan)

    remote = RemoteControl()
    remote.set_command(garage_light_on, garage_light_off, 0)
    remote.set_command(fan_high, fan_off, 1)
    remote.set_command(fan_medium, fan_off, 2)
    remote.set_command(fan_low, fan_off, 3)

    remote.press_on(1)
    remote.press_on(3)
    remote.press_undo()
    remote.press_off(0)

    print('Executing "enter garage routine"')
    enter_garage = MacroCommand([fan_high, garage_light_on])
    leave_garage = MacroCommand([fan_off, garage_light_off])

    remote.set_command(enter_garage, leave_garage, 4)

    remote.press_on(4)
    remote.press_undo()
    remote.press_off(4)
    remote.press_off(4)
    remote.press_undo()
    return ceiling_fan


def template_method_example(ask: Callable[[str], str] = input) -> tuple[Tea, Coffee]:
    """Prepare tea and coffee through the same recipe skeleton."""
    print()
    print("Starting Template Method Pattern example")
    tea = Tea(ask)
    coffee = Coffee(ask)

    tea.prepare()
    coffee.prepare()
    return tea, coffee


def iterator_example() -> list[str]:
    """A waitress reads out two differently stored menus."""
    print()
    print("Starting Iterator Pattern example")

    pancake_house_menu = PancakeHouseMenu()
    diner_menu = DinerMenu()
    waitress = Waitress(pancake_house_menu)

    readings = [waitress.print_menu()]
    waitress.change_menu(diner_menu)
    readings.append(waitress.print_menu())
    return readings


def composite_example() -> Folder:
    """Build a small folder tree and print it from the root."""
    print()
    print("Starting Composite Pattern example")

    my_computer = Folder("My Computer")
    my_documents = Folder("My Documents")
    my_videos = Folder("My Videos")
    work = Folder("Work")

    notes = File("notes", "txt")
    homework = File("homework", "docx")

    notes.write_content("notes from 29/05/23")
    homework.write_content("Introduction: ")

    my_computer.add(my_documents)
    my_computer.add(my_videos)

    my_documents.add(work)
    my_documents.add(notes)
    work.add(homework)

    my_computer.print_info()
    return my_computer


def state_example() -> Mp3Player:
    """Press the buttons of an MP3 player and show its state after each."""
    print()
    print("Starting State Pattern example")

    player = Mp3Player(
        ["Thriller", "Billie Jean", "Beat it", "Man in the Mirror", "Black or White"]
    )

    print(player)
    for press in (player.play, player.pause, player.forward, player.play, player.forward):
        press()
        print(player)
    return player


def main(argv: list[str] | None = None) -> int:
    """Run every example in turn."""
    print("Application started.\n")

    strategy_example()
    observer_example()
    decorator_example()
    factory_example()
    singleton_example()
    command_example()
    template_method_example(ask=input)
    iterator_example()
    composite_example()
    state_example()
    return 0