"""Command pattern: undoable requests bound to remote-control buttons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from patternpad.receivers import CeilingFan, GarageDoor, Speed


class Command(ABC):
    """A request that can be carried out and undone."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the request."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the request."""


class MacroCommand(Command):
    """Several commands run as one; undo undoes them in the same order."""

    def __init__(self, commands: Iterable[Command]) -> None:
        self.commands = list(commands)

    def execute(self) -> None:
        for command in self.commands:
            command.execute()

    def undo(self) -> None:
        for command in self.commands:
            command.undo()


class NullCommand(Command):
    """A command that does nothing, filling empty slots."""

    def execute(self) -> None:
        pass

    def undo(self) -> None:
        pass


class GarageLightOnCommand(Command):
    def __init__(self, door: GarageDoor) -> None:
        self.door = door

    def execute(self) -> None:
        self.door.light_on()

    def undo(self) -> None:
        self.door.light_off()


class GarageLightOffCommand(Command):
    def __init__(self, door: GarageDoor) -> None:
        self.door = door

    def execute(self) -> None:
        self.door.light_off()

    def undo(self) -> None:
        self.door.light_on()


class GarageDoorOpenCommand(Command):
    def __init__(self, door: GarageDoor) -> None:
        self.door = door

    def execute(self) -> None:
        self.door.up()

    def undo(self) -> None:
        self.door.down()


class CeilingFanCommand(Command):
    """A fan command whose undo returns the fan to a remembered speed."""

    def __init__(self, fan: CeilingFan) -> None:
        self.fan = fan
        self.previous_speed = Speed.OFF

    def undo(self) -> None:
        self.fan.set_speed(self.previous_speed)


class CeilingFanHighCommand(CeilingFanCommand):
    def execute(self) -> None:
        self.fan.high()


class CeilingFanMediumCommand(CeilingFanCommand):
    def execute(self) -> None:
        self.previous_speed = self.fan.speed
        self.fan.medium()


class CeilingFanLowCommand(CeilingFanCommand):
    def execute(self) -> None:
        self.previous_speed = self.fan.speed
        self.fan.low()


class CeilingFanOffCommand(CeilingFanCommand):
    def execute(self) -> None:
        self.fan.off()


class RemoteControl:
    """A remote with on/off buttons for each slot and a single undo button."""

    SLOTS = 7

    def __init__(self) -> None:
        self._on: list[Command] = [NullCommand() for _ in range(self.SLOTS)]
        self._off: list[Command] = [NullCommand() for _ in range(self.SLOTS)]
        self._last: Command = NullCommand()

    def _check(self, slot: int) -> None:
        if not 0 <= slot < self.SLOTS:
            raise IndexError(f"Button out of range: {slot}")

    def set_command(self, on_command: Command, off_command: Command, slot: int) -> None:
        self._check(slot)
        self._on[slot] = on_command
        self._off[slot] = off_command

    def press_on(self, slot: int) -> None:
        self._check(slot)
        self._on[slot].execute()
        self._last = self._on[slot]

    def press_off(self, slot: int) -> None:
        self._check(slot)
        self._off[slot].execute()
        self._last = self._off[slot]

    def press_undo(self) -> None:
        self._last.undo()