"""Strategy pattern: ducks whose flying and quacking are pluggable behaviours."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _say(text: str) -> str:
    print(text)
    return text


class FlyBehaviour(ABC):
    """How something flies."""

    @abstractmethod
    def fly(self) -> str:
        """Fly, print what happens and return it."""


class FlyWithWings(FlyBehaviour):
    def fly(self) -> str:
        return _say("*whoosh* I'm flying!")


class FlyNoWay(FlyBehaviour):
    def fly(self) -> str:
        return _say("Sits doing nothing.")


class QuackBehaviour(ABC):
    """How something quacks."""

    @abstractmethod
    def quack(self) -> str:
        """Quack, print the sound and return it."""


class Quack(QuackBehaviour):
    def quack(self) -> str:
        return _say("Quack, quack!")


class QuackSqueak(QuackBehaviour):
    def quack(self) -> str:
        return _say("Squeek, squeek!")


class QuackSilent(QuackBehaviour):
    def quack(self) -> str:
        return _say("...")


class Duck:
    """A duck that delegates quacking and flying to its behaviours."""

    def __init__(self, quack_behaviour: QuackBehaviour, fly_behaviour: FlyBehaviour) -> None:
        self.quack_behaviour = quack_behaviour
        self.fly_behaviour = fly_behaviour

    def display(self) -> str:
        return _say("Look, I'm a duck!")

    def fly(self) -> str:
        return self.fly_behaviour.fly()

    def quack(self) -> str:
        return self.quack_behaviour.quack()

    def swim(self) -> str:
        return _say("*Floats in the water*")


class MallardDuck(Duck):
    def display(self) -> str:
        return _say("I look like a Mallard")


class RedheadDuck(Duck):
    def display(self) -> str:
        return _say("I look like a Readhead duck!")


class RubberDuck(Duck):
    def display(self) -> str:
        return _say("I look like a Rubber duck!")


class WoodenDuck(Duck):
    def display(self) -> str:
        return _say("I look like a Wooden duck!")


class DuckCall:
    """A hunter's device that mimics a duck's quack without being a duck."""

    def __init__(self) -> None:
        _say("A hunter's duck call has been created.")
        self._quacker: QuackBehaviour = Quack()

    def mimic(self) -> str:
        return self._quacker.quack()