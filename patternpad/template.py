"""Template method pattern: brewing hot drinks with overridable steps."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class Brew(ABC):
    """A hot drink prepared by a fixed sequence of steps."""

    def __init__(self, ask: Callable[[str], str] = input) -> None:
        self._ask = ask
        self.water_poured = False
        self.brewed = False
        self.in_cup = False
        self.condiments_added = False
        self.steps: list[str] = []

    def prepare(self) -> None:
        """Run the brewing recipe; subclasses supply the varying steps."""
        self.pour_boiling_water()
        self.brew()
        self.pour_in_cup()
        if self.wants_condiments():
            self.add_condiments()
        self._say("Here's your hot brew!")

    def pour_boiling_water(self) -> None:
        self.water_poured = True
        self._say("Pouring boiling water ...")

    @abstractmethod
    def brew(self) -> None:
        """Brew the drink."""

    def pour_in_cup(self) -> None:
        self.in_cup = True
        self._say("Pouring brew in water.")

    @abstractmethod
    def add_condiments(self) -> None:
        """Add the drink's condiments."""

    def wants_condiments(self) -> bool:
        """Hook: whether condiments are added. Defaults to yes."""
        return True

    def _say(self, message: str) -> None:
        self.steps.append(message)
        print(message)

    def _ask_yes(self, question: str) -> bool:
        print(question)
        try:
            answer = self._ask("")
        except EOFError:
            return False
        return answer.strip()[:1] == "y"


class Coffee(Brew):
    def brew(self) -> None:
        self.brewed = True
        self._say("Adding coffee beans to boiling water..")

    def add_condiments(self) -> None:
        self.condiments_added = True
        self._say("Adding milk and sugar to the coffee")

    def wants_condiments(self) -> bool:
        return self._ask_yes("Would you like milk and sugar with your coffee? (y/n)")


class Tea(Brew):
    def brew(self) -> None:
        self.brewed = True
        self._say("Adding tea-leaves to boiling water")

    def add_condiments(self) -> None:
        self.condiments_added = True
        self._say("Adding lemon to the tea")

    def wants_condiments(self) -> bool:
        return self._ask_yes("Would you like lemon in your tea? (y/n)")