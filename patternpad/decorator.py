"""Decorator pattern: beverages wrapped in condiments that add cost and text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum


class Size(IntEnum):
    TALL = 0
    GRANDE = 1
    VENTI = 2

    @property
    def label(self) -> str:
        return self.name.lower()


class Beverage(ABC):
    """A drink with a size, a description and a cost."""

    def __init__(self) -> None:
        self._size = Size.TALL

    @property
    def size(self) -> Size:
        return self._size

    @size.setter
    def size(self, value: Size) -> None:
        self._size = Size(value)

    @abstractmethod
    def description(self) -> str:
        """Describe the drink."""

    @abstractmethod
    def cost(self) -> float:
        """Price of the drink."""


class HouseBlend(Beverage):
    def description(self) -> str:
        return f"A ({self.size.label} sized) medium roast coffee blend."

    def cost(self) -> float:
        return 0.89


class DarkRoast(Beverage):
    def description(self) -> str:
        return f"A strong, bold, {self.size.label} coffee that is roasted for longer."

    def cost(self) -> float:
        return 0.99


class Decaf(Beverage):
    def description(self) -> str:
        return f"A ({self.size.label} sized) coffee alternative with low caffeine."

    def cost(self) -> float:
        return 1.05


class Condiment(Beverage):
    """A beverage that wraps another; its size is that of the wrapped drink."""

    _costs: tuple[float, float, float] = (0.1, 0.15, 0.2)

    def __init__(self, beverage: Beverage) -> None:
        super().__init__()
        self.beverage = beverage

    @property
    def size(self) -> Size:
        return self.beverage.size

    @size.setter
    def size(self, value: Size) -> None:
        raise AttributeError("a condiment takes its size from the beverage it wraps")

    def _extra_cost(self) -> float:
        return self._costs[self.beverage.size]


class SteamedMilk(Condiment):
    def description(self) -> str:
        return self.beverage.description() + " With steamed milk."

    def cost(self) -> float:
        return self.beverage.cost() + self._extra_cost()


class Mocha(Condiment):
    def description(self) -> str:
        return self.beverage.description() + " With some mocha."

    def cost(self) -> float:
        print(f"mocha bevvy size = {int(self.beverage.size)}")
        return self.beverage.cost() + self._extra_cost()