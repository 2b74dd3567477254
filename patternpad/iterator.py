"""Iterator pattern: a waitress walking menus without knowing how they are stored."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class MenuItem:
    """One dish on a menu."""

    name: str = ""
    description: str = ""
    price: float = 0.0
    vegetarian: bool = False


class Menu(ABC):
    """A collection of menu items that can be walked in order."""

    @abstractmethod
    def __iter__(self) -> Iterator[MenuItem]:
        """Iterate over the items in menu order."""


class DinerMenu(Menu):
    """A menu with a fixed number of items."""

    def __init__(self) -> None:
        self._items: tuple[MenuItem, ...] = (
            MenuItem("Burger", "Tasty", 3.0, False),
            MenuItem("Milkshake", "Refreshing.", 2.0, False),
            MenuItem("Fries", "Crispy and golden.", 1.0, False),
            MenuItem("Baked Beans", "In tomato sauce.", 1.50, False),
        )

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)


class PancakeHouseMenu(Menu):
    """A menu whose items are kept in a growable list."""

    def __init__(self) -> None:
        self._items: list[MenuItem] = [
            MenuItem("Pancake", "Filling", 5.0, True),
            MenuItem("Milkshake", "Cooling", 3.0, True),
            MenuItem("Chocolate cake", "Indulgent", 2.5, True),
        ]

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)


class Waitress:
    """Reads out whichever menu she currently holds."""

    def __init__(self, menu: Menu) -> None:
        self.menu = menu

    def print_menu(self) -> str:
        """Print every item of the current menu and return the printed text."""
        lines: list[str] = []
        for counter, item in enumerate(self.menu):
            lines.append(f"Menu item {counter}: {item.name}")
            lines.append(f"Here's how I would describe it... {item.description}")
        text = "\n".join(lines)
        if text:
            print(text)
        return text

    def change_menu(self, menu: Menu) -> None:
        self.menu = menu