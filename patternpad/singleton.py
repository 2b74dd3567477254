"""Singleton pattern: the one chocolate boiler of the factory."""

from __future__ import annotations

_TOKEN = object()


class ChocolateBoiler:
    """A boiler that exists once; obtain it with ChocolateBoiler.instance()."""

    _instance: ChocolateBoiler | None = None

    def __init__(self, _token: object = None) -> None:
        if _token is not _TOKEN:
            raise TypeError("use ChocolateBoiler.instance() to get the boiler")
        print("Creating Chocolate Boiler instance.")
        self.empty = True
        self.boiled = False

    @classmethod
    def instance(cls) -> ChocolateBoiler:
        if cls._instance is None:
            cls._instance = cls(_TOKEN)
        return cls._instance

    def fill(self) -> bool:
        """Fill an empty boiler; return whether it was filled."""
        if not self.empty:
            print("Cannot fill, boiler is full")
            return False
        print("Filling up the chocolate boiler.")
        self.empty = False
        return True

    def boil(self) -> bool:
        """Boil the contents; return whether anything was boiled."""
        if self.empty:
            print("Cannot boil an empty boiler")
            return False
        print("Boiling away....")
        self.boiled = True
        return True

    def drain(self) -> bool:
        """Drain a full boiler; return whether it was drained."""
        if self.empty:
            print("Tried draining an empty boiler.")
            return False
        print("Draining chocolate!")
        self.empty = True
        self.boiled = False
        return True