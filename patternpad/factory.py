"""Factory method and abstract factory patterns: a pizza franchise."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Ingredient:
    """A named ingredient supplied by an ingredient factory."""

    name: str = ""

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Dough(Ingredient):
    """Any pizza dough."""


class Base(Ingredient):
    """Any pizza sauce base."""


class Cheese(Ingredient):
    """Any pizza cheese."""


class ThinCrustDough(Dough):
    name = "Thin Crust Dough"


class ThickCrustDough(Dough):
    name = "Thick Crust Dough"


class QualityTomatoBase(Base):
    name = "Quality Tomato"


class PlumTomatoBase(Base):
    name = "Plum Tomato"


class ParmesanCheese(Cheese):
    name = "Parmesan Cheese"


class MozzarellaCheese(Cheese):
    name = "Mozarella"


class IngredientFactory(ABC):
    """Supplies a consistent family of ingredients for one franchise."""

    @abstractmethod
    def dough(self) -> Dough:
        """A fresh dough."""

    @abstractmethod
    def base(self) -> Base:
        """A fresh base."""

    @abstractmethod
    def cheese(self) -> Cheese:
        """A fresh cheese."""


class ChicagoIngredientFactory(IngredientFactory):
    def dough(self) -> Dough:
        return ThickCrustDough()

    def base(self) -> Base:
        return QualityTomatoBase()

    def cheese(self) -> Cheese:
        return MozzarellaCheese()


class NYIngredientFactory(IngredientFactory):
    def dough(self) -> Dough:
        return ThickCrustDough()

    def base(self) -> Base:
        return PlumTomatoBase()

    def cheese(self) -> Cheese:
        return ParmesanCheese()


class Pizza(ABC):
    """A pizza made from the ingredients of one factory."""

    name: str = ""

    def __init__(self, factory: IngredientFactory) -> None:
        self.factory = factory
        self.dough: Dough | None = None
        self.base: Base | None = None
        self.cheese: Cheese | None = None
        self.baked = False
        self.sliced = False
        self.boxed = False

    @abstractmethod
    def prepare(self) -> None:
        """Gather the ingredients and assemble the pizza."""

    def bake(self) -> None:
        self.baked = True
        print("Baking at 200C for 20 minutes")

    def slice(self) -> None:
        self.sliced = True
        print("Cutting pizza into slices.")

    def box(self) -> None:
        self.boxed = True
        print("Boxing the pizza.")


class NYCheesePizza(Pizza):
    name = "NY style cheese Pizza"

    def prepare(self) -> None:
        self.dough = self.factory.dough()
        self.cheese = self.factory.cheese()
        print()
        print(f"Preparing a {self.name}")
        print("Skipping the base!")
        print(f"Kneeding the {self.dough} dough")
        print(f"Sprinkling {self.cheese} on top.")


class ChicagoCheesePizza(Pizza):
    name = "Chicago style cheese Pizza"

    def prepare(self) -> None:
        self.dough = self.factory.dough()
        self.base = self.factory.base()
        self.cheese = self.factory.cheese()
        print()
        print(f"Preparing a {self.name}")
        print(f"Kneeding the {self.dough} dough")
        print(f"Applying {self.base} base")
        print(f"Sprinkling {self.cheese} on top.")


class PizzaStore(ABC):
    """A franchise: every store orders the same way but makes its own pizzas."""

    def order(self, pizza_name: str) -> Pizza | None:
        """Make the named pizza; return it, or None if the store cannot make it."""
        pizza = self.create_pizza(pizza_name)
        if pizza is not None:
            pizza.prepare()
            pizza.bake()
            pizza.slice()
            pizza.box()
        return pizza

    @abstractmethod
    def create_pizza(self, pizza_name: str) -> Pizza | None:
        """Build the store's version of the named pizza, or None if unknown."""


class NYStylePizzaStore(PizzaStore):
    def create_pizza(self, pizza_name: str) -> Pizza | None:
        if pizza_name == "four cheese":
            return NYCheesePizza(NYIngredientFactory())
        print("Unknown pizza requested.")
        return None


class ChicagoStylePizzaStore(PizzaStore):
    def create_pizza(self, pizza_name: str) -> Pizza | None:
        if pizza_name == "four cheese":
            return ChicagoCheesePizza(ChicagoIngredientFactory())
        print("Unknown pizza requested.")
        return None