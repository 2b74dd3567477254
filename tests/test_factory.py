import pytest

from patternpad.factory import (
    Base,
    Cheese,
    ChicagoCheesePizza,
    ChicagoIngredientFactory,
    ChicagoStylePizzaStore,
    Dough,
    IngredientFactory,
    MozzarellaCheese,
    NYCheesePizza,
    NYIngredientFactory,
    NYStylePizzaStore,
    ParmesanCheese,
    Pizza,
    PizzaStore,
    ThickCrustDough,
    ThinCrustDough,
)


def test_chicago_ingredients():
    factory = ChicagoIngredientFactory()
    assert factory.dough().name == "Thick Crust Dough"
    assert factory.base().name == "Quality Tomato"
    assert factory.cheese().name == "Mozarella"


def test_ny_ingredients():
    factory = NYIngredientFactory()
    assert factory.dough().name == "Thick Crust Dough"
    assert factory.base().name == "Plum Tomato"
    assert factory.cheese().name == "Parmesan Cheese"


def test_ingredient_families():
    factory = NYIngredientFactory()
    assert isinstance(factory.dough(), Dough)
    assert isinstance(factory.base(), Base)
    assert isinstance(factory.cheese(), Cheese)
    assert str(ThinCrustDough()) == "Thin Crust Dough"


def test_factories_return_fresh_ingredients():
    factory = ChicagoIngredientFactory()
    first, second = factory.cheese(), factory.cheese()
    assert [first.name, second.name] == ["Mozarella", "Mozarella"]
    assert isinstance(first, MozzarellaCheese) and isinstance(second, MozzarellaCheese)
    assert first is not second


def test_abstract_classes_cannot_be_built():
    with pytest.raises(TypeError):
        IngredientFactory()
    with pytest.raises(TypeError):
        Pizza(NYIngredientFactory())
    with pytest.raises(TypeError):
        PizzaStore()


def test_chicago_order(capsys):
    pizza = ChicagoStylePizzaStore().order("four cheese")
    assert isinstance(pizza, ChicagoCheesePizza)
    assert isinstance(pizza.cheese, MozzarellaCheese)
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "",
        "Preparing a Chicago style cheese Pizza",
        "Kneeding the Thick Crust Dough dough",
        "Applying Quality Tomato base",
        "Sprinkling Mozarella on top.",
        "Baking at 200C for 20 minutes",
        "Cutting pizza into slices.",
        "Boxing the pizza.",
    ]


def test_ny_order_skips_base(capsys):
    pizza = NYStylePizzaStore().order("four cheese")
    assert isinstance(pizza, NYCheesePizza)
    assert pizza.base is None
    assert isinstance(pizza.dough, ThickCrustDough)
    assert isinstance(pizza.cheese, ParmesanCheese)
    out = capsys.readouterr().out
    assert "Skipping the base!" in out
    assert "Preparing a NY style cheese Pizza" in out


@pytest.mark.parametrize("store", [NYStylePizzaStore(), ChicagoStylePizzaStore()])
def test_unknown_pizza(store, capsys):
    assert store.order("pepperoni") is None
    assert capsys.readouterr().out == "Unknown pizza requested.\n"


def test_pizza_unprepared_has_no_ingredients():
    pizza = ChicagoCheesePizza(ChicagoIngredientFactory())
    assert (pizza.dough, pizza.base, pizza.cheese) == (None, None, None)
    assert pizza.name == "Chicago style cheese Pizza"