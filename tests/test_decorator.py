import pytest

from patternpad.decorator import (
    Beverage,
    Condiment,
    DarkRoast,
    Decaf,
    HouseBlend,
    Mocha,
    Size,
    SteamedMilk,
)


def test_default_size_is_tall():
    assert HouseBlend().size is Size.TALL


@pytest.mark.parametrize(
    "size, label", [(Size.TALL, "tall"), (Size.GRANDE, "grande"), (Size.VENTI, "venti")]
)
def test_size_labels_appear_in_description(size, label):
    drink = HouseBlend()
    drink.size = size
    assert drink.description() == f"A ({label} sized) medium roast coffee blend."


def test_house_blend_description_and_cost():
    drink = HouseBlend()
    assert drink.description() == "A (tall sized) medium roast coffee blend."
    assert drink.cost() == 0.89


def test_dark_roast_uses_size():
    drink = DarkRoast()
    drink.size = Size.GRANDE
    assert drink.description() == "A strong, bold, grande coffee that is roasted for longer."
    assert drink.cost() == 0.99


def test_decaf():
    drink = Decaf()
    drink.size = Size.VENTI
    assert drink.description() == "A (venti sized) coffee alternative with low caffeine."
    assert drink.cost() == 1.05


@pytest.mark.parametrize(
    "size, extra", [(Size.TALL, 0.1), (Size.GRANDE, 0.15), (Size.VENTI, 0.2)]
)
def test_steamed_milk_cost_by_size(size, extra):
    base = HouseBlend()
    base.size = size
    assert SteamedMilk(base).cost() == pytest.approx(base.cost() + extra)


def test_condiment_reports_wrapped_size():
    base = HouseBlend()
    base.size = Size.VENTI
    wrapped = Mocha(SteamedMilk(base))
    assert wrapped.size is Size.VENTI


def test_condiment_size_cannot_be_set():
    with pytest.raises(AttributeError):
        SteamedMilk(HouseBlend()).size = Size.GRANDE


def test_layered_description():
    base = HouseBlend()
    milk = SteamedMilk(base)
    both = Mocha(milk)
    assert milk.description() == base.description() + " With steamed milk."
    assert both.description() == milk.description() + " With some mocha."


def test_mocha_adds_on_top_of_milk(capsys):
    base = HouseBlend()
    base.size = Size.VENTI
    milk = SteamedMilk(base)
    both = Mocha(milk)
    assert both.cost() == pytest.approx(milk.cost() + 0.2)
    assert "mocha bevvy size = 2" in capsys.readouterr().out


@pytest.mark.parametrize("abstract", [Beverage, Condiment])
def test_abstract_beverages_cannot_be_built(abstract):
    with pytest.raises(TypeError):
        abstract() if abstract is Beverage else abstract(HouseBlend())