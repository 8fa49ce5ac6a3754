import pytest

from patternkit.decorator import Espresso, HouseBlend, Mocha, Whip, main


def test_base_beverages():
    assert Espresso().cost() == pytest.approx(1.99)
    assert Espresso().description() == "Espresso"
    assert HouseBlend().cost() == pytest.approx(0.89)
    assert HouseBlend().description() == "House Blend Coffee"


@pytest.mark.parametrize("condiment, price, label", [(Mocha, 0.20, "Mocha"), (Whip, 0.10, "Whip")])
def test_condiment_adds_price_and_label(condiment, price, label):
    base = HouseBlend()
    wrapped = condiment(base)
    assert wrapped.cost() - base.cost() == pytest.approx(price)
    assert wrapped.description() == base.description() + ", " + label


def test_wrapping_order_is_kept():
    beverage = Whip(Mocha(Mocha(Espresso())))
    assert beverage.description() == "Espresso, Mocha, Mocha, Whip"


def test_cost_independent_of_order():
    a = Whip(Mocha(Espresso()))
    b = Mocha(Whip(Espresso()))
    assert a.cost() == pytest.approx(b.cost())


def test_decorators_are_recorded_on_wrapped_beverage():
    espresso = Espresso()
    mocha = Mocha(espresso)
    whip = Whip(mocha)
    assert espresso.decorators == [mocha]
    assert mocha.decorators == [whip]
    assert whip.decorators == []


def test_decorator_record_is_capped():
    espresso = Espresso()
    wrappers = [Mocha(espresso) for _ in range(7)]
    assert espresso.decorators == wrappers[:5]


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "Description: Espresso, Mocha, Mocha, Whip\nCost: $2.49\n"