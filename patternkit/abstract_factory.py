"""Regional ingredient factories that supply a whole family of pizza parts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Dough:
    name: str


@dataclass(frozen=True)
class Sauce:
    name: str


@dataclass(frozen=True)
class Cheese:
    name: str


class PizzaIngredientFactory(ABC):
    """Creates a matching set of pizza ingredients."""

    @abstractmethod
    def create_dough(self) -> Dough:
        """Return this region's dough."""

    @abstractmethod
    def create_sauce(self) -> Sauce:
        """Return this region's sauce."""

    @abstractmethod
    def create_cheese(self) -> Cheese:
        """Return this region's cheese."""


class NYPizzaIngredientFactory(PizzaIngredientFactory):
    def create_dough(self) -> Dough:
        return Dough("纽约薄面团")

    def create_sauce(self) -> Sauce:
        return Sauce("纽约番茄酱")

    def create_cheese(self) -> Cheese:
        return Cheese("纽约马苏里拉奶酪")


class ChicagoPizzaIngredientFactory(PizzaIngredientFactory):
    def create_dough(self) -> Dough:
        return Dough("芝加哥厚面团")

    def create_sauce(self) -> Sauce:
        return Sauce("芝加哥番茄酱")

    def create_cheese(self) -> Cheese:
        return Cheese("芝加哥帕尔马干酪")


def make_pizza(
    factory: PizzaIngredientFactory, name: str
) -> tuple[Dough, Sauce, Cheese]:
    """Make the named pizza from the factory's ingredients and report them."""
    print(f"制作{name}:")
    dough = factory.create_dough()
    sauce = factory.create_sauce()
    cheese = factory.create_cheese()
    print(f"使用了: {dough.name}, {sauce.name}, {cheese.name}")
    return dough, sauce, cheese


def main(argv=None) -> int:
    """Make one pizza with each regional factory."""
    make_pizza(NYPizzaIngredientFactory(), "纽约风味芝士披萨")
    make_pizza(ChicagoPizzaIngredientFactory(), "芝加哥风味芝士披萨")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())