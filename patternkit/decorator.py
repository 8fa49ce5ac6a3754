"""Coffee shop beverages priced and described through condiment wrappers."""

from __future__ import annotations

from abc import ABC, abstractmethod

MAX_DECORATORS = 5


class Beverage(ABC):
    """A drink with a price and a description."""

    def __init__(self) -> None:
        self.decorators: list[Beverage] = []

    @abstractmethod
    def cost(self) -> float:
        """Return the price of the drink."""

    @abstractmethod
    def description(self) -> str:
        """Return what the drink consists of."""

    def _attach(self, decorator: Beverage) -> None:
        if len(self.decorators) < MAX_DECORATORS:
            self.decorators.append(decorator)


class Espresso(Beverage):
    def cost(self) -> float:
        return 1.99

    def description(self) -> str:
        return "Espresso"


class HouseBlend(Beverage):
    def cost(self) -> float:
        return 0.89

    def description(self) -> str:
        return "House Blend Coffee"


class CondimentDecorator(Beverage):
    """Wraps a beverage, adding its own price and name."""

    price = 0.0
    label = ""

    def __init__(self, beverage: Beverage) -> None:
        super().__init__()
        self.beverage = beverage
        beverage._attach(self)

    def cost(self) -> float:
        return self.price + self.beverage.cost()

    def description(self) -> str:
        return f"{self.beverage.description()}, {self.label}"


class Mocha(CondimentDecorator):
    price = 0.20
    label = "Mocha"


class Whip(CondimentDecorator):
    price = 0.10
    label = "Whip"


def main(argv=None) -> int:
    """Describe and price an espresso with double mocha and whip."""
    beverage = Whip(Mocha(Mocha(Espresso())))
    print(f"Description: {beverage.description()}")
    print(f"Cost: ${beverage.cost():.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())