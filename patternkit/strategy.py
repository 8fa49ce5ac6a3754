"""Duck simulator with interchangeable fly and quack behaviours."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FlyBehavior(ABC):
    """A way of flying."""

    @abstractmethod
    def fly(self) -> str:
        """Return a description of the flight."""


class FlyWithWings(FlyBehavior):
    def fly(self) -> str:
        return "I'm flying!!"


class FlyNoWay(FlyBehavior):
    def fly(self) -> str:
        return "I can't fly"


class FlyRocketPowered(FlyBehavior):
    def fly(self) -> str:
        return "I'm flying with a rocket!"


class QuackBehavior(ABC):
    """A way of making a sound."""

    @abstractmethod
    def quack(self) -> str:
        """Return the sound made."""


class Quack(QuackBehavior):
    def quack(self) -> str:
        return "Quack"


class MuteQuack(QuackBehavior):
    def quack(self) -> str:
        return "<< Silence >>"


class Squeak(QuackBehavior):
    def quack(self) -> str:
        return "Squeak"


class Duck(ABC):
    """A named duck whose behaviours can be replaced at any time."""

    _default_fly: type[FlyBehavior] = FlyWithWings
    _default_quack: type[QuackBehavior] = Quack

    def __init__(
        self,
        name: str,
        fly_behavior: FlyBehavior | None = None,
        quack_behavior: QuackBehavior | None = None,
    ) -> None:
        self.name = name
        self.fly_behavior = fly_behavior if fly_behavior is not None else self._default_fly()
        self.quack_behavior = (
            quack_behavior if quack_behavior is not None else self._default_quack()
        )

    @abstractmethod
    def display(self) -> str:
        """Return the duck's self-introduction."""

    def perform_fly(self) -> str:
        return self.fly_behavior.fly()

    def perform_quack(self) -> str:
        return self.quack_behavior.quack()


class MallardDuck(Duck):
    def display(self) -> str:
        return f"I'm a real Mallard duck. My name is {self.name}"


class RedheadDuck(Duck):
    def display(self) -> str:
        return f"I'm a Redhead duck. My name is {self.name}"


class RubberDuck(Duck):
    _default_fly = FlyNoWay
    _default_quack = Squeak

    def display(self) -> str:
        return f"I'm a rubber duckie. My name is {self.name}"


class DecoyDuck(Duck):
    _default_fly = FlyNoWay
    _default_quack = MuteQuack

    def display(self) -> str:
        return f"I'm a duck decoy. My name is {self.name}"


def main(argv=None) -> int:
    """Show each duck's behaviour, then change some behaviours at run time."""
    mallard = MallardDuck("绿头鸭")
    redhead = RedheadDuck("红头鸭")
    rubber = RubberDuck("橡皮鸭")
    decoy = DecoyDuck("诱饵鸭")

    print("==== 初始鸭子行为 ====")
    for duck in (mallard, redhead, rubber, decoy):
        print(duck.display())
        print(duck.perform_fly())
        print(duck.perform_quack())
        print()

    print("==== 改变鸭子行为 ====")
    print("给橡皮鸭装上火箭推进器...")
    rubber.fly_behavior = FlyRocketPowered()
    print(rubber.perform_fly())

    print("给诱饵鸭装上会叫的装置...")
    decoy.quack_behavior = Quack()
    print(decoy.perform_quack())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())