"""Pizza shop whose pizzas come from a single factory function."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class PizzaType(Enum):
    CHEESE = auto()
    VEGGIE = auto()
    CLAM = auto()
    UNKNOWN = auto()


class UnsupportedPizzaError(ValueError):
    """Raised when the factory cannot make the requested pizza."""


@dataclass(frozen=True)
class Pizza:
    type: PizzaType
    name: str
    dough: str
    sauce: str
    toppings: str

    def prepare(self) -> str:
        return "\n".join(
            (
                f"准备 {self.name}",
                f"面团: {self.dough}",
                f"酱料: {self.sauce}",
                f"配料: {self.toppings}",
            )
        )

    def bake(self) -> str:
        return f"烘烤 {self.name}: 25分钟，温度350°F"

    def cut(self) -> str:
        return f"切割 {self.name}: 切成对角片"

    def box(self) -> str:
        return f"包装 {self.name}: 放入官方比萨盒"


_RECIPES = {
    PizzaType.CHEESE: ("芝士比萨", "薄饼", "番茄酱", "马苏里拉芝士"),
    PizzaType.VEGGIE: ("素食比萨", "全麦饼", "橄榄油", "蘑菇、青椒、洋葱"),
    PizzaType.CLAM: ("蛤蜊比萨", "厚饼", "白酱", "蛤蜊、芝士"),
}


def create_pizza(pizza_type: PizzaType) -> Pizza:
    """Make the pizza of the given type."""
    try:
        name, dough, sauce, toppings = _RECIPES[pizza_type]
    except KeyError:
        raise UnsupportedPizzaError("不支持的比萨类型") from None
    return Pizza(pizza_type, name, dough, sauce, toppings)


def order_pizza(pizza_type: PizzaType) -> Pizza:
    """Make, bake, cut and box a pizza, reporting each step."""
    pizza = create_pizza(pizza_type)
    for step in (pizza.prepare, pizza.bake, pizza.cut, pizza.box):
        print(step())
    print("比萨准备好了！")
    return pizza


def main(argv=None) -> int:
    """Place three orders, one of them for an unsupported pizza."""
    orders = (
        ("--- 订单 1: 芝士比萨 ---", PizzaType.CHEESE),
        ("\n--- 订单 2: 蛤蜊比萨 ---", PizzaType.CLAM),
        ("\n--- 订单 3: 未知类型 ---", PizzaType.UNKNOWN),
    )
    for heading, pizza_type in orders:
        print(heading)
        try:
            order_pizza(pizza_type)
        except UnsupportedPizzaError as error:
            print(f"错误: {error}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())