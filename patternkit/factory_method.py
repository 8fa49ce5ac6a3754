"""Pizza stores that each decide how their own pizzas are made."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

MAX_TOPPINGS = 5
UNKNOWN_PIZZA_NAME = "未知披萨"


class PizzaType(Enum):
    CHEESE = auto()
    PEPPERONI = auto()
    VEGGIE = auto()
    UNKNOWN = auto()


@dataclass
class Pizza:
    """A pizza with up to five toppings."""

    name: str = ""
    dough: str = ""
    sauce: str = ""
    toppings: list[str] = field(default_factory=list)

    def add_topping(self, topping: str) -> None:
        """Add a topping; toppings beyond the limit are ignored."""
        if len(self.toppings) < MAX_TOPPINGS:
            self.toppings.append(topping)


_Recipe = tuple[str, str, str, tuple[str, ...]]


class PizzaStore:
    """A store whose pizzas follow its own regional recipes."""

    name = ""
    _recipes: dict[PizzaType, _Recipe] = {}

    def create_pizza(self, pizza_type: PizzaType) -> Pizza:
        """Make a fresh pizza of the given type in this store's style."""
        recipe = self._recipes.get(pizza_type)
        if recipe is None:
            return Pizza(name=UNKNOWN_PIZZA_NAME)
        name, dough, sauce, toppings = recipe
        pizza = Pizza(name=name, dough=dough, sauce=sauce)
        for topping in toppings:
            pizza.add_topping(topping)
        return pizza

    def order_pizza(self, pizza_type: PizzaType) -> Pizza:
        """Make a pizza, reporting every step, and return it."""
        pizza = self.create_pizza(pizza_type)
        print(f"\n--- {self.name} 正在制作 {pizza.name} ---")
        print(f"准备 {pizza.dough}")
        print(f"添加 {pizza.sauce}")
        for topping in pizza.toppings:
            print(f"添加 {topping}")
        print("烘烤披萨")
        print("切片")
        print("装盒")
        print(f"--- {pizza.name} 制作完成 ---")
        return pizza


class NYPizzaStore(PizzaStore):
    name = "纽约披萨店"
    _recipes = {
        PizzaType.CHEESE: ("纽约风格芝士披萨", "薄脆面团", "番茄酱", (" mozzarella", " 罗勒")),
        PizzaType.PEPPERONI: (
            "纽约风格意大利辣香肠披萨",
            "超薄脆面团",
            "意式番茄酱",
            (" mozzarella", " 意大利辣香肠"),
        ),
        PizzaType.VEGGIE: (
            "纽约风格蔬菜披萨",
            "全麦面团",
            "特制酱料",
            (" 蘑菇", " 洋葱", " 青椒"),
        ),
    }


class ChicagoPizzaStore(PizzaStore):
    name = "芝加哥披萨店"
    _recipes = {
        PizzaType.CHEESE: (
            "芝加哥风格芝士披萨",
            "厚面团",
            "浓番茄酱",
            (" 马苏里拉奶酪", "  Parmesan"),
        ),
        PizzaType.PEPPERONI: (
            "芝加哥风格意大利辣香肠披萨",
            "超厚面团",
            "番茄大蒜酱",
            (" 马苏里拉奶酪", " 意大利辣香肠片"),
        ),
        PizzaType.VEGGIE: (
            "芝加哥风格蔬菜披萨",
            "深盘面团",
            "意式红酱",
            (" 蘑菇", " 橄榄", " 菠菜"),
        ),
    }


class CaliforniaPizzaStore(PizzaStore):
    name = "加州披萨店"
    _recipes = {
        PizzaType.CHEESE: (
            "加州风格芝士披萨",
            "全麦薄面团",
            "轻番茄酱",
            (" 山羊奶酪", "  香草"),
        ),
        PizzaType.PEPPERONI: (
            "加州风格意大利辣香肠披萨",
            "全麦面团",
            "蒜香番茄酱",
            (" 马苏里拉奶酪", "  有机意大利辣香肠"),
        ),
        PizzaType.VEGGIE: (
            "加州风格蔬菜披萨",
            "藜麦面团",
            "鳄梨酱",
            (" 烤蔬菜", "  豆芽", "  芝麻菜"),
        ),
    }


def main(argv=None) -> int:
    """Order one pizza from each of the three stores."""
    orders = (
        (NYPizzaStore(), PizzaType.CHEESE),
        (ChicagoPizzaStore(), PizzaType.PEPPERONI),
        (CaliforniaPizzaStore(), PizzaType.VEGGIE),
    )
    for store, pizza_type in orders:
        store.order_pizza(pizza_type)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())