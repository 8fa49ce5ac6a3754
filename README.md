# patternkit

Six classic design patterns, each written as a small self-contained module
with a demonstration you can run from the command line.

| Module                        | Pattern          | Demonstration command          |
|-------------------------------|------------------|--------------------------------|
| `patternkit.strategy`         | Strategy         | `patternkit-strategy`          |
| `patternkit.observer`         | Observer         | `patternkit-observer`          |
| `patternkit.decorator`        | Decorator        | `patternkit-decorator`         |
| `patternkit.simple_factory`   | Simple Factory   | `patternkit-simple-factory`    |
| `patternkit.factory_method`   | Factory Method   | `patternkit-factory-method`    |
| `patternkit.abstract_factory` | Abstract Factory | `patternkit-abstract-factory`  |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the modules

### Strategy

Ducks carry interchangeable flying and quacking behaviours
(`FlyWithWings`, `FlyNoWay`, `FlyRocketPowered`; `Quack`, `MuteQuack`,
`Squeak`) that can be swapped at run time by assigning to `fly_behavior`
or `quack_behavior`. `display()`, `perform_fly()` and `perform_quack()`
return strings.

```python
from patternkit.strategy import RubberDuck, FlyRocketPowered

duck = RubberDuck("橡皮鸭")
duck.display()                  # "I'm a rubber duckie. My name is 橡皮鸭"
duck.perform_fly()              # "I can't fly"
duck.fly_behavior = FlyRocketPowered()
duck.perform_fly()              # "I'm flying with a rocket!"
```

`MallardDuck` and `RedheadDuck` fly with wings and quack by default;
`RubberDuck` cannot fly and squeaks; `DecoyDuck` cannot fly and is silent.
Behaviours can also be passed to the constructor.

### Observer

A `WeatherData` subject holds the latest temperature, humidity and pressure
and pushes them to its registered observers whenever `set_measurements` is
called. By default it accepts up to three observers (`max_observers` sets
another limit); registering one more raises `ObserverLimitError`, and
removing an observer that is not registered raises `ObserverNotFoundError`.

```python
from patternkit.observer import WeatherData, CurrentConditionsDisplay, ForecastDisplay

station = WeatherData()
station.register_observer(CurrentConditionsDisplay())
station.register_observer(ForecastDisplay())
station.set_measurements(25.0, 65.0, 1015.0)
```

The displays print their reports: `CurrentConditionsDisplay` the current
temperature and humidity, `StatisticsDisplay` the highest, lowest and
average temperature it has seen, and `ForecastDisplay` a forecast based on
whether the pressure is above, below or equal to 1013.25. Any subclass of
`Observer` that implements `update(temperature, humidity, pressure)` can be
registered.

### Decorator

Condiments wrap beverages and add to their cost and description.

```python
from patternkit.decorator import Espresso, Mocha, Whip

drink = Whip(Mocha(Mocha(Espresso())))
print(drink.description())      # Espresso, Mocha, Mocha, Whip
print(f"{drink.cost():.2f}")    # 2.49
```

`HouseBlend` is the other base beverage. New condiments subclass
`CondimentDecorator` and set `price` and `label`.

### Simple Factory

`create_pizza` returns a `Pizza` for `PizzaType.CHEESE`, `VEGGIE` or
`CLAM`, and raises `UnsupportedPizzaError` for any other type.
`Pizza.prepare()`, `bake()`, `cut()` and `box()` return the text of each
step; `order_pizza` prints every step and returns the pizza.

```python
from patternkit.simple_factory import PizzaType, create_pizza, order_pizza

pizza = create_pizza(PizzaType.CHEESE)
print(pizza.bake())
order_pizza(PizzaType.CLAM)
```

### Factory Method

Each store (`NYPizzaStore`, `ChicagoPizzaStore`, `CaliforniaPizzaStore`)
decides how its own pizzas are made. `create_pizza` returns a fresh `Pizza`;
a type the store has no recipe for gives a pizza named "未知披萨" with no
ingredients. `order_pizza` prints the steps of making it and returns it.
A pizza holds at most five toppings; `add_topping` ignores any more.

```python
from patternkit.factory_method import NYPizzaStore, PizzaType

pizza = NYPizzaStore().order_pizza(PizzaType.CHEESE)
print(pizza.toppings)
```

### Abstract Factory

Ingredient factories produce a matching family of `Dough`, `Sauce` and
`Cheese`. `make_pizza` prints the ingredients used and returns them as a
tuple.

```python
from patternkit.abstract_factory import NYPizzaIngredientFactory, make_pizza

dough, sauce, cheese = make_pizza(NYPizzaIngredientFactory(), "纽约风味芝士披萨")
```

## Running the demonstrations

Each command prints a fixed walkthrough for its pattern and takes no
options:

```
patternkit-strategy
patternkit-observer
patternkit-decorator
patternkit-simple-factory
patternkit-factory-method
patternkit-abstract-factory
```