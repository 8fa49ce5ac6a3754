import pytest

from patternkit.strategy import (
    DecoyDuck,
    FlyNoWay,
    FlyRocketPowered,
    FlyWithWings,
    MallardDuck,
    MuteQuack,
    Quack,
    RedheadDuck,
    RubberDuck,
    Squeak,
    main,
)


@pytest.mark.parametrize(
    "behavior, expected",
    [
        (FlyWithWings(), "I'm flying!!"),
        (FlyNoWay(), "I can't fly"),
        (FlyRocketPowered(), "I'm flying with a rocket!"),
    ],
)
def test_fly_behaviors(behavior, expected):
    assert behavior.fly() == expected


@pytest.mark.parametrize(
    "behavior, expected",
    [(Quack(), "Quack"), (MuteQuack(), "<< Silence >>"), (Squeak(), "Squeak")],
)
def test_quack_behaviors(behavior, expected):
    assert behavior.quack() == expected


@pytest.mark.parametrize(
    "duck_cls, fly, quack",
    [
        (MallardDuck, "I'm flying!!", "Quack"),
        (RedheadDuck, "I'm flying!!", "Quack"),
        (RubberDuck, "I can't fly", "Squeak"),
        (DecoyDuck, "I can't fly", "<< Silence >>"),
    ],
)
def test_default_behaviors(duck_cls, fly, quack):
    duck = duck_cls("橡皮鸭")
    assert duck.perform_fly() == fly
    assert duck.perform_quack() == quack


def test_display_contains_name():
    assert MallardDuck("绿头鸭").display() == "I'm a real Mallard duck. My name is 绿头鸭"
    assert DecoyDuck("诱饵鸭").display().endswith("My name is 诱饵鸭")


def test_behavior_can_be_replaced():
    rubber = RubberDuck("橡皮鸭")
    rubber.fly_behavior = FlyRocketPowered()
    assert rubber.perform_fly() == "I'm flying with a rocket!"
    assert rubber.perform_quack() == "Squeak"


def test_explicit_behaviors_override_defaults():
    duck = MallardDuck("绿头鸭", fly_behavior=FlyNoWay(), quack_behavior=MuteQuack())
    assert duck.perform_fly() == "I can't fly"
    assert duck.perform_quack() == "<< Silence >>"


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "==== 初始鸭子行为 ===="
    assert lines[1] == "I'm a real Mallard duck. My name is 绿头鸭"
    assert "==== 改变鸭子行为 ====" in lines
    assert lines[-3] == "I'm flying with a rocket!"
    assert lines[-1] == "Quack"