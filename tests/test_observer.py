import pytest

from patternkit.observer import (
    CurrentConditionsDisplay,
    ForecastDisplay,
    Observer,
    ObserverLimitError,
    ObserverNotFoundError,
    StatisticsDisplay,
    WeatherData,
    main,
)


class Recorder(Observer):
    def __init__(self):
        self.calls = []

    def update(self, temperature, humidity, pressure):
        self.calls.append((temperature, humidity, pressure))


def test_initial_state():
    data = WeatherData()
    assert (data.temperature, data.humidity, data.pressure) == (0.0, 0.0, 1013.25)
    assert data.observers == ()


def test_set_measurements_notifies_in_order():
    data = WeatherData()
    first, second = Recorder(), Recorder()
    data.register_observer(first)
    data.register_observer(second)
    data.set_measurements(25.0, 65.0, 1015.0)
    assert first.calls == [(25.0, 65.0, 1015.0)]
    assert second.calls == first.calls
    assert data.observers == (first, second)


def test_register_limit():
    data = WeatherData()
    for _ in range(3):
        data.register_observer(Recorder())
    with pytest.raises(ObserverLimitError):
        data.register_observer(Recorder())
    assert len(data.observers) == 3


def test_remove_observer_stops_updates():
    data = WeatherData()
    kept, removed = Recorder(), Recorder()
    data.register_observer(kept)
    data.register_observer(removed)
    data.remove_observer(removed)
    data.set_measurements(26.5, 68.0, 1011.0)
    assert removed.calls == []
    assert kept.calls == [(26.5, 68.0, 1011.0)]


def test_remove_unknown_observer():
    data = WeatherData()
    with pytest.raises(ObserverNotFoundError):
        data.remove_observer(Recorder())


def test_current_conditions_output(capsys):
    CurrentConditionsDisplay().update(25.0, 65.0, 1015.0)
    assert capsys.readouterr().out == "[当前状况] 当前状况: 温度 25.0°C, 湿度 65.0%\n"


def test_statistics_tracks_extremes_and_average(capsys):
    stats = StatisticsDisplay()
    stats.update(25.0, 65.0, 1015.0)
    stats.update(28.0, 70.0, 1009.0)
    assert stats.max_temp == 28.0
    assert stats.min_temp == 25.0
    assert stats.average == pytest.approx(26.5)
    assert stats.count == 2


def test_statistics_instances_are_independent(capsys):
    one, two = StatisticsDisplay(), StatisticsDisplay()
    one.update(28.0, 70.0, 1009.0)
    two.update(25.0, 65.0, 1015.0)
    assert one.max_temp == 28.0
    assert two.max_temp == 25.0


@pytest.mark.parametrize(
    "pressure, forecast",
    [(1015.0, "天气晴朗"), (1009.0, "可能有暴风雨"), (1013.25, "天气保持不变")],
)
def test_forecast(capsys, pressure, forecast):
    ForecastDisplay().update(25.0, 65.0, pressure)
    assert capsys.readouterr().out == f"[天气预报] 天气预报: {forecast}\n"


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("=== 气象站观察者模式示例 ===")
    third = out.split("-- 第三次更新 (移除统计布告板后) --")[1]
    assert "温度统计" not in third
    assert "[天气预报] 天气预报: 可能有暴风雨" in third