"""Weather station that pushes measurements to registered displays."""

from __future__ import annotations

from abc import ABC, abstractmethod

MAX_OBSERVERS = 3
STANDARD_PRESSURE = 1013.25


class ObserverLimitError(RuntimeError):
    """Raised when no more observers can be registered."""


class ObserverNotFoundError(LookupError):
    """Raised when removing an observer that is not registered."""


class Observer(ABC):
    """Receives weather measurements."""

    @abstractmethod
    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        """Handle a new set of measurements."""


class WeatherData:
    """Holds the latest measurements and notifies observers on change."""

    def __init__(self, max_observers: int = MAX_OBSERVERS) -> None:
        self.temperature = 0.0
        self.humidity = 0.0
        self.pressure = STANDARD_PRESSURE
        self.max_observers = max_observers
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def register_observer(self, observer: Observer) -> None:
        if len(self._observers) >= self.max_observers:
            raise ObserverLimitError("观察者数量已达到最大值")
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        for index, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[index]
                return
        raise ObserverNotFoundError(f"未找到观察者 {observer!r}")

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self.temperature, self.humidity, self.pressure)

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.pressure = pressure
        self.notify_observers()


class CurrentConditionsDisplay(Observer):
    def __init__(self, name: str = "当前状况") -> None:
        self.name = name

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        print(f"[{self.name}] 当前状况: 温度 {temperature:.1f}°C, 湿度 {humidity:.1f}%")


class StatisticsDisplay(Observer):
    """Tracks the highest, lowest and average temperature seen."""

    def __init__(self, name: str = "统计信息") -> None:
        self.name = name
        self.max_temp = -273.15
        self.min_temp = 1000.0
        self.temp_sum = 0.0
        self.count = 0

    @property
    def average(self) -> float:
        if self.count == 0:
            raise ZeroDivisionError("no temperatures recorded")
        return self.temp_sum / self.count

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.max_temp = max(self.max_temp, temperature)
        self.min_temp = min(self.min_temp, temperature)
        self.temp_sum += temperature
        self.count += 1
        print(
            f"[{self.name}] 温度统计: 最高 {self.max_temp:.1f}°C, "
            f"最低 {self.min_temp:.1f}°C, 平均 {self.average:.1f}°C"
        )


class ForecastDisplay(Observer):
    def __init__(self, name: str = "天气预报") -> None:
        self.name = name

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        if pressure > STANDARD_PRESSURE:
            forecast = "天气晴朗"
        elif pressure < STANDARD_PRESSURE:
            forecast = "可能有暴风雨"
        else:
            forecast = "天气保持不变"
        print(f"[{self.name}] 天气预报: {forecast}")


def main(argv=None) -> int:
    """Run the weather station demonstration."""
    weather_data = WeatherData()
    current = CurrentConditionsDisplay()
    stats = StatisticsDisplay()
    forecast = ForecastDisplay()

    print("=== 气象站观察者模式示例 ===")
    for display in (current, stats, forecast):
        weather_data.register_observer(display)
        print(f"注册观察者: {id(display):#x}")

    print("\n-- 第一次更新 --")
    weather_data.set_measurements(25.0, 65.0, 1015.0)

    print("\n-- 第二次更新 --")
    weather_data.set_measurements(28.0, 70.0, 1009.0)

    weather_data.remove_observer(stats)
    print(f"移除观察者: {id(stats):#x}")

    print("\n-- 第三次更新 (移除统计布告板后) --")
    weather_data.set_measurements(26.5, 68.0, 1011.0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())