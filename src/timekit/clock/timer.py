"""Timer — измерение прошедшего времени.

Таймер запоминает nano_time провайдера в момент создания (или reset)
и отдаёт прошедшее время в любой TimeUnit с усечением.
"""

from typing import Optional

from timekit.clock.time_provider import TimeProvider
from timekit.core.domain.units import TimeUnit
from timekit.core.math.numerical_safeguards import require_not_none


class Timer:
    """Секундомер поверх TimeProvider."""

    def __init__(self, provider: TimeProvider) -> None:
        self._provider = require_not_none(provider, "provider")
        self._start = provider.nano_time()

    @classmethod
    def create(cls, provider: Optional[TimeProvider] = None) -> "Timer":
        """
        Запущенный таймер.

        Args:
            provider: Источник времени (по умолчанию текущий провайдер процесса)
        """
        return cls(provider if provider is not None else TimeProvider.get())

    def elapsed_time(self, unit: TimeUnit) -> int:
        """Прошедшее время в единицах unit (дробная часть отбрасывается)."""
        require_not_none(unit, "unit")
        return unit.convert(self._provider.nano_time() - self._start, TimeUnit.NANOSECONDS)

    def reset(self) -> "Timer":
        """Перезапуск отсчёта с текущего момента."""
        self._start = self._provider.nano_time()
        return self

    def to_string(self, unit: TimeUnit) -> str:
        """
        Прошедшее время строкой, например "15 ms".
        """
        return f"{self.elapsed_time(unit)} {unit.symbol}"

    def __str__(self) -> str:
        return self.to_string(TimeUnit.MILLISECONDS)
