"""TimeProvider — источник текущего времени для всего процесса.

Единственное разделяемое состояние библиотеки: слот с текущим провайдером.
- TimeProvider.get() — текущий провайдер (системный при первом обращении)
- TimeProvider.stub(provider) — подмена провайдера (None — возврат к системному)

Слот защищён threading.Lock и виден из всех потоков; провайдер
устанавливается один раз и никогда не уничтожается.
"""

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_installed: Optional["TimeProvider"] = None


class TimeProvider(ABC):
    """Абстрактный источник времени."""

    @abstractmethod
    def milli_time(self) -> int:
        """Миллисекунды от 1970-01-01T00:00:00Z (wall clock)."""

    @abstractmethod
    def nano_time(self) -> int:
        """Монотонные наносекунды от произвольной точки отсчёта."""

    @staticmethod
    def get() -> "TimeProvider":
        """
        Текущий провайдер процесса.

        При первом обращении устанавливается SystemTimeProvider.
        """
        global _installed
        with _lock:
            if _installed is None:
                _installed = SystemTimeProvider()
                logger.debug("time provider initialised: %s", type(_installed).__name__)
            return _installed

    @staticmethod
    def stub(provider: Optional["TimeProvider"]) -> None:
        """
        Подмена провайдера для всего процесса.

        Args:
            provider: Новый провайдер; None возвращает системный
        """
        global _installed
        replacement = provider if provider is not None else SystemTimeProvider()
        with _lock:
            _installed = replacement
        logger.debug("time provider replaced: %s", type(replacement).__name__)


class SystemTimeProvider(TimeProvider):
    """Системные часы: time.time_ns() и time.monotonic_ns()."""

    def milli_time(self) -> int:
        return time.time_ns() // 1_000_000

    def nano_time(self) -> int:
        return time.monotonic_ns()
