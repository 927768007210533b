"""Clock — источник текущего времени и измерение интервалов.

- TimeProvider: разделяемый слот провайдера времени (get/stub)
- SystemTimeProvider: системные часы
- Timer: секундомер поверх провайдера
"""

from .time_provider import SystemTimeProvider, TimeProvider
from .timer import Timer

__all__ = [
    "TimeProvider",
    "SystemTimeProvider",
    "Timer",
]
