from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Stopwatch:
    '''
    Секундомер-значение: start() фиксирует момент запуска, stop() возвращает миллисекунды

    Глобального состояния нет, несколько замеров могут идти одновременно.
    '''
    started: float

    @classmethod
    def start(cls) -> Stopwatch:
        return cls(time.perf_counter())

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.started) * 1000.0

    def stop(self) -> float:
        return self.elapsed_ms()
