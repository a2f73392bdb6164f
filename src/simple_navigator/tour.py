from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(slots=True)
class TourResult:
    '''
    Результат задачи коммивояжёра

    Attributes:
        vertices: замкнутый маршрут, первая вершина повторена в конце
        distance: длина маршрута; +inf вместе с пустым маршрутом означает "маршрут не найден"
    '''
    vertices: list[int] = field(default_factory=list)
    distance: float = math.inf

    @property
    def found(self) -> bool:
        return bool(self.vertices) and math.isfinite(self.distance)

    @classmethod
    def not_found(cls) -> TourResult:
        return cls([], math.inf)
