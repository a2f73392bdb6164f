from __future__ import annotations

import enum
import math
import random
import re
from collections.abc import Sequence
from pathlib import Path

from .errors import GraphFormatError

_CELL_SEPARATOR = re.compile(r"[,\s]+")


class GraphKind(enum.Enum):
    '''Тип графа, вычисляемый по матрице смежности'''
    UNWEIGHTED_UNDIRECTED = "unweighted_undirected"
    UNWEIGHTED_DIRECTED = "unweighted_directed"
    WEIGHTED_UNDIRECTED = "weighted_undirected"
    WEIGHTED_DIRECTED = "weighted_directed"
    UNDEFINED = "undefined"

    @property
    def directed(self) -> bool:
        return self in (GraphKind.UNWEIGHTED_DIRECTED, GraphKind.WEIGHTED_DIRECTED)

    @property
    def weighted(self) -> bool:
        return self in (GraphKind.WEIGHTED_UNDIRECTED, GraphKind.WEIGHTED_DIRECTED)


class Graph:
    '''
    Граф, заданный квадратной матрицей смежности

    Хранит матрицу `w[i][j]` (вес ребра i->j), 0 означает отсутствие ребра,
    в том числе на диагонали. Веса целые и неотрицательные.
    После создания матрица не меняется: алгоритмы только читают её.
    '''

    __slots__ = ("n", "w", "_kind")

    def __init__(self, weights: Sequence[Sequence[int]]) -> None:
        n = len(weights)
        if any(len(row) != n for row in weights):
            raise GraphFormatError("Граф не является квадратной матрицей!")
        rows = []
        for row in weights:
            cells = []
            for x in row:
                if isinstance(x, float) and not x.is_integer():
                    raise GraphFormatError(f"Вес ребра должен быть целым числом: {x}")
                value = int(x)
                if value < 0:
                    raise GraphFormatError("Вес ребра не может быть отрицательным!")
                cells.append(value)
            rows.append(tuple(cells))
        self.n: int = n
        self.w: tuple[tuple[int, ...], ...] = tuple(rows)
        self._kind = self._classify()

    # ---- Основные операции -------------------------------------------------
    def size(self) -> int:
        return self.n

    def __len__(self) -> int:
        return self.n

    def weight(self, i: int, j: int) -> int:
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"Вершина вне диапазона [0, {self.n}): ({i}, {j})")
        return self.w[i][j]

    def kind(self) -> GraphKind:
        return self._kind

    def matrix(self) -> list[list[int]]:
        return [list(row) for row in self.w]

    def has_vertex(self, v: int) -> bool:
        return 0 <= v < self.n

    def neighbors(self, v: int) -> list[int]:
        '''Вершины, в которые ведёт ребро из v, по возрастанию индекса'''
        return [j for j, x in enumerate(self.w[v]) if x > 0]

    def tour_cost(self, tour: Sequence[int]) -> float:
        '''
        Стоимость маршрута по последовательным рёбрам

        Замыкающая вершина должна быть включена в `tour` явно.
        Отсутствующее ребро (вес <= 0) делает маршрут недопустимым: +inf.
        '''
        if len(tour) < 2:
            return math.inf
        total = 0.0
        for a, b in zip(tour, tour[1:], strict=False):
            cost = self.w[a][b]
            if cost <= 0:
                return math.inf
            total += cost
        return total

    def _classify(self) -> GraphKind:
        if self.n == 0:
            return GraphKind.UNDEFINED
        weighted = any(x > 1 for row in self.w for x in row)
        directed = any(self.w[i][j] != self.w[j][i] for i in range(self.n) for j in range(i + 1, self.n))
        if weighted and directed:
            return GraphKind.WEIGHTED_DIRECTED
        if weighted:
            return GraphKind.WEIGHTED_UNDIRECTED
        if directed:
            return GraphKind.UNWEIGHTED_DIRECTED
        return GraphKind.UNWEIGHTED_UNDIRECTED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.w == other.w

    def __hash__(self) -> int:
        return hash(self.w)

    def __repr__(self) -> str:
        return f"Graph(n={self.n}, kind={self._kind.value})"

    # ---- Загрузка / сохранение --------------------------------------------
    @staticmethod
    def from_file(path: str | Path) -> Graph:
        '''Загружает граф из текстового файла с матрицей смежности

        Ячейки разделяются пробелами и/или запятыми, пустые строки пропускаются.
        '''
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.read().splitlines()
        except OSError as exc:
            raise GraphFormatError("Не удалось открыть файл!") from exc
        rows = []
        for line in lines:
            cells = [c for c in _CELL_SEPARATOR.split(line.strip()) if c]
            if not cells:
                continue
            try:
                rows.append([int(c) for c in cells])
            except ValueError as exc:
                raise GraphFormatError(f"Некорректное значение в строке: {line.strip()!r}") from exc
        if not rows:
            raise GraphFormatError("Файл пуст или содержит только пустые строки!")
        return Graph(rows)

    def dot_source(self) -> str:
        '''Описание графа на языке DOT (вершины нумеруются с 1)'''
        kind = self._kind
        connector = " -> " if kind.directed else " -- "
        lines = [("digraph" if kind.directed else "graph") + " G {", "  node [shape = circle];"]
        for i in range(self.n):
            for j in range(0 if kind.directed else i, self.n):
                if self.w[i][j] > 0:
                    label = f' [label="{self.w[i][j]}"]' if kind.weighted else ""
                    lines.append(f"  {i + 1}{connector}{j + 1}{label};")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def to_dot(self, path: str | Path) -> None:
        '''Сохраняет граф в dot-файл'''
        Path(path).write_text(self.dot_source(), encoding="utf-8")


class GraphFactory:
    '''Фабрика случайных графов для экспериментов и замеров'''

    @staticmethod
    def random_complete(n: int, *, directed: bool = False, low: int = 1, high: int = 100, seed: int | None = None) -> Graph:  # noqa: E501
        '''Создаёт полный граф размера n со случайными целыми весами в [low, high]'''
        if n < 1:
            raise ValueError("n >= 1")
        if low < 1 or high < low:
            raise ValueError("Требуется 1 <= low <= high")
        rng = random.Random(seed)
        w = [[0] * n for _ in range(n)]
        for i in range(n):
            for j in range(n):
                if i != j and (directed or j > i):
                    w[i][j] = rng.randint(low, high)
        if not directed:
            for i in range(n):
                for j in range(i + 1, n):
                    w[j][i] = w[i][j]
        return Graph(w)
