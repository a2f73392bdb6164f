from __future__ import annotations

from collections import deque
from typing import NamedTuple

from .graph import Graph


class PathResult(NamedTuple):
    '''
    Кратчайший путь между двумя вершинами

    Attributes:
        distance: длина пути, -1 если путь не существует или вершины некорректны
        path: вершины пути от начала до конца включительно (пусто, если пути нет)
    '''
    distance: int
    path: list[int]

    @property
    def reachable(self) -> bool:
        return self.distance >= 0

    @classmethod
    def unreachable(cls) -> PathResult:
        return cls(-1, [])


def _relax_from(graph: Graph, start: int) -> tuple[list[int | None], list[int]]:
    '''
    Поиск расстояний от start с FIFO-очередью (релаксация меток)

    Возвращает расстояния (None для недостижимых) и массив предков.
    Вершина, расстояние до которой уменьшилось после извлечения, снова
    ставится в очередь. Порядок обновлений определяет, какой из равных
    по длине путей будет восстановлен.
    '''
    n = graph.n
    distance: list[int | None] = [None] * n
    previous = [-1] * n
    in_queue = [False] * n

    distance[start] = 0
    previous[start] = start
    in_queue[start] = True
    queue = deque([start])

    while queue:
        cur = queue.popleft()
        in_queue[cur] = False
        for i in graph.neighbors(cur):
            candidate = distance[cur] + graph.w[cur][i]
            if distance[i] is None or candidate < distance[i]:
                distance[i] = candidate
                previous[i] = cur
                if not in_queue[i]:
                    in_queue[i] = True
                    queue.append(i)
    return distance, previous


def get_shortest_path_between_vertices(graph: Graph, start: int, finish: int) -> PathResult:
    '''Кратчайший путь между start и finish или (-1, []), если его нет'''
    if not graph.has_vertex(start) or not graph.has_vertex(finish) or start == finish:
        return PathResult.unreachable()

    distance, previous = _relax_from(graph, start)
    if distance[finish] is None:
        return PathResult.unreachable()

    path = []
    v = finish
    while v != previous[v] and previous[v] != -1:
        path.append(v)
        v = previous[v]
    path.append(start)
    path.reverse()
    return PathResult(distance[finish], path)


def all_pairs_distances(graph: Graph) -> list[list[int | None]]:
    '''Флойд-Уоршелл: матрица кратчайших расстояний, None для недостижимых пар'''
    n = graph.n
    dist: list[list[int | None]] = [
        [0 if i == j else (graph.w[i][j] or None) for j in range(n)] for i in range(n)
    ]
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik is None:
                continue
            row_i = dist[i]
            for j in range(n):
                d_kj = row_k[j]
                if d_kj is None:
                    continue
                if row_i[j] is None or d_ik + d_kj < row_i[j]:
                    row_i[j] = d_ik + d_kj
    return dist


def get_shortest_paths_between_all_vertices(graph: Graph) -> list[list[int]]:
    '''
    Матрица кратчайших расстояний между всеми парами вершин

    Недостижимые пары записываются как 0, так же как расстояние до самой себя.
    '''
    return [[0 if d is None else d for d in row] for row in all_pairs_distances(graph)]
