'''Задача коммивояжёра: три алгоритма и общая точка входа

Все алгоритмы предполагают полный взвешенный граф, но не проверяют это.
Вырожденные размеры (0 и 1 вершина) обрабатывает только диспетчер.
'''
from __future__ import annotations

import enum
import itertools
import logging
import math
from dataclasses import dataclass, field

from .ants import AcoParams, AntColony
from .errors import PreconditionError, TourNotFoundError
from .graph import Graph
from .tour import TourResult

logger = logging.getLogger(__name__)

# Больше вершин полный перебор на практике не успевает: (n-1)! перестановок
BRUTE_FORCE_LIMIT = 11


class TSPAlgorithm(enum.Enum):
    ANT_COLONY = "aco"
    NEAREST_NEIGHBOR = "nn"
    BRUTE_FORCE = "bf"


class NearestNeighborSolver:
    '''
    Жадный алгоритм ближайшего соседа от вершины 0

    Если из текущей вершины нет ребра в непосещённую, маршрут обрывается
    и замыкается как есть: это неполный результат, а не ошибка.
    '''

    def __init__(self, graph: Graph) -> None:
        self.g = graph

    def run(self) -> TourResult:
        n = self.g.n
        visited = [False] * n
        cur = 0
        visited[cur] = True
        tour = [cur]
        distance = 0.0

        for _ in range(1, n):
            nxt = self._nearest(cur, visited)
            if nxt is None:
                break
            visited[nxt] = True
            tour.append(nxt)
            distance += self.g.w[cur][nxt]
            cur = nxt

        if len(tour) > 1:
            distance += self.g.w[cur][tour[0]]
            tour.append(tour[0])
        return TourResult(tour, distance)

    def _nearest(self, cur: int, visited: list[bool]) -> int | None:
        best = None
        best_cost = math.inf
        for i, cost in enumerate(self.g.w[cur]):
            if not visited[i] and 0 < cost < best_cost:
                best, best_cost = i, cost
        return best


class BruteForceSolver:
    '''
    Полный перебор: все (n-1)! перестановок вершин 1..n-1 в лексикографическом порядке

    Attributes:
        graph: граф
        max_vertices: верхняя граница размера графа (None - без ограничения)
    '''

    def __init__(self, graph: Graph, max_vertices: int | None = None) -> None:
        self.g = graph
        self.max_vertices = max_vertices

    def run(self) -> TourResult:
        n = self.g.n
        if self.max_vertices is not None and n > self.max_vertices:
            raise PreconditionError(
                f"Полный перебор ограничен {self.max_vertices} вершинами, в графе {n}"
            )
        best_route: list[int] = []
        best_cost = math.inf
        for perm in itertools.permutations(range(1, n)):
            route = [0, *perm, 0]
            cost = self.g.tour_cost(route)
            if cost < best_cost:
                best_cost = cost
                best_route = route
        logger.debug("Полный перебор: n=%d, стоимость=%s", n, best_cost)
        return TourResult(best_route, best_cost)


class TspStatus(enum.Enum):
    SOLVED = "solved"
    # алгоритм отработал, но допустимого маршрута нет
    NO_TOUR = "no_tour"
    # граф не подходит алгоритму
    INFEASIBLE = "infeasible"
    # неизвестный алгоритм или внутренняя ошибка
    FAILED = "failed"


@dataclass(slots=True)
class TspOutcome:
    '''
    Результат диспетчера с явным статусом

    Attributes:
        status: исход решения
        result: маршрут (при неуспехе - пустой, с бесконечной длиной)
        error: текст ошибки для INFEASIBLE / FAILED
    '''
    status: TspStatus
    result: TourResult = field(default_factory=TourResult.not_found)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is TspStatus.SOLVED

    def to_result(self) -> TourResult:
        '''Сводит исход к прежнему соглашению: маршрут или ([], +inf)'''
        return self.result if self.ok else TourResult.not_found()


def _build_solver(graph: Graph, algorithm: TSPAlgorithm | str, params: AcoParams | None,
                  seed: int | None, max_vertices: int | None, verbose: bool = False):
    algorithm = TSPAlgorithm(algorithm)
    if algorithm is TSPAlgorithm.ANT_COLONY:
        return AntColony(graph, params, seed=seed, verbose=verbose)
    if algorithm is TSPAlgorithm.NEAREST_NEIGHBOR:
        return NearestNeighborSolver(graph)
    return BruteForceSolver(graph, max_vertices=max_vertices)


def solve_tsp(graph: Graph, algorithm: TSPAlgorithm | str = TSPAlgorithm.ANT_COLONY, *,
              params: AcoParams | None = None, seed: int | None = None,
              max_vertices: int | None = None, verbose: bool = False) -> TspOutcome:
    '''
    Решает задачу коммивояжёра выбранным алгоритмом

    Ошибки алгоритмов не выходят за пределы этой функции, они превращаются в статус.
    Raises:
        PreconditionError: в графе нет вершин
    '''
    if graph.n == 0:
        raise PreconditionError("Для задачи коммивояжёра нужна хотя бы одна вершина")
    if graph.n == 1:
        return TspOutcome(TspStatus.SOLVED, TourResult([0, 0], 0.0))

    try:
        solver = _build_solver(graph, algorithm, params, seed, max_vertices, verbose)
    except ValueError as exc:
        logger.warning("Неизвестный алгоритм TSP: %r", algorithm)
        return TspOutcome(TspStatus.FAILED, error=str(exc))

    try:
        result = solver.run()
    except (PreconditionError, TourNotFoundError) as exc:
        logger.warning("TSP (%s): %s", type(solver).__name__, exc)
        return TspOutcome(TspStatus.INFEASIBLE, error=str(exc))
    except Exception as exc:
        logger.exception("TSP (%s): внутренняя ошибка", type(solver).__name__)
        return TspOutcome(TspStatus.FAILED, error=str(exc))

    if not result.found:
        return TspOutcome(TspStatus.NO_TOUR)
    return TspOutcome(TspStatus.SOLVED, result)


def solve_traveling_salesman_problem(graph: Graph, algorithm: TSPAlgorithm | str = TSPAlgorithm.ANT_COLONY,
                                     **options) -> TourResult:
    '''Как solve_tsp, но возвращает маршрут или ([], +inf) при любом неуспехе'''
    return solve_tsp(graph, algorithm, **options).to_result()
