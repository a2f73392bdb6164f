from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import PreconditionError, TourNotFoundError
from .graph import Graph
from .tour import TourResult

logger = logging.getLogger(__name__)

# Порог "нулевой" привлекательности и эвристика для отсутствующих рёбер
EPSILON = 1e-9


@dataclass(slots=True)
class AcoParams:
    '''
    Параметры алгоритма муравьиной колонии

    Attributes:
        n_ants: количество муравьев на итерации
        n_iterations: количество итераций
        alpha: важность феромона
        beta: важность эвристической информации (обратной стоимости)
        rho: коэффициент испарения феромона (0 <= rho < 1)
        q: количество феромона, откладываемого муравьем
        tau0: начальное значение феромона на ребрах
    '''
    n_ants: int = 10
    n_iterations: int = 100
    alpha: float = 1.0
    beta: float = 2.0
    rho: float = 0.5
    q: float = 100.0
    tau0: float = 0.1

    def __post_init__(self) -> None:
        if self.n_ants < 1:
            raise PreconditionError("Количество муравьев должно быть >= 1")
        if self.n_iterations < 1:
            raise PreconditionError("Количество итераций должно быть >= 1")
        if not 0.0 <= self.rho < 1.0:
            raise PreconditionError("Коэффициент испарения должен лежать в [0, 1)")
        if self.q <= 0:
            raise PreconditionError("Количество откладываемого феромона должно быть > 0")
        if self.tau0 <= 0:
            raise PreconditionError("Начальный феромон должен быть > 0")


class AntColony:
    '''
    Алгоритм муравьиной колонии для задачи коммивояжера

    Состояние (феромоны, эвристика, генератор) создаётся заново в каждом run()
    и не разделяется между вызовами.

    Attributes:
        graph: граф (матрица весов), только для чтения
        params: параметры алгоритма (AcoParams)
        seed: зерно для генератора случайных чисел (None - системная энтропия)
        rng: готовый генератор; если задан, seed игнорируется
        early_stop: количество итераций без улучшения для ранней остановки (None - не использовать)
        verbose: вывод хода алгоритма
    '''
    def __init__(self, graph: Graph, params: AcoParams | None = None, *, seed: int | None = None,
                 rng: random.Random | None = None, early_stop: int | None = None,
                 verbose: bool = False) -> None:
        if graph.n <= 0:
            raise PreconditionError("Граф должен содержать хотя бы одну вершину")
        self.g = graph
        self.params = params or AcoParams()
        self.seed = seed
        self.rng = rng
        self.early_stop = early_stop
        self.verbose = verbose
        self.tau: list[list[float]] = []
        self.eta: list[list[float]] = []

    def run(self) -> TourResult:
        '''
        Запуск алгоритма муравьиной колонии

        Возвращает лучший найденный маршрут, замкнутый стартовой вершиной.
        Raises:
            TourNotFoundError: ни один муравей не построил допустимый маршрут
        '''
        rng = self.rng or random.Random(self.seed)
        self._initialize()
        best_tour: list[int] = []
        best_cost = math.inf
        n_no_improve = 0

        for it in range(1, self.params.n_iterations + 1):
            tours: list[list[int]] = []
            costs: list[float] = []
            improved = False

            for _ in range(self.params.n_ants):
                tour = self._construct_tour(rng)
                if not tour:
                    continue
                cost = self._tour_length(tour)
                tours.append(tour)
                costs.append(cost)
                if 0 < cost < best_cost:
                    best_cost = cost
                    best_tour = tour
                    improved = True

            self._evaporate()
            self._deposit(tours, costs)

            if self.verbose:
                print(f"Итерация {it}: муравьев с маршрутом {len(tours)}, лучший {best_tour}, стоимость={best_cost}")

            n_no_improve = 0 if improved else n_no_improve + 1
            if self.early_stop and n_no_improve >= self.early_stop:
                break

        if not best_tour:
            raise TourNotFoundError("Муравьиный алгоритм не нашёл ни одного допустимого маршрута")
        logger.debug("ACO: лучший маршрут %s, стоимость %s, итераций %d", best_tour, best_cost, it)
        return TourResult(best_tour + [best_tour[0]], best_cost)

    def _initialize(self) -> None:
        '''Начальные феромоны и эвристика 1/вес; у отсутствующих рёбер феромона нет'''
        n = self.g.n
        tau0 = self.params.tau0
        self.tau = [[0.0] * n for _ in range(n)]
        self.eta = [[0.0] * n for _ in range(n)]
        for i in range(n):
            for j in range(n):
                if i == j:
                    continue
                dist = self.g.w[i][j]
                if dist > 0:
                    self.tau[i][j] = tau0
                    self.eta[i][j] = 1.0 / dist
                else:
                    self.eta[i][j] = EPSILON

    def _construct_tour(self, rng: random.Random) -> list[int]:
        '''
        Построение тура одним муравьем из случайной вершины

        Returns:
            тур без замыкающей вершины или пустой список, если муравей застрял
        '''
        n = self.g.n
        cur = rng.randrange(n)
        tour = [cur]
        visited = [False] * n
        visited[cur] = True
        while len(tour) < n:
            nxt = self._choose_next(cur, visited, rng)
            if nxt is None:
                return []
            tour.append(nxt)
            visited[nxt] = True
            cur = nxt
        return tour

    def _choose_next(self, i: int, visited: Sequence[bool], rng: random.Random) -> int | None:
        '''
        Выбор следующей вершины рулеткой пропорционально tau^alpha * eta^beta

        Returns:
            выбранная вершина или None, если подходящих вершин нет
        '''
        alpha = self.params.alpha
        beta = self.params.beta
        candidates = []
        weights = []
        for j in range(self.g.n):
            if visited[j]:
                continue
            tau, eta = self.tau[i][j], self.eta[i][j]
            if tau <= EPSILON and eta <= EPSILON:
                continue
            candidates.append(j)
            weights.append(max((tau ** alpha) * (eta ** beta), EPSILON))

        if not candidates:
            return None

        spin = rng.uniform(0.0, sum(weights))
        cumulative = 0.0
        for j, score in zip(candidates, weights, strict=True):
            cumulative += score
            if spin <= cumulative:
                return j
        # погрешность округления
        return candidates[-1]

    def _tour_length(self, tour: Sequence[int]) -> float:
        return self.g.tour_cost([*tour, tour[0]])

    def _set_pheromone(self, i: int, j: int, value: float) -> None:
        '''Запись феромона на ребро: матрица всегда остаётся симметричной'''
        self.tau[i][j] = value
        self.tau[j][i] = value

    def _evaporate(self) -> None:
        '''Испарение феромонов на всех ребрах'''
        keep = 1.0 - self.params.rho
        n = self.g.n
        for i in range(n):
            for j in range(i + 1, n):
                self._set_pheromone(i, j, self.tau[i][j] * keep)

    def _deposit(self, tours: Sequence[Sequence[int]], costs: Sequence[float]) -> None:
        '''
        Откладывание феромонов муравьями на рёбрах их туров, включая замыкающее

        Туры с бесконечной или неположительной длиной пропускаются.
        '''
        q = self.params.q
        for tour, cost in zip(tours, costs, strict=True):
            if not math.isfinite(cost) or cost <= 0:
                continue
            amount = q / cost
            for a, b in zip(tour, [*tour[1:], tour[0]], strict=True):
                self._set_pheromone(a, b, self.tau[a][b] + amount)
