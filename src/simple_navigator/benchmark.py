from __future__ import annotations

import logging
from dataclasses import dataclass

from .ants import AcoParams
from .graph import Graph
from .timer import Stopwatch
from .tsp import BRUTE_FORCE_LIMIT, TSPAlgorithm, solve_traveling_salesman_problem

logger = logging.getLogger(__name__)

ALGORITHM_TITLES = {
    TSPAlgorithm.ANT_COLONY: "Муравьиный",
    TSPAlgorithm.NEAREST_NEIGHBOR: "Ближайший сосед",
    TSPAlgorithm.BRUTE_FORCE: "Полный перебор",
}


@dataclass(slots=True)
class AlgorithmReport:
    '''
    Итог замера одного алгоритма

    Attributes:
        algorithm: алгоритм
        distance: длина маршрута в проверочном запуске
        vertices: число вершин в маршруте проверочного запуска
        avg_time_ms: среднее время одного запуска
        skipped: алгоритм не запускался (граф слишком большой)
        consistent: последний замеренный запуск дал ту же длину, что и проверочный
    '''
    algorithm: TSPAlgorithm
    distance: float = float("inf")
    vertices: int = 0
    avg_time_ms: float = 0.0
    skipped: bool = False
    consistent: bool = True


def analyze_tsp_algorithms(graph: Graph, iterations: int = 1000, *, params: AcoParams | None = None,
                           seed: int | None = None, brute_force_limit: int = BRUTE_FORCE_LIMIT) -> list[AlgorithmReport]:
    '''
    Сравнивает алгоритмы TSP на одном графе

    Для каждого алгоритма: проверочный запуск, затем `iterations` замеренных запусков.
    Полный перебор пропускается, если вершин больше `brute_force_limit`.
    '''
    if iterations < 1:
        raise ValueError("iterations >= 1")
    reports = []
    for algorithm in TSPAlgorithm:
        report = AlgorithmReport(algorithm)
        reports.append(report)
        if algorithm is TSPAlgorithm.BRUTE_FORCE and graph.n > brute_force_limit:
            logger.warning("Полный перебор пропущен: %d вершин > %d", graph.n, brute_force_limit)
            report.skipped = True
            continue

        reference = solve_traveling_salesman_problem(graph, algorithm, params=params, seed=seed)
        report.distance = reference.distance
        report.vertices = len(reference.vertices)

        watch = Stopwatch.start()
        for _ in range(iterations):
            last = solve_traveling_salesman_problem(graph, algorithm, params=params, seed=seed)
        report.avg_time_ms = watch.stop() / iterations
        report.consistent = last.distance == reference.distance
        if not report.consistent:
            logger.warning("%s: результаты расходятся (%s и %s)", algorithm.value, reference.distance, last.distance)
        logger.info("%s: длина %s, %.4f мс", algorithm.value, report.distance, report.avg_time_ms)
    return reports


def format_report(reports: list[AlgorithmReport]) -> str:
    '''Таблица сравнения алгоритмов'''
    lines = [
        f"{'Алгоритм':<16}| {'Длина':>12} | {'Время (мс)':>12}",
        f"{'-' * 16}|{'-' * 14}|{'-' * 13}",
    ]
    for r in reports:
        title = ALGORITHM_TITLES[r.algorithm]
        if r.skipped:
            lines.append(f"{title:<16}| {'пропущен':>12} | {'-':>12}")
            continue
        mark = "" if r.consistent else " (нестабилен)"
        lines.append(f"{title:<16}| {r.distance:>12g} | {r.avg_time_ms:>12.4f}{mark}")
    return "\n".join(lines)
