from __future__ import annotations

import time

from conftest import TRIANGLE

from simple_navigator import AcoParams, Graph, GraphFactory, TSPAlgorithm
from simple_navigator.benchmark import analyze_tsp_algorithms, format_report
from simple_navigator.timer import Stopwatch


def test_stopwatch_is_a_value():
    first = Stopwatch.start()
    second = Stopwatch.start()
    time.sleep(0.01)
    assert first.stop() >= 5.0
    assert second.elapsed_ms() > 0
    assert first.started <= second.started


def test_analyze_triangle():
    reports = analyze_tsp_algorithms(Graph(TRIANGLE), iterations=3, params=AcoParams(n_ants=3, n_iterations=5), seed=1)
    assert [r.algorithm for r in reports] == list(TSPAlgorithm)
    for r in reports:
        assert not r.skipped
        assert r.distance == 5
        assert r.vertices == 4
        assert r.avg_time_ms >= 0
        assert r.consistent
    table = format_report(reports)
    assert "Полный перебор" in table
    assert "пропущен" not in table


def test_analyze_skips_brute_force_above_limit():
    g = GraphFactory.random_complete(5, seed=1)
    reports = analyze_tsp_algorithms(g, iterations=1, params=AcoParams(n_ants=2, n_iterations=2), brute_force_limit=4)
    bf = next(r for r in reports if r.algorithm is TSPAlgorithm.BRUTE_FORCE)
    assert bf.skipped
    assert "пропущен" in format_report(reports)


def test_inconsistent_run_is_marked():
    from simple_navigator.benchmark import AlgorithmReport

    reports = [
        AlgorithmReport(TSPAlgorithm.ANT_COLONY, distance=7, vertices=4, avg_time_ms=1.0, consistent=False),
        AlgorithmReport(TSPAlgorithm.NEAREST_NEIGHBOR, distance=5, vertices=4, avg_time_ms=0.1),
    ]
    lines = format_report(reports).splitlines()
    assert lines[2].endswith("(нестабилен)")
    assert not lines[3].endswith("(нестабилен)")


def test_inconsistent_run_is_logged(caplog):
    # без seed муравьиный алгоритм на случайном графе даёт разные маршруты
    g = GraphFactory.random_complete(9, directed=True, low=1, high=1000, seed=8)
    with caplog.at_level("WARNING", logger="simple_navigator.benchmark"):
        reports = analyze_tsp_algorithms(g, iterations=1, params=AcoParams(n_ants=1, n_iterations=1),
                                         brute_force_limit=0)
    aco = reports[0]
    messages = [r.getMessage() for r in caplog.records if "расходятся" in r.getMessage()]
    assert bool(messages) == (not aco.consistent)
