from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .ants import AcoParams
from .benchmark import analyze_tsp_algorithms, format_report
from .graph import Graph, GraphFactory
from .paths import get_shortest_path_between_vertices, get_shortest_paths_between_all_vertices
from .spanning_tree import get_least_spanning_tree
from .timer import Stopwatch
from .traversal import breadth_first_search, depth_first_search
from .tsp import BRUTE_FORCE_LIMIT, TSPAlgorithm, solve_tsp

KIND_TITLES = {
    "unweighted_undirected": "Неориентированный, невзвешенный",
    "unweighted_directed": "Ориентированный, невзвешенный",
    "weighted_undirected": "Неориентированный, взвешенный",
    "weighted_directed": "Ориентированный, взвешенный",
    "undefined": "Не определён",
}


def build_argparser() -> argparse.ArgumentParser:
    '''Создаёт парсер аргументов командной строки'''
    p = argparse.ArgumentParser(
        prog="simple-navigator",
        description="Алгоритмы на графах: обходы, кратчайшие пути, остовное дерево, задача коммивояжёра.",
    )
    src = p.add_argument_group("Источник графа")
    src.add_argument("-f", "--file", type=str, default=None, help="Файл с матрицей смежности")
    src.add_argument("--random", type=int, default=None, metavar="N", help="Сгенерировать полный граф из N вершин")
    src.add_argument("--directed", action="store_true", help="Случайный граф ориентированный")
    src.add_argument("--low", type=int, default=1, help="Минимальный вес (для --random)")
    src.add_argument("--high", type=int, default=100, help="Максимальный вес (для --random)")
    src.add_argument("--seed", type=int, default=None, help="Seed для воспроизводимости")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("info", help="Тип графа и матрица смежности")
    for name, title in (("bfs", "Обход в ширину"), ("dfs", "Обход в глубину")):
        sp = sub.add_parser(name, help=title)
        sp.add_argument("start", type=int, help="Стартовая вершина (с 1)")
    sp = sub.add_parser("path", help="Кратчайший путь между двумя вершинами")
    sp.add_argument("source", type=int, help="Начальная вершина (с 1)")
    sp.add_argument("target", type=int, help="Конечная вершина (с 1)")
    sub.add_parser("all-paths", help="Кратчайшие пути между всеми парами вершин")
    sub.add_parser("mst", help="Минимальное остовное дерево")

    tsp = sub.add_parser("tsp", help="Задача коммивояжёра")
    tsp.add_argument("--algorithm", choices=[a.value for a in TSPAlgorithm], default=TSPAlgorithm.ANT_COLONY.value)
    tsp.add_argument("--max-vertices", type=int, default=BRUTE_FORCE_LIMIT, help="Граница для полного перебора")
    tsp.add_argument("--verbose", action="store_true", help="Печатать ход муравьиного алгоритма")
    _add_aco_arguments(tsp)

    an = sub.add_parser("analyze", help="Сравнение алгоритмов задачи коммивояжёра")
    an.add_argument("--iterations", type=int, default=1000, help="Число замеряемых запусков")
    _add_aco_arguments(an)

    dot = sub.add_parser("dot", help="Экспорт в формат DOT")
    dot.add_argument("--output", type=str, default=None, help="Файл для сохранения (по умолчанию stdout)")
    return p


def _add_aco_arguments(parser: argparse.ArgumentParser) -> None:
    aco = parser.add_argument_group("Параметры ACO")
    defaults = AcoParams()
    aco.add_argument("--ants", type=int, default=defaults.n_ants, help="Количество муравьёв")
    aco.add_argument("--iters", type=int, default=defaults.n_iterations, help="Число итераций")
    aco.add_argument("--alpha", type=float, default=defaults.alpha, help="Влияние феромона")
    aco.add_argument("--beta", type=float, default=defaults.beta, help="Влияние эвристики 1/d")
    aco.add_argument("--rho", type=float, default=defaults.rho, help="Испарение [0..1)")
    aco.add_argument("--q", type=float, default=defaults.q, help="Масштаб депонирования")
    aco.add_argument("--tau0", type=float, default=defaults.tau0, help="Начальная концентрация феромона")


def _aco_params(args: argparse.Namespace) -> AcoParams:
    return AcoParams(n_ants=args.ants, n_iterations=args.iters, alpha=args.alpha, beta=args.beta,
                     rho=args.rho, q=args.q, tau0=args.tau0)


def format_path(vertices: list[int]) -> str:
    return " -> ".join(str(v + 1) for v in vertices)


def format_matrix(matrix: list[list[int]]) -> str:
    n = len(matrix)
    border = "---+" * (n + 1)
    lines = ["   |" + "".join(f"{i + 1:>3}|" for i in range(n)), border]
    for i, row in enumerate(matrix):
        lines.append(f"{i + 1:>3}|" + " ".join(f"{x:>3}" for x in row) + "|")
        lines.append(border)
    return "\n".join(lines)


def _load_graph(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Graph:
    if args.random is not None:
        return GraphFactory.random_complete(args.random, directed=args.directed, low=args.low, high=args.high,
                                            seed=args.seed)
    if args.file is None:
        parser.error("нужен --file ПУТЬ или --random N")
    return Graph.from_file(args.file)


def _vertex(graph: Graph, number: int) -> int:
    if not 1 <= number <= graph.n:
        raise ValueError(f"Некорректный номер вершины: {number}")
    return number - 1


def run_command(graph: Graph, args: argparse.Namespace) -> None:
    cmd = args.command
    if cmd == "info":
        print("Тип графа:", KIND_TITLES[graph.kind().value])
        print(format_matrix(graph.matrix()))
    elif cmd in ("bfs", "dfs"):
        search = breadth_first_search if cmd == "bfs" else depth_first_search
        print(" ".join(str(v + 1) for v in search(graph, _vertex(graph, args.start))))
    elif cmd == "path":
        res = get_shortest_path_between_vertices(graph, _vertex(graph, args.source), _vertex(graph, args.target))
        if not res.reachable:
            print(f"Путь между вершинами {args.source} и {args.target} не существует")
            return
        print("Наименьшее расстояние:", res.distance)
        print(format_path(res.path))
    elif cmd == "all-paths":
        print("Матрица кратчайших расстояний между всеми вершинами:")
        print(format_matrix(get_shortest_paths_between_all_vertices(graph)))
    elif cmd == "mst":
        total, tree = get_least_spanning_tree(graph)
        print("Матрица смежности минимального остовного дерева:")
        print(format_matrix(tree))
        print("Вес минимального остовного дерева:", total)
    elif cmd == "tsp":
        watch = Stopwatch.start()
        outcome = solve_tsp(graph, args.algorithm, params=_aco_params(args), seed=args.seed,
                            max_vertices=args.max_vertices, verbose=args.verbose)
        elapsed = watch.stop()
        if not outcome.ok:
            raise ValueError(outcome.error or "Не удалось найти маршрут коммивояжёра")
        res = outcome.result
        print("Найденный маршрут:", format_path(res.vertices))
        print("Длина маршрута:", int(res.distance) if float(res.distance).is_integer() else res.distance)
        print(f"Время: {elapsed:.3f} мс")
    elif cmd == "analyze":
        reports = analyze_tsp_algorithms(graph, args.iterations, params=_aco_params(args), seed=args.seed)
        print(format_report(reports))
    elif cmd == "dot":
        if args.output:
            graph.to_dot(args.output)
            print("Сохранено:", Path(args.output))
        else:
            print(graph.dot_source(), end="")


def main(argv: list[str] | None = None) -> int:
    '''Точка входа simple-navigator'''
    parser = build_argparser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        graph = _load_graph(args, parser)
        run_command(graph, args)
    except (ValueError, RuntimeError) as exc:
        print(f"Ошибка: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
