"""Алгоритмы на графах, заданных матрицей смежности.

Пакет предоставляет:
- simple_navigator.graph: классы Graph, GraphKind, GraphFactory
- simple_navigator.traversal: обходы в глубину и в ширину
- simple_navigator.paths: кратчайшие пути (одна пара и все пары)
- simple_navigator.spanning_tree: минимальное остовное дерево
- simple_navigator.tsp, simple_navigator.ants: задача коммивояжёра
- simple_navigator.cli: CLI для запуска из терминала
"""
from .ants import AcoParams, AntColony
from .errors import GraphFormatError, PreconditionError, TourNotFoundError
from .graph import Graph, GraphFactory, GraphKind
from .paths import (
    PathResult,
    all_pairs_distances,
    get_shortest_path_between_vertices,
    get_shortest_paths_between_all_vertices,
)
from .spanning_tree import get_least_spanning_tree
from .tour import TourResult
from .traversal import breadth_first_search, depth_first_search
from .tsp import (
    BruteForceSolver,
    NearestNeighborSolver,
    TSPAlgorithm,
    TspOutcome,
    TspStatus,
    solve_traveling_salesman_problem,
    solve_tsp,
)

__all__ = [
    "Graph", "GraphKind", "GraphFactory",
    "GraphFormatError", "PreconditionError", "TourNotFoundError",
    "depth_first_search", "breadth_first_search",
    "PathResult", "get_shortest_path_between_vertices", "get_shortest_paths_between_all_vertices",
    "all_pairs_distances", "get_least_spanning_tree",
    "AcoParams", "AntColony", "TourResult", "TSPAlgorithm", "TspStatus", "TspOutcome",
    "NearestNeighborSolver", "BruteForceSolver", "solve_tsp", "solve_traveling_salesman_problem",
]
