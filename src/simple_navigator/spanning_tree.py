from __future__ import annotations

import heapq
import itertools
import logging

from .errors import PreconditionError
from .graph import Graph, GraphKind
from .traversal import breadth_first_search

logger = logging.getLogger(__name__)


def get_least_spanning_tree(graph: Graph) -> tuple[int, list[list[int]]]:
    '''
    Минимальное остовное дерево (алгоритм Прима от вершины 0)

    Returns:
        суммарный вес дерева и симметричная матрица смежности дерева
    Raises:
        PreconditionError: граф не взвешенный неориентированный или несвязный
    '''
    if graph.kind() is not GraphKind.WEIGHTED_UNDIRECTED:
        raise PreconditionError(
            f"Алгоритм Прима применим только к взвешенным неориентированным графам (тип графа: {graph.kind().value})"
        )
    if len(breadth_first_search(graph, 0)) != graph.n:
        raise PreconditionError("Алгоритм Прима применим только к связным графам")

    n = graph.n
    key: list[int | None] = [None] * n
    parent = [-1] * n
    in_tree = [False] * n
    # (вес ребра, порядок вставки, вершина): при равных весах побеждает ребро, добавленное раньше
    order = itertools.count()
    heap = [(0, next(order), 0)]
    key[0] = 0
    total = 0

    while heap:
        edge, _, v = heapq.heappop(heap)
        if in_tree[v]:
            continue
        in_tree[v] = True
        total += edge
        for i in graph.neighbors(v):
            w = graph.w[v][i]
            if not in_tree[i] and (key[i] is None or w < key[i]):
                key[i] = w
                parent[i] = v
                heapq.heappush(heap, (w, next(order), i))

    tree = [[0] * n for _ in range(n)]
    for i, p in enumerate(parent):
        if p != -1:
            tree[i][p] = tree[p][i] = graph.w[i][p]
    logger.debug("Остовное дерево построено: n=%d, вес=%d", n, total)
    return total, tree
