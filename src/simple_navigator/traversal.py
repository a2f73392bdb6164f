from __future__ import annotations

from collections import deque

from .graph import Graph


def depth_first_search(graph: Graph, start: int) -> list[int]:
    '''
    Обход в глубину без рекурсии

    Соседи кладутся в стек по убыванию индекса, поэтому извлекаются по возрастанию.
    Вершина попадает в результат при первом извлечении, повторы в стеке пропускаются.
    Некорректная стартовая вершина даёт пустой список.
    '''
    if not graph.has_vertex(start):
        return []
    visited = [False] * graph.n
    order = []
    stack = [start]
    while stack:
        cur = stack.pop()
        if visited[cur]:
            continue
        visited[cur] = True
        order.append(cur)
        for i in range(graph.n - 1, -1, -1):
            if graph.w[cur][i] > 0 and not visited[i]:
                stack.append(i)
    return order


def breadth_first_search(graph: Graph, start: int) -> list[int]:
    '''
    Обход в ширину

    Вершина помечается посещённой при постановке в очередь, а не при извлечении.
    '''
    if not graph.has_vertex(start):
        return []
    visited = [False] * graph.n
    visited[start] = True
    order = []
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        order.append(cur)
        for i in graph.neighbors(cur):
            if not visited[i]:
                visited[i] = True
                queue.append(i)
    return order
