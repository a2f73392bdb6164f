from __future__ import annotations

import pytest

from simple_navigator import Graph

DIRECTED_WEIGHTED = [
    [0, 5, 0, 0, 0, 0],
    [0, 0, 3, 0, 0, 0],
    [0, 0, 0, 0, 0, 4],
    [2, 0, 0, 0, 7, 0],
    [0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 0],
]

UNDIRECTED_WEIGHTED = [
    [0, 2, 4, 0, 0, 0],
    [2, 0, 0, 1, 0, 0],
    [4, 0, 0, 0, 3, 0],
    [0, 1, 0, 0, 5, 7],
    [0, 0, 3, 5, 0, 6],
    [0, 0, 0, 7, 6, 0],
]

DIRECTED_UNWEIGHTED = [
    [0, 1, 1, 0, 0, 0],
    [0, 0, 0, 1, 1, 0],
    [0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 1],
    [0, 0, 1, 0, 1, 0],
]

UNDIRECTED_UNWEIGHTED = [
    [0, 1, 1, 0, 0, 0],
    [1, 0, 0, 1, 1, 0],
    [1, 0, 0, 0, 0, 1],
    [0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 1],
    [0, 0, 1, 0, 1, 0],
]

DISCONNECTED_WEIGHTED = [
    [0, 2, 4, 0, 0, 0],
    [2, 0, 3, 0, 0, 0],
    [4, 3, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 0],
    [0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0, 0],
]

# Вершина 5 связана только с 4: гамильтонова цикла нет
NO_HAMILTONIAN_CYCLE = [
    [0, 1, 1, 0, 0, 0],
    [1, 0, 1, 1, 0, 0],
    [1, 1, 0, 1, 0, 0],
    [0, 1, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1],
    [0, 0, 0, 0, 1, 0],
]

TRIANGLE = [
    [0, 1, 2],
    [1, 0, 2],
    [2, 2, 0],
]


@pytest.fixture
def write_matrix(tmp_path):
    '''Записывает матрицу в текстовый файл и загружает граф, как это делает CLI'''
    def _write(rows, name="graph.txt"):
        path = tmp_path / name
        path.write_text("\n".join(" ".join(str(x) for x in row) for row in rows) + "\n", encoding="utf-8")
        return Graph.from_file(path)
    return _write
