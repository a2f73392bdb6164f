from __future__ import annotations

import pytest
from conftest import DIRECTED_WEIGHTED, TRIANGLE, UNDIRECTED_WEIGHTED

from simple_navigator.cli import main


@pytest.fixture
def graph_file(tmp_path):
    def _write(rows):
        path = tmp_path / "graph.txt"
        path.write_text("\n".join(" ".join(map(str, r)) for r in rows), encoding="utf-8")
        return str(path)
    return _write


def test_bfs_dfs_are_one_based(graph_file, capsys):
    path = graph_file(DIRECTED_WEIGHTED)
    assert main(["--file", path, "bfs", "4"]) == 0
    assert capsys.readouterr().out.strip() == "4 1 5 2 6 3"
    assert main(["--file", path, "dfs", "1"]) == 0
    assert capsys.readouterr().out.strip() == "1 2 3 6"


def test_path(graph_file, capsys):
    path = graph_file(DIRECTED_WEIGHTED)
    assert main(["--file", path, "path", "4", "3"]) == 0
    out = capsys.readouterr().out
    assert "10" in out
    assert "4 -> 1 -> 2 -> 3" in out
    assert main(["--file", path, "path", "6", "1"]) == 0
    assert "не существует" in capsys.readouterr().out


def test_mst_error_goes_to_stderr(graph_file, capsys):
    assert main(["--file", graph_file(DIRECTED_WEIGHTED), "mst"]) == 1
    assert "Ошибка" in capsys.readouterr().err


def test_mst(graph_file, capsys):
    assert main(["--file", graph_file(UNDIRECTED_WEIGHTED), "mst"]) == 0
    assert "16" in capsys.readouterr().out


def test_tsp(graph_file, capsys):
    assert main(["--seed", "1", "--file", graph_file(TRIANGLE), "tsp", "--algorithm", "bf"]) == 0
    out = capsys.readouterr().out
    assert "Длина маршрута: 5" in out


def test_invalid_vertex(graph_file, capsys):
    assert main(["--file", graph_file(TRIANGLE), "bfs", "7"]) == 1
    assert "Некорректный номер вершины" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.txt"), "info"]) == 1
    assert "Не удалось открыть файл!" in capsys.readouterr().err


def test_random_graph_analyze(capsys):
    assert main(["--random", "4", "--seed", "2", "analyze", "--iterations", "2", "--ants", "2", "--iters", "3"]) == 0
    assert "Ближайший сосед" in capsys.readouterr().out


def test_dot_export(graph_file, tmp_path, capsys):
    out_path = tmp_path / "g.dot"
    assert main(["--file", graph_file(TRIANGLE), "dot", "--output", str(out_path)]) == 0
    assert out_path.read_text(encoding="utf-8").startswith("graph G {")
    assert main(["--file", graph_file(TRIANGLE), "all-paths"]) == 0
    assert "Матрица" in capsys.readouterr().out


def test_tsp_verbose_trace(graph_file, capsys):
    args = ["--seed", "3", "--file", graph_file(TRIANGLE), "tsp", "--verbose", "--ants", "2", "--iters", "2"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert out.count("Итерация") == 2
    assert "Длина маршрута: 5" in out
