from __future__ import annotations


class GraphFormatError(ValueError):
    '''Файл с матрицей смежности не удалось прочитать или разобрать'''


class PreconditionError(ValueError):
    '''
    Граф не удовлетворяет структурному требованию алгоритма

    Например: остовное дерево для ориентированного графа или TSP без вершин.
    '''


class TourNotFoundError(RuntimeError):
    '''Ни один муравей не смог построить замкнутый маршрут'''
