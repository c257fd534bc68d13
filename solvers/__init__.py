"""
solvers - Поисковые движки

Экспортирует:
- BidirectionalSolver: двунаправленный BFS (основной)
- BreadthFirstSolver: односторонний BFS (эталон для проверок)
- solve_many: пакетное решение в нескольких процессах
"""

from .base import BaseSolver, SearchResult, SolverStats
from .bidirectional import BidirectionalSolver
from .bfs import BreadthFirstSolver
from .batch import solve_many
from .frontier import Side, Provenance, VisitedMap, FrontierQueue

__all__ = [
    'BaseSolver',
    'SearchResult',
    'SolverStats',
    'BidirectionalSolver',
    'BreadthFirstSolver',
    'solve_many',
    'Side',
    'Provenance',
    'VisitedMap',
    'FrontierQueue',
]
