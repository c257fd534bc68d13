"""
solvers/bfs.py

Обычный односторонний BFS от перемешанной позиции.

Медленнее двунаправленного (O(b^d)), зато очевидно корректен —
используется как эталон в тестах на маленьких пазлах.
Здесь max_depth — граница полной длины решения.
"""

import time
from typing import Optional

from core.state import PuzzleState
from utils.error_handling import validate_state
from .base import BaseSolver, SearchResult, SolverStats
from .frontier import FrontierQueue, Provenance, Side, VisitedMap


class BreadthFirstSolver(BaseSolver):
    """BFS от скрамбла до собранного состояния."""

    def solve(self, state: PuzzleState, max_depth: int,
              solved: Optional[PuzzleState] = None) -> SearchResult:
        validate_state(state)
        self._check_depth(max_depth)
        self.stats = SolverStats()
        start_time = time.perf_counter()

        if solved is None:
            solved = type(state).solved()

        visited = VisitedMap()
        queue = FrontierQueue()
        visited.add(state, Provenance(Side.START, 0))
        queue.push(state)
        last_depth = 0

        while queue:
            current = queue.pop()
            origin = visited[current]

            if current == solved:
                moves = visited.path_from_origin(current) if self.reconstruct else None
                return self._finish(origin.depth, moves, start_time, len(visited))

            if origin.depth != last_depth:
                last_depth = origin.depth
                self._report(last_depth, len(visited))

            if origin.depth >= max_depth:
                continue

            self.stats.nodes_expanded += 1
            parent = current if self.reconstruct else None
            for move in current.legal_moves():
                new_state = current.apply_move(move)
                if visited.add(new_state, origin.child(parent, move)) is None:
                    queue.push(new_state)

        self._log(f"No solution within max_depth={max_depth}. {self.stats}")
        return self._finish(None, None, start_time, len(visited))

    def _finish(self, distance, moves, start_time: float, visited: int) -> SearchResult:
        self.stats.states_visited = visited
        self.stats.time_elapsed = time.perf_counter() - start_time
        self.stats.solution_length = distance or 0
        return SearchResult(distance, moves, self.stats)
