"""
solvers/bidirectional.py

Bidirectional Search — двунаправленный поиск в ширину.

Одна FIFO очередь, засеянная [скрамбл, собранное], и одна карта
посещённых состояний. Каждое состояние помечено стороной, которая
нашла его первой. Когда ход из состояния одной стороны попадает в
состояние другой, фронты встретились: длина = d + 1 + depth(next).

Граница max_depth ограничивает раскрытие, а не проверку встречи:
узел глубины max_depth вставляется и проверяется, но не раскрывается.
Поэтому max_depth = k находит решения длиной до 2k.
"""

import time
from typing import List, Optional, Tuple

from core.moves import Move
from core.state import PuzzleState
from utils.error_handling import validate_state
from .base import BaseSolver, SearchResult, SolverStats
from .frontier import FrontierQueue, Provenance, Side, VisitedMap


# (длина, раскрываемое состояние, ход, состояние другой стороны)
Meeting = Tuple[int, PuzzleState, Move, PuzzleState]


class BidirectionalSolver(BaseSolver):
    """
    Двунаправленный поиск.

    Ищет одновременно:
    - от перемешанной позиции вперёд
    - от собранной позиции назад

    Встречаются посередине — O(b^(d/2)) вместо O(b^d).
    """

    def solve(self, state: PuzzleState, max_depth: int,
              solved: Optional[PuzzleState] = None) -> SearchResult:
        validate_state(state)
        self._check_depth(max_depth)
        self.stats = SolverStats()
        start_time = time.perf_counter()

        if solved is None:
            solved = type(state).solved()

        # Обе стороны засеяны на глубине 0: совпадение обрабатываем явно,
        # иначе вторая вставка в карту была бы потеряна.
        if state == solved:
            self._log("Start state is already solved")
            return self._finish(0, [] if self.reconstruct else None, start_time, 1)

        self._log(f"Starting Bidirectional (max_depth={max_depth})")

        visited = VisitedMap()
        queue = FrontierQueue()
        visited.add(state, Provenance(Side.START, 0))
        visited.add(solved, Provenance(Side.END, 0))
        queue.push(state)
        queue.push(solved)

        best: Optional[Meeting] = None
        best_layer = 0
        last_depth = 0

        while queue:
            if best is not None and visited[queue.peek()].depth > best_layer:
                # слой, в котором нашлась встреча, раскрыт полностью
                break

            current = queue.pop()
            origin = visited[current]
            depth = origin.depth

            if depth != last_depth:
                last_depth = depth
                self._report(depth, len(visited))

            if depth >= max_depth:
                continue

            self.stats.nodes_expanded += 1
            parent = current if self.reconstruct else None

            for move in current.legal_moves():
                new_state = current.apply_move(move)
                seen = visited.add(new_state, origin.child(parent, move))

                if seen is None:
                    queue.push(new_state)
                elif seen.side is not origin.side:
                    length = depth + 1 + seen.depth
                    if best is None or length < best[0]:
                        best = (length, current, move, new_state)
                        best_layer = depth

        self.stats.states_visited = len(visited)

        if best is None:
            self._log(f"No solution within max_depth={max_depth}. {self.stats}")
            return self._finish(None, None, start_time, len(visited))

        length, current, move, other = best
        moves = self._reconstruct(visited, current, move, other) if self.reconstruct else None
        self._log(f"Met at length {length}! {self.stats}")
        return self._finish(length, moves, start_time, len(visited))

    def _finish(self, distance: Optional[int], moves: Optional[List[Move]],
                start_time: float, visited: int) -> SearchResult:
        self.stats.states_visited = visited
        self.stats.time_elapsed = time.perf_counter() - start_time
        self.stats.solution_length = distance or 0
        return SearchResult(distance, moves, self.stats)

    @staticmethod
    def _reconstruct(visited: VisitedMap, current: PuzzleState, move: Move,
                     other: PuzzleState) -> List[Move]:
        """
        Собирает прямой путь скрамбл → собранное через ребро встречи.

        Ходы со стороны END разворачиваются: обратные ходы в обратном порядке.
        """
        if visited[current].side is Side.START:
            head = visited.path_from_origin(current) + [move]
            tail = visited.path_from_origin(other)
        else:
            head = visited.path_from_origin(other) + [move.inverse]
            tail = visited.path_from_origin(current)
        return head + [m.inverse for m in reversed(tail)]
