"""
solvers/base.py

Базовый класс для всех решателей и общий тип результата.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from core.moves import Move, format_moves
from core.state import PuzzleState
from utils.error_handling import ConfigError
from utils.logging import get_logger


# наблюдатель прогресса: (глубина, число посещённых состояний)
ProgressCallback = Callable[[int, int], None]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_expanded: int = 0
    states_visited: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Expanded: {self.nodes_expanded}, "
            f"Visited: {self.states_visited}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


@dataclass
class SearchResult:
    """
    Итог одного поиска.

    distance is None — решения в пределах max_depth нет (обычный исход,
    не ошибка). moves is None, если восстановление пути отключено.
    """
    distance: Optional[int]
    moves: Optional[List[Move]] = None
    stats: SolverStats = field(default_factory=SolverStats)

    @property
    def found(self) -> bool:
        return self.distance is not None

    def __str__(self) -> str:
        if not self.found:
            return "no solution within bound"
        if self.moves is None:
            return f"{self.distance} moves"
        return format_moves(self.moves) or "(solved)"


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод solve().
    """

    def __init__(self, reconstruct: bool = True, verbose: bool = False,
                 progress: Optional[ProgressCallback] = None):
        self.reconstruct = reconstruct
        self.verbose = verbose
        self.progress = progress
        self.stats = SolverStats()
        self.logger = get_logger()

    @abstractmethod
    def solve(self, state: PuzzleState, max_depth: int,
              solved: Optional[PuzzleState] = None) -> SearchResult:
        """
        Ищет кратчайшее решение.

        Args:
            state: начальная (перемешанная) позиция
            max_depth: граница глубины поиска
            solved: целевое состояние (по умолчанию type(state).solved())

        Returns:
            SearchResult; distance is None, если граница исчерпана
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог: INFO при verbose=True, иначе DEBUG."""
        text = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            self.logger.info(text)
        else:
            self.logger.debug(text)

    def _report(self, depth: int, visited: int) -> None:
        """Сообщает наблюдателю о переходе на новую глубину."""
        self.stats.max_depth = max(self.stats.max_depth, depth)
        self._log(f"depth {depth}: {visited} positions")
        if self.progress is not None:
            self.progress(depth, visited)

    @staticmethod
    def _check_depth(max_depth: int) -> None:
        if max_depth < 0:
            raise ConfigError(f"max_depth must be >= 0, got {max_depth}")
