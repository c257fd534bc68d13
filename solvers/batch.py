"""
solvers/batch.py

Пакетное решение многих скрамблов.

Каждый поиск владеет своей очередью и картой, общего изменяемого
состояния нет, поэтому независимые поиски безопасно раздавать
процессам ProcessPoolExecutor.
"""

import multiprocessing
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Sequence, Tuple

from core.state import PuzzleState
from utils.logging import get_logger
from utils.monitoring import get_monitor, monitor_time
from .base import SearchResult
from .bidirectional import BidirectionalSolver


def _solve_one(args: Tuple[PuzzleState, int, bool]) -> SearchResult:
    """Решает одну позицию (для параллельного запуска)."""
    state, max_depth, reconstruct = args
    solver = BidirectionalSolver(reconstruct=reconstruct, verbose=False)
    return solver.solve(state, max_depth)


@monitor_time('solve_many')
def solve_many(states: Sequence[PuzzleState], max_depth: int,
               workers: Optional[int] = None,
               reconstruct: bool = True) -> List[SearchResult]:
    """
    Решает все позиции, сохраняя порядок входа.

    Args:
        states: позиции
        max_depth: граница глубины с каждой стороны
        workers: число процессов; None — по числу CPU, <= 1 — в текущем процессе
        reconstruct: восстанавливать ли последовательности ходов

    Returns:
        список SearchResult той же длины, что и states
    """
    tasks = [(state, max_depth, reconstruct) for state in states]
    if workers is None:
        workers = multiprocessing.cpu_count()
    workers = min(workers, len(tasks))

    logger = get_logger()
    logger.debug(f"solve_many: {len(tasks)} positions, workers={workers}")

    if workers <= 1:
        results = [_solve_one(task) for task in tasks]
    else:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(_solve_one, tasks))

    monitor = get_monitor()
    monitor.increment_counter('positions', len(results))
    monitor.increment_counter('solved', sum(1 for r in results if r.found))
    return results
