"""
solutions/verify.py

Проверка найденных решений.
"""

from typing import Optional, Sequence

from core.moves import Move
from core.state import PuzzleState


def verify_solution(state: PuzzleState, moves: Sequence[Move],
                    solved: Optional[PuzzleState] = None) -> bool:
    """
    Проверяет, что последовательность ходов собирает state.

    Правила:
    - каждый ход должен входить в legal_moves() текущего состояния;
    - после применения всех ходов получаем solved
      (по умолчанию каноническое собранное состояние).
    """
    if solved is None:
        solved = type(state).solved()

    current = state
    for move in moves:
        if move not in current.legal_moves():
            return False
        current = current.apply_move(move)

    return current == solved
