"""
core/moves.py

Ход головоломки: имя, порядок и обратный ход.

Ход описывается осью/гранью (face), числом элементарных поворотов (turns)
и порядком поворота (order): 4 для граней куба, 3 для пирамидки.
Обратный ход — тот же face с turns' = order - turns, поэтому для
поворотов порядка 4 он совпадает с тремя повторениями хода.
Вес у всех ходов одинаковый: одно применение — один шаг поиска.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from utils.error_handling import InvalidScrambleError


@dataclass(frozen=True)
class Move:
    """Неизменяемый идентификатор хода."""
    face: str
    turns: int = 1
    order: int = 4

    def __post_init__(self):
        if self.order < 2:
            raise ValueError(f"move order must be >= 2, got {self.order}")
        if not 0 < self.turns < self.order:
            raise ValueError(
                f"turns must be in 1..{self.order - 1}, got {self.turns}"
            )

    @property
    def name(self) -> str:
        if self.turns == 1:
            return self.face
        if self.turns == self.order - 1:
            return self.face + "'"
        return f"{self.face}{self.turns}"

    @property
    def inverse(self) -> 'Move':
        return Move(self.face, self.order - self.turns, self.order)

    def repeat(self, times: int) -> Optional['Move']:
        """Ход, повторённый times раз; None если получилось тождество."""
        turns = (self.turns * times) % self.order
        if turns == 0:
            return None
        return Move(self.face, turns, self.order)

    def __str__(self) -> str:
        return self.name


def quarter_turns(faces: Iterable[str], order: int = 4,
                  half_turns: bool = False) -> List[Move]:
    """
    Перечисляет ходы для набора граней: X, X' и (опционально) X2.

    Для порядка 3 "половинного" хода нет, half_turns игнорируется.
    """
    moves: List[Move] = []
    for face in faces:
        moves.append(Move(face, 1, order))
        moves.append(Move(face, order - 1, order))
        if half_turns and order == 4:
            moves.append(Move(face, 2, order))
    return moves


def parse_moves(text: str, known: Dict[str, Move]) -> List[Move]:
    """
    Разбирает строку вида "R U R' U2".

    Args:
        text: ходы через пробел
        known: словарь имя → ход допустимых ходов

    Raises:
        InvalidScrambleError: если встретилось неизвестное обозначение
    """
    moves: List[Move] = []
    for token in text.split():
        # допускаем типографский апостроф
        token = token.replace('’', "'")
        move = known.get(token)
        if move is None and token[-1:].isdigit() and token[:-1] in known:
            # "R2" в метрике четвертных поворотов: R R
            moves.extend([known[token[:-1]]] * int(token[-1]))
            continue
        if move is None:
            raise InvalidScrambleError(
                f"unknown move {token!r}; expected one of {sorted(known)}"
            )
        moves.append(move)
    return moves


def format_moves(moves: Iterable[Move]) -> str:
    """Объединяет имена ходов через пробел."""
    return ' '.join(move.name for move in moves)
