"""
solvers/frontier.py

Очередь фронта и карта посещённых состояний для BFS.

Карта только пополняется: первая вставка состояния побеждает, поэтому
записанная глубина — минимальная, на которой его достиг фронт (BFS
раскрывает узлы в порядке неубывания глубины).
"""

import enum
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterator, List, Optional

from core.moves import Move
from core.state import PuzzleState


class Side(enum.Enum):
    """С какого конца пришёл фронт."""
    START = 'start'
    END = 'end'

    @property
    def other(self) -> 'Side':
        return Side.END if self is Side.START else Side.START


@dataclass(frozen=True)
class Provenance:
    """
    Происхождение состояния: сторона, глубина и (опционально) родитель
    вместе с ходом, который из родителя ведёт в это состояние.
    """
    side: Side
    depth: int
    parent: Optional[PuzzleState] = None
    move: Optional[Move] = None

    def child(self, parent: Optional[PuzzleState], move: Optional[Move]) -> 'Provenance':
        return Provenance(self.side, self.depth + 1, parent, move)


class VisitedMap:
    """Состояние → Provenance, только добавление."""

    def __init__(self):
        self._entries: Dict[PuzzleState, Provenance] = {}

    def add(self, state: PuzzleState, provenance: Provenance) -> Optional[Provenance]:
        """
        Добавляет состояние, если его ещё нет.

        Returns:
            None, если состояние новое; иначе уже записанное Provenance
            (оно не перезаписывается)
        """
        existing = self._entries.get(state)
        if existing is None:
            self._entries[state] = provenance
        return existing

    def get(self, state: PuzzleState) -> Optional[Provenance]:
        return self._entries.get(state)

    def __getitem__(self, state: PuzzleState) -> Provenance:
        return self._entries[state]

    def __contains__(self, state: PuzzleState) -> bool:
        return state in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def path_from_origin(self, state: PuzzleState) -> List[Move]:
        """
        Ходы от начала своей стороны до state (в прямом порядке).

        Требует, чтобы при вставке сохранялись родители.
        """
        moves: List[Move] = []
        provenance = self._entries[state]
        while provenance.depth > 0:
            if provenance.parent is None or provenance.move is None:
                raise ValueError("path reconstruction needs parent links")
            moves.append(provenance.move)
            provenance = self._entries[provenance.parent]
        moves.reverse()
        return moves


class FrontierQueue:
    """FIFO очередь состояний, ожидающих раскрытия."""

    def __init__(self):
        self._queue: Deque[PuzzleState] = deque()

    def push(self, state: PuzzleState) -> None:
        self._queue.append(state)

    def pop(self) -> PuzzleState:
        return self._queue.popleft()

    def peek(self) -> PuzzleState:
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __iter__(self) -> Iterator[PuzzleState]:
        return iter(self._queue)
