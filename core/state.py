"""
core/state.py

Контракт состояния головоломки и базовая упакованная реализация.

Поисковому движку нужны только три операции:
- legal_moves()  — фиксированный набор допустимых ходов;
- apply_move(m)  — новое состояние, исходное не меняется;
- solved()       — единственное каноническое собранное состояние.

PackedState хранит всё состояние в одном int (см. core/lanes.py),
поэтому __eq__, __hash__ и копирование — операции над одним числом.
"""

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple, Type, TypeVar

from utils.error_handling import InvalidMoveError, InvalidStateError
from .lanes import LaneLayout, LanePairs, MaskedPermutation
from .moves import Move, parse_moves


S = TypeVar('S', bound='PuzzleState')


class PuzzleState(ABC):
    """Абстрактное состояние головоломки."""

    __slots__ = ()

    @abstractmethod
    def legal_moves(self) -> Sequence[Move]:
        """Допустимые ходы из этого состояния."""

    @abstractmethod
    def apply_move(self: S, move: Move) -> S:
        """
        Применяет ход и возвращает новое состояние.

        Raises:
            InvalidMoveError: ход не входит в legal_moves()
        """

    @classmethod
    @abstractmethod
    def solved(cls: Type[S]) -> S:
        """Каноническое собранное состояние."""

    def is_solved(self) -> bool:
        return self == type(self).solved()

    def apply_moves(self: S, moves: Iterable[Move]) -> S:
        state = self
        for move in moves:
            state = state.apply_move(move)
        return state

    @classmethod
    def parse_moves(cls, text: str) -> List[Move]:
        known = {move.name: move for move in cls.solved().legal_moves()}
        return parse_moves(text, known)

    @classmethod
    def from_scramble(cls: Type[S], text: str) -> S:
        """Собранное состояние, к которому применён скрамбл."""
        return cls.solved().apply_moves(cls.parse_moves(text))


@dataclass(eq=False)
class PuzzleDefinition:
    """Всё, что нужно PackedState: раскладка, цвета, ходы и их программы."""
    layout: LaneLayout
    colors: str
    moves: Tuple[Move, ...]
    programs: Dict[Move, MaskedPermutation]
    solved_bits: int

    @classmethod
    def build(cls, colors: str, solved_colors: Sequence[int],
              move_pairs: Dict[Move, LanePairs]) -> 'PuzzleDefinition':
        """
        Компилирует определение пазла.

        Args:
            colors: буква для каждого цвета (индекс = цвет)
            solved_colors: цвет каждой наклейки в собранном состоянии
            move_pairs: для каждого хода пары (src, dst): new[dst] = old[src]
        """
        layout = LaneLayout(len(solved_colors), len(colors))
        programs = {move: layout.compile(pairs) for move, pairs in move_pairs.items()}
        return cls(
            layout=layout,
            colors=colors,
            moves=tuple(move_pairs),
            programs=programs,
            solved_bits=layout.encode(solved_colors),
        )


class PackedState(PuzzleState):
    """
    Состояние, упакованное в один int.

    Подклассы реализуют build_definition(); определение строится один раз
    на класс при первом обращении.
    """
    __slots__ = ('bits', '_hash')

    def __init__(self, bits: int):
        self.bits = bits
        self._hash = hash(bits)

    @classmethod
    def build_definition(cls) -> PuzzleDefinition:
        raise NotImplementedError(f"{cls.__name__} has no puzzle definition")

    @classmethod
    def definition(cls) -> PuzzleDefinition:
        definition = cls.__dict__.get('_definition')
        if definition is None:
            definition = cls.build_definition()
            cls._definition = definition
        return definition

    @classmethod
    def solved(cls):
        return cls(cls.definition().solved_bits)

    @classmethod
    def from_colors(cls, colors: Sequence[int]):
        return cls(cls.definition().layout.encode(colors))

    @classmethod
    def from_facelets(cls, text: str):
        """
        Состояние из строки наклеек (по букве цвета на наклейку).

        Пробелы игнорируются. Проверяются длина, алфавит и количество
        наклеек каждого цвета.

        Raises:
            InvalidStateError: строка не описывает состояние этого пазла
        """
        definition = cls.definition()
        text = ''.join(text.split())
        layout = definition.layout
        if len(text) != layout.lane_count:
            raise InvalidStateError(
                f"{cls.__name__}: expected {layout.lane_count} facelets, got {len(text)}"
            )
        unknown = set(text) - set(definition.colors)
        if unknown:
            raise InvalidStateError(
                f"{cls.__name__}: unknown colors {sorted(unknown)}"
            )
        expected = Counter(cls.solved().to_facelets())
        if Counter(text) != expected:
            raise InvalidStateError(
                f"{cls.__name__}: wrong color counts {dict(Counter(text))}"
            )
        return cls.from_colors([definition.colors.index(ch) for ch in text])

    def colors(self) -> List[int]:
        return self.definition().layout.decode(self.bits)

    def to_facelets(self) -> str:
        letters = self.definition().colors
        return ''.join(letters[c] for c in self.colors())

    def legal_moves(self) -> Tuple[Move, ...]:
        return self.definition().moves

    def apply_move(self, move: Move):
        program = self.definition().programs.get(move)
        if program is None:
            raise InvalidMoveError(
                f"{type(self).__name__} has no move {move}"
            )
        return type(self)(program(self.bits))

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other) -> bool:
        return type(other) is type(self) and self.bits == other.bits

    def __ne__(self, other) -> bool:
        return not self == other

    def __reduce__(self):
        return (type(self), (self.bits,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_facelets()!r})"
