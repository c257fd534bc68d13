"""
puzzles/cube.py

Кубы NxNxN в наклеечном представлении.

Грани хранятся в порядке U R F D L B, внутри грани — построчно, как на
стандартной развёртке (U над F, D под F). Цвет наклейки — буква грани,
на которой она стоит в собранном кубе, поэтому строка наклеек совпадает
с привычной записью "UUUUUUUUURRRRRRRRRFFF...".

Координаты удвоены, чтобы быть целыми: грань лежит в плоскости ±N,
центры наклеек — в нечётных точках -(N-1)..N-1.

Центры 3x3 хранятся как обычные наклейки. Повороты граней их не двигают,
так что размер пространства состояний от этого не меняется.
"""

from typing import Dict, List, Tuple

from core.lanes import LanePairs
from core.moves import quarter_turns
from core.state import PackedState, PuzzleDefinition
from .geometry import Sticker, Vector, dot, power_pairs, turn_pairs


FACE_ORDER = 'URFDLB'

# грань: (внешняя нормаль, направление "вправо", направление "вниз") на развёртке
FACE_FRAMES: Dict[str, Tuple[Vector, Vector, Vector]] = {
    'U': ((0, 1, 0), (1, 0, 0), (0, 0, 1)),
    'R': ((1, 0, 0), (0, 0, -1), (0, -1, 0)),
    'F': ((0, 0, 1), (1, 0, 0), (0, -1, 0)),
    'D': ((0, -1, 0), (1, 0, 0), (0, 0, -1)),
    'L': ((-1, 0, 0), (0, 0, 1), (0, -1, 0)),
    'B': ((0, 0, -1), (-1, 0, 0), (0, -1, 0)),
}


def cube_stickers(size: int) -> List[Sticker]:
    """Наклейки куба size x size x size в порядке хранения."""
    stickers = []
    for face in FACE_ORDER:
        normal, right, down = FACE_FRAMES[face]
        for row in range(size):
            for col in range(size):
                x = 2 * col - (size - 1)
                y = 2 * row - (size - 1)
                point = tuple(
                    size * normal[i] + x * right[i] + y * down[i] for i in range(3)
                )
                stickers.append(Sticker(face, point))
    return stickers


def face_turn_pairs(stickers: List[Sticker], size: int, face: str) -> LanePairs:
    """Поворот внешнего слоя грани face на 90° по часовой."""
    normal = FACE_FRAMES[face][0]
    return turn_pairs(
        stickers, normal, 90,
        # сама грань (N) и соседний с ней слой наклеек (N-1)
        lambda point: dot(point, normal) >= size - 1,
    )


class CubeState(PackedState):
    """
    Куб NxNxN.

    Подклассы задают SIZE, TURN_FACES (какими гранями можно крутить)
    и HALF_TURNS (добавлять ли ходы X2).
    """
    __slots__ = ()

    SIZE = 3
    TURN_FACES = FACE_ORDER
    HALF_TURNS = False

    @classmethod
    def build_definition(cls) -> PuzzleDefinition:
        stickers = cube_stickers(cls.SIZE)
        quarter = {
            face: face_turn_pairs(stickers, cls.SIZE, face)
            for face in cls.TURN_FACES
        }
        move_pairs = {
            move: power_pairs(quarter[move.face], move.turns)
            for move in quarter_turns(cls.TURN_FACES, 4, cls.HALF_TURNS)
        }
        solved = [FACE_ORDER.index(sticker.face) for sticker in stickers]
        return PuzzleDefinition.build(FACE_ORDER, solved, move_pairs)

    @classmethod
    def face_lanes(cls, face: str) -> range:
        """Индексы дорожек одной грани."""
        per_face = cls.SIZE * cls.SIZE
        start = FACE_ORDER.index(face) * per_face
        return range(start, start + per_face)

    def face_colors(self, face: str) -> str:
        text = self.to_facelets()
        lanes = self.face_lanes(face)
        return text[lanes.start:lanes.stop]


class Cube2State(CubeState):
    """Куб 2x2x2, все 12 четвертных поворотов."""
    __slots__ = ()
    SIZE = 2


class Cube2URFState(CubeState):
    """
    Куб 2x2x2 только с ходами U, R, F.

    Угол DLB никогда не двигается, поэтому каждое положение куба
    представлено ровно одной ориентацией: 3 674 160 состояний.
    """
    __slots__ = ()
    SIZE = 2
    TURN_FACES = 'URF'


class Cube3State(CubeState):
    """Куб 3x3x3, метрика четвертных поворотов (12 ходов)."""
    __slots__ = ()
    SIZE = 3


class Cube3HTMState(CubeState):
    """Куб 3x3x3, метрика половинных поворотов (18 ходов)."""
    __slots__ = ()
    SIZE = 3
    HALF_TURNS = True
