"""
puzzles/pyraminx.py

Пирамидка (Pyraminx): 4 грани по 9 наклеек, 4 цвета.

Вершины правильного тетраэдра:
    U = (1, 1, 1)      верх
    L = (-1, -1, 1)    передняя левая
    R = (1, -1, -1)    передняя правая
    B = (-1, 1, -1)    задняя

Грани (F, L, R, D) задаются тройкой (вершина-апекс, левая, правая),
как их видно снаружи. Наклейки грани нумеруются по рядам от апекса:

         0
       1 2 3
     4 5 6 7 8

Ходы:
- U L R B — поворот двух слоёв у вершины (всё, кроме противоположной грани);
- u l r b — поворот только верхушки (tip).
Все повороты имеют порядок 3: X' = X X.
"""

from typing import Dict, List, Tuple

from core.moves import Move, quarter_turns
from core.state import PackedState, PuzzleDefinition
from .geometry import Sticker, Vector, add, dot, normalize, power_pairs, scale, turn_pairs


VERTICES: Dict[str, Vector] = {
    'U': (1, 1, 1),
    'L': (-1, -1, 1),
    'R': (1, -1, -1),
    'B': (-1, 1, -1),
}

FACE_ORDER = 'FLRD'

# грань: (апекс, левая вершина, правая вершина) при взгляде снаружи
FACE_CORNERS: Dict[str, Tuple[str, str, str]] = {
    'F': ('U', 'L', 'R'),
    'L': ('U', 'B', 'L'),
    'R': ('U', 'R', 'B'),
    'D': ('B', 'R', 'L'),
}

# Для наклейки на грани, содержащей вершину V, dot(point, V) = 4a - 1,
# где a — барицентрический вес V. Разрезы пирамидки проходят по a = 2/3
# (верхушка) и a = 1/3 (два слоя); центры наклеек имеют a = k/9 и на
# разрезы не попадают.
TIP_THRESHOLD = 5.0 / 3.0
LAYER_THRESHOLD = 1.0 / 3.0


def _grid_point(apex: Vector, left: Vector, right: Vector, row: int, k: int) -> Vector:
    """Узел треугольной сетки: row шагов от апекса, k шагов вправо."""
    return add(
        apex,
        scale(add(left, scale(apex, -1)), (row - k) / 3.0),
        scale(add(right, scale(apex, -1)), k / 3.0),
    )


def _centroid(*points: Vector) -> Vector:
    return scale(add(*points), 1.0 / len(points))


def pyraminx_stickers() -> List[Sticker]:
    """36 наклеек в порядке хранения."""
    stickers = []
    for face in FACE_ORDER:
        apex, left, right = (VERTICES[v] for v in FACE_CORNERS[face])

        def node(row, k):
            return _grid_point(apex, left, right, row, k)

        for row in range(3):
            for k in range(row + 1):
                # треугольник "вершиной вверх"
                stickers.append(Sticker(face, _centroid(
                    node(row, k), node(row + 1, k), node(row + 1, k + 1))))
                if k < row:
                    # треугольник "вершиной вниз" правее него
                    stickers.append(Sticker(face, _centroid(
                        node(row, k), node(row, k + 1), node(row + 1, k + 1))))
    return stickers


def vertex_turn_pairs(stickers: List[Sticker], vertex: str, threshold: float):
    """Поворот на 120° по часовой (смотря на вершину) всех наклеек выше threshold."""
    corner = VERTICES[vertex]
    return turn_pairs(
        stickers, normalize(corner), 120,
        lambda point: dot(point, corner) > threshold,
    )


class PyraminxState(PackedState):
    """
    Пирамидка с ходами слоёв и верхушек (16 ходов).

    Верхушки тривиальны, но хранятся: без них собранное состояние
    не было бы единственным.
    """
    __slots__ = ()

    LAYER_MOVES = 'ULRB'
    TIP_MOVES = 'ulrb'

    @classmethod
    def build_definition(cls) -> PuzzleDefinition:
        stickers = pyraminx_stickers()
        base = {}
        for vertex in cls.LAYER_MOVES:
            base[vertex] = vertex_turn_pairs(stickers, vertex, LAYER_THRESHOLD)
        for tip in cls.TIP_MOVES:
            base[tip] = vertex_turn_pairs(stickers, tip.upper(), TIP_THRESHOLD)

        move_pairs = {
            move: power_pairs(base[move.face], move.turns)
            for move in quarter_turns(cls.LAYER_MOVES + cls.TIP_MOVES, order=3)
        }
        solved = [FACE_ORDER.index(sticker.face) for sticker in stickers]
        return PuzzleDefinition.build(FACE_ORDER, solved, move_pairs)

    @classmethod
    def face_lanes(cls, face: str) -> range:
        start = FACE_ORDER.index(face) * 9
        return range(start, start + 9)

    def face_colors(self, face: str) -> str:
        lanes = self.face_lanes(face)
        return self.to_facelets()[lanes.start:lanes.stop]


class PyraminxNoTipsState(PyraminxState):
    """
    Пирамидка только с ходами слоёв U L R B (8 ходов).

    Верхушки поворачиваются вместе со своими слоями и остаются
    выровненными: 933 120 состояний.
    """
    __slots__ = ()

    TIP_MOVES = ''


def tip_move(vertex: str, turns: int = 1) -> Move:
    """Ход верхушки у вершины vertex ('U', 'L', 'R', 'B')."""
    return Move(vertex.lower(), turns, 3)
