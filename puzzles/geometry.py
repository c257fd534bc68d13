"""
puzzles/geometry.py

Геометрия наклеек: откуда берутся таблицы ходов.

Каждая наклейка — точка в пространстве (центр наклейки). Ход — поворот
части точек вокруг оси. Повёрнутую точку сопоставляем с ближайшей
наклейкой и получаем пару (src, dst). Так таблицы ходов остаются данными,
а не ручными списками индексов для каждого хода.
"""

import math
from typing import Callable, List, NamedTuple, Sequence, Tuple

from utils.error_handling import PuzzleError


Vector = Tuple[float, float, float]

# квадрат допустимого расстояния при сопоставлении точек
MATCH_TOLERANCE = 1e-9


class Sticker(NamedTuple):
    face: str
    point: Vector


def dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def add(*vectors: Vector) -> Vector:
    return (
        sum(v[0] for v in vectors),
        sum(v[1] for v in vectors),
        sum(v[2] for v in vectors),
    )


def scale(v: Vector, k: float) -> Vector:
    return (v[0] * k, v[1] * k, v[2] * k)


def normalize(v: Vector) -> Vector:
    length = math.sqrt(dot(v, v))
    return scale(v, 1.0 / length)


def rotate(v: Vector, axis: Vector, cos_t: float, sin_t: float) -> Vector:
    """
    Поворот вектора v вокруг единичной оси axis (формула Родрига).

    Для поворотов на 90° с целочисленной осью результат точный.
    """
    return add(
        scale(v, cos_t),
        scale(cross(axis, v), sin_t),
        scale(axis, dot(axis, v) * (1 - cos_t)),
    )


def clockwise(degrees: float) -> Tuple[float, float]:
    """
    (cos, sin) поворота по часовой стрелке, если смотреть с конца оси.

    Для 90° и 180° значения округляются до целых, чтобы целочисленная
    геометрия куба оставалась точной.
    """
    theta = -math.radians(degrees)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    if degrees % 90 == 0:
        cos_t, sin_t = float(round(cos_t)), float(round(sin_t))
    return cos_t, sin_t


def find_sticker(stickers: Sequence[Sticker], point: Vector) -> int:
    for index, sticker in enumerate(stickers):
        delta = add(sticker.point, scale(point, -1))
        if dot(delta, delta) < MATCH_TOLERANCE:
            return index
    raise PuzzleError(f"no sticker at {point}")


def turn_pairs(stickers: Sequence[Sticker], axis: Vector, degrees: float,
               in_layer: Callable[[Vector], bool]) -> List[Tuple[int, int]]:
    """
    Пары (src, dst) для поворота слоя вокруг axis на degrees по часовой.

    Raises:
        PuzzleError: повёрнутая наклейка не совпала ни с одной наклейкой
            (ошибка в описании геометрии пазла)
    """
    cos_t, sin_t = clockwise(degrees)
    pairs = []
    for src, sticker in enumerate(stickers):
        if not in_layer(sticker.point):
            continue
        moved = rotate(sticker.point, axis, cos_t, sin_t)
        pairs.append((src, find_sticker(stickers, moved)))
    return pairs


def compose_pairs(first: Sequence[Tuple[int, int]],
                  second: Sequence[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """
    Пары для "сначала first, затем second".

    Дорожки, которых нет среди приёмников, считаются неподвижными.
    """
    source_of = {dst: src for src, dst in first}
    lanes = {dst for _, dst in first} | {dst for _, dst in second}
    second_source = {dst: src for src, dst in second}
    result = []
    for dst in sorted(lanes):
        mid = second_source.get(dst, dst)
        src = source_of.get(mid, mid)
        if src != dst:
            result.append((src, dst))
    return result


def power_pairs(pairs: Sequence[Tuple[int, int]], times: int) -> List[Tuple[int, int]]:
    result: List[Tuple[int, int]] = []
    for _ in range(times):
        result = compose_pairs(result, pairs)
    return result
