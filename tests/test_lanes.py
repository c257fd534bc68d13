"""
tests/test_lanes.py

Тесты упакованного представления: дорожки, маски, перестановки.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.lanes import LaneLayout, copy_masked
from utils.error_handling import CorruptStateError


# поворот грани 3x3 по часовой: new[r][c] = old[2-c][r]
FACE_CW = [((2 - c) * 3 + r, r * 3 + c) for r in range(3) for c in range(3)]


def _pattern(layout: LaneLayout) -> int:
    """Кодирует 'разноцветное' состояние, чтобы перестановки были видны."""
    return layout.encode([lane % layout.n_values for lane in range(layout.lane_count)])


def test_width_reserves_patterns():
    """Ширина дорожки оставляет хотя бы один запрещённый код."""
    for n_values in (1, 2, 3, 4, 6, 7):
        layout = LaneLayout(9, n_values)
        assert (1 << layout.width) > n_values, "Нужен хотя бы один резервный код"
    assert LaneLayout(54, 6).width == 3
    assert LaneLayout(36, 4).width == 3


@pytest.mark.parametrize("n_values", [4, 6])
def test_set_get_roundtrip_every_lane(n_values):
    """set(i, v), затем get(i) == v; остальные дорожки не меняются."""
    layout = LaneLayout(54, n_values)
    base = _pattern(layout)
    for lane in range(layout.lane_count):
        for value in range(n_values):
            bits = layout.set(base, lane, value)
            assert layout.get(bits, lane) == value
            other = ~layout.lane_bits(lane)
            assert bits & other == base & other, f"Дорожка {lane} задела соседей"


def test_reserved_code_is_fatal():
    """Нулевой код (незаписанная дорожка) и коды выше числа цветов — ошибка."""
    layout = LaneLayout(9, 6)
    with pytest.raises(CorruptStateError):
        layout.get(0, 0)
    bits = layout.encode([0] * 9) | layout.lane_bits(4)  # код 0b111 = 7 > 6
    with pytest.raises(CorruptStateError):
        layout.decode(bits)


def test_set_rejects_unencodable_value():
    layout = LaneLayout(9, 6)
    with pytest.raises(CorruptStateError):
        layout.set(0, 0, 6)
    with pytest.raises(IndexError):
        layout.set(0, 9, 0)


def test_encode_decode():
    layout = LaneLayout(9, 6)
    values = [0, 1, 2, 3, 4, 5, 0, 1, 2]
    assert layout.decode(layout.encode(values)) == values
    with pytest.raises(ValueError):
        layout.encode(values[:-1])


def test_copy_masked_same_positions():
    """Маскированная копия берёт только биты под маской."""
    layout = LaneLayout(9, 6)
    dst = layout.encode([0] * 9)
    src = layout.encode([5] * 9)
    mask = layout.mask_of([2, 5, 8])
    out = copy_masked(dst, src, mask)
    assert layout.decode(out) == [0, 0, 5, 0, 0, 5, 0, 0, 5]


def test_compiled_permutation_matches_reference():
    """Скомпилированная перестановка совпадает с поэлементной."""
    layout = LaneLayout(9, 6)
    program = layout.compile(FACE_CW)
    bits = _pattern(layout)
    assert program(bits) == layout.permute(bits, FACE_CW)
    # центр на месте, угол 6 переехал в 0
    assert layout.get(program(bits), 4) == layout.get(bits, 4)
    assert layout.get(program(bits), 0) == layout.get(bits, 6)


def test_four_rotations_restore_bit_pattern():
    """Четыре поворота грани на 90° возвращают точно тот же int."""
    layout = LaneLayout(9, 6)
    program = layout.compile(FACE_CW)
    bits = _pattern(layout)
    rotated = bits
    for _ in range(4):
        rotated = program(rotated)
    assert rotated == bits
    assert program(bits) != bits


def test_compile_rejects_double_write():
    layout = LaneLayout(9, 6)
    with pytest.raises(ValueError):
        layout.compile([(0, 1), (2, 1)])


def test_compile_groups_by_shift():
    """Цикл из дорожек с одинаковым сдвигом — одна маска на сдвиг."""
    layout = LaneLayout(8, 6)
    # дорожки 0..3 сдвигаются на 4 вперёд, 4..7 — на 4 назад
    pairs = [(i, i + 4) for i in range(4)] + [(i + 4, i) for i in range(4)]
    program = layout.compile(pairs)
    assert len(program) == 2
    bits = layout.encode([0, 1, 2, 3, 4, 5, 0, 1])
    assert layout.decode(program(bits)) == [4, 5, 0, 1, 0, 1, 2, 3]
