"""
tests/test_pyraminx.py

Тесты пирамидки: ходы порядка 3, верхушки, строки наклеек.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.moves import Move
from puzzles import PyraminxNoTipsState, PyraminxState
from puzzles.pyraminx import pyraminx_stickers, tip_move
from utils.error_handling import InvalidMoveError


def U(turns=1):
    return Move('U', turns, 3)


def test_sticker_count():
    assert len(pyraminx_stickers()) == 36
    assert PyraminxState.solved().to_facelets() == 'F' * 9 + 'L' * 9 + 'R' * 9 + 'D' * 9


def test_move_counts():
    assert len(PyraminxState.solved().legal_moves()) == 16
    assert len(PyraminxNoTipsState.solved().legal_moves()) == 8


def test_u_layer_turn():
    """U уносит два верхних ряда: F получает R, L получает F, D не трогается."""
    pyra = PyraminxState.solved().apply_move(U())
    assert pyra.face_colors('F') == 'RRRRFFFFF'
    assert pyra.face_colors('L') == 'FFFFLLLLL'
    assert pyra.face_colors('R') == 'LLLLRRRRR'
    assert pyra.face_colors('D') == 'D' * 9


def test_u_tip_turn():
    """Верхушка u двигает только по одной наклейке на трёх гранях."""
    pyra = PyraminxState.solved().apply_move(tip_move('U'))
    assert pyra.face_colors('F') == 'RFFFFFFFF'
    assert pyra.face_colors('L') == 'FLLLLLLLL'
    assert pyra.face_colors('R') == 'LRRRRRRRR'
    assert pyra.face_colors('D') == 'D' * 9


@pytest.mark.parametrize("cls", [PyraminxState, PyraminxNoTipsState])
def test_order_three(cls):
    """X X X — тождество, X' == X X, X X' — тождество."""
    state = cls.from_scramble("U L' R B' L")
    for move in state.legal_moves():
        once = state.apply_move(move)
        assert once != state, move.name
        assert once.apply_move(move).apply_move(move) == state, move.name
        assert once.apply_move(move.inverse) == state, move.name
        assert state.apply_move(move.inverse) == once.apply_move(move), move.name


def test_layer_turns_keep_tips_aligned():
    """Без ходов верхушек каждая верхушка совпадает с центром своего слоя."""
    pyra = PyraminxNoTipsState.from_scramble("U L R' B U' L' B R")
    facelets = pyra.to_facelets()
    for face in range(4):
        block = facelets[face * 9:(face + 1) * 9]
        # верхушка и центр под ней (общая сторона) двигаются вместе
        assert block[0] == block[2]
        assert block[4] == block[5]
        assert block[8] == block[7]


def test_tip_moves_commute_with_layers():
    scramble = PyraminxState.from_scramble("U L' R")
    b = tip_move('B')
    assert (
        PyraminxState.solved().apply_move(b).apply_moves(PyraminxState.parse_moves("U L' R"))
        == scramble.apply_move(b)
    )


def test_notips_rejects_tip_moves():
    with pytest.raises(InvalidMoveError):
        PyraminxNoTipsState.solved().apply_move(tip_move('U'))
    # ход куба (порядок 4) пирамидке не подходит
    with pytest.raises(InvalidMoveError):
        PyraminxState.solved().apply_move(Move('U'))


def test_prime_is_double_turn():
    moves = PyraminxState.parse_moves("U U'")
    assert moves == [U(), U(2)]
    assert PyraminxState.solved().apply_moves(moves).is_solved()
