"""
core - Ядро решателя

Ходы, контракт состояния и упакованное представление наклеек.
"""

from .lanes import LaneLayout, MaskedPermutation, copy_masked
from .moves import Move, quarter_turns, parse_moves, format_moves
from .state import PuzzleState, PackedState, PuzzleDefinition

__all__ = [
    'LaneLayout', 'MaskedPermutation', 'copy_masked',
    'Move', 'quarter_turns', 'parse_moves', 'format_moves',
    'PuzzleState', 'PackedState', 'PuzzleDefinition',
]
