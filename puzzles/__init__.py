"""
puzzles - Конкретные головоломки

Экспортирует:
- Cube2State, Cube2URFState: куб 2x2x2
- Cube3State, Cube3HTMState: куб 3x3x3
- PyraminxState, PyraminxNoTipsState: пирамидка
"""

from .cube import (
    CubeState, Cube2State, Cube2URFState, Cube3State, Cube3HTMState
)
from .pyraminx import PyraminxState, PyraminxNoTipsState

__all__ = [
    'CubeState',
    'Cube2State',
    'Cube2URFState',
    'Cube3State',
    'Cube3HTMState',
    'PyraminxState',
    'PyraminxNoTipsState',
]
