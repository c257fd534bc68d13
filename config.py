"""
config.py

Настройки поиска и реестр пазлов.
"""

from dataclasses import dataclass
from typing import Dict, Type

from core.state import PackedState
from puzzles import (
    Cube2State, Cube2URFState, Cube3HTMState, Cube3State,
    PyraminxNoTipsState, PyraminxState,
)
from utils.error_handling import ConfigError


@dataclass(frozen=True)
class SearchConfig:
    """Параметры одного запуска поиска."""
    max_depth: int = 6
    reconstruct: bool = True
    verbose: bool = False

    def __post_init__(self):
        if self.max_depth < 0:
            raise ConfigError(f"max_depth must be >= 0, got {self.max_depth}")


@dataclass(frozen=True)
class PuzzleEntry:
    state_class: Type[PackedState]
    # граница с каждой стороны, покрывающая всё пространство состояний
    default_depth: int
    description: str


PUZZLES: Dict[str, PuzzleEntry] = {
    'cube2': PuzzleEntry(Cube2State, 7, '2x2x2, quarter turns of all faces'),
    'cube2-urf': PuzzleEntry(Cube2URFState, 7, '2x2x2, quarter turns of U, R, F'),
    'cube3': PuzzleEntry(Cube3State, 13, '3x3x3, quarter-turn metric'),
    'cube3-htm': PuzzleEntry(Cube3HTMState, 10, '3x3x3, half-turn metric'),
    'pyraminx': PuzzleEntry(PyraminxState, 8, 'Pyraminx with tips'),
    'pyraminx-notips': PuzzleEntry(PyraminxNoTipsState, 6, 'Pyraminx, layer turns only'),
}

DEFAULT_PUZZLE = 'cube2-urf'
DEFAULT_CONFIG = SearchConfig()


def get_puzzle(name: str) -> PuzzleEntry:
    """
    Raises:
        ConfigError: неизвестное имя пазла
    """
    try:
        return PUZZLES[name]
    except KeyError:
        raise ConfigError(
            f"unknown puzzle {name!r}; expected one of {sorted(PUZZLES)}"
        ) from None
