"""
utils/error_handling.py

Иерархия исключений и безопасный запуск решателей.

Исчерпание глубины поиска — не ошибка: оно возвращается как обычный
SearchResult без решения. Исключения здесь описывают только ошибки
программиста (неверный ход, испорченная дорожка) и неверный ввод.
"""

from typing import Any

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class PuzzleError(SolverError):
    """Нарушение контракта головоломки (ошибка в определении пазла)."""
    pass


class InvalidMoveError(PuzzleError):
    """Ход не входит в множество допустимых ходов состояния."""
    pass


class CorruptStateError(PuzzleError):
    """В упакованном состоянии встретился зарезервированный код дорожки."""
    pass


class InvalidStateError(SolverError):
    """Объект не является состоянием головоломки или строка наклеек невалидна."""
    pass


class InvalidScrambleError(SolverError):
    """Неизвестное обозначение хода в скрамбле."""
    pass


class ConfigError(SolverError):
    """Ошибка конфигурации (неизвестный пазл, отрицательная глубина)."""
    pass


def safe_solve(solver, state, max_depth: int, default: Any = None):
    """
    Безопасное выполнение solve с обработкой ошибок.

    Используется только на внешней границе (CLI): ошибки решателя
    логируются, вызывающий получает default.

    Args:
        solver: решатель
        state: начальное состояние
        max_depth: максимальная глубина с каждой стороны
        default: значение по умолчанию при ошибке

    Returns:
        SearchResult или default
    """
    try:
        return solver.solve(state, max_depth)
    except SolverError as e:
        logger = get_logger()
        logger.error(f"Ошибка решателя {solver.__class__.__name__}: {str(e)}")
        return default


def validate_state(state) -> bool:
    """
    Проверяет, что объект реализует контракт состояния головоломки.

    Raises:
        InvalidStateError: если состояние невалидно
    """
    from core.state import PuzzleState

    if state is None:
        raise InvalidStateError("Состояние не может быть None")

    if not isinstance(state, PuzzleState):
        raise InvalidStateError(
            f"Ожидалось PuzzleState, получено {type(state).__name__}"
        )

    return True
