"""
utils/monitoring.py

Мониторинг производительности.
"""

import time
from collections import defaultdict
from datetime import datetime
from functools import wraps
from typing import Any, Dict, List, Optional

from .logging import get_logger


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)
        self.timestamps: Dict[str, List[datetime]] = defaultdict(list)
        self.logger = get_logger()

    def record_time(self, operation: str, elapsed: float):
        """
        Записывает время выполнения операции.

        Args:
            operation: имя операции
            elapsed: время в секундах
        """
        self.metrics[operation].append(elapsed)
        self.timestamps[operation].append(datetime.now())

    def increment_counter(self, counter: str, value: int = 1):
        self.counters[counter] += value

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Возвращает статистику.

        Args:
            operation: имя операции (если None, возвращает общую статистику)
        """
        if operation:
            if operation not in self.metrics:
                return {}

            times = self.metrics[operation]
            return {
                'operation': operation,
                'count': len(times),
                'total': sum(times),
                'average': sum(times) / len(times),
                'min': min(times),
                'max': max(times),
                'last': times[-1],
            }

        stats = {
            'operations': {},
            'counters': dict(self.counters),
            'total_operations': sum(len(times) for times in self.metrics.values())
        }
        for op in self.metrics:
            stats['operations'][op] = self.get_stats(op)
        return stats

    def log_stats(self):
        """Пишет сводку в лог."""
        stats = self.get_stats()
        self.logger.info(f"Total operations: {stats['total_operations']}")
        for op, op_stats in stats['operations'].items():
            self.logger.info(
                f"  {op}: {op_stats['count']} calls, average {op_stats['average']:.3f}s"
            )
        for counter, value in stats['counters'].items():
            self.logger.info(f"  {counter}: {value}")

    def reset(self):
        """Сбрасывает все метрики."""
        self.metrics.clear()
        self.counters.clear()
        self.timestamps.clear()


# Глобальный монитор
_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Возвращает глобальный монитор."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Декоратор для мониторинга времени выполнения.

    Usage:
        @monitor_time('my_function')
        def my_function():
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            monitor = get_monitor()
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                monitor.record_time(f"{operation}_error", time.perf_counter() - start)
                raise
            monitor.record_time(operation, time.perf_counter() - start)
            return result
        return wrapper
    return decorator
