"""
tests/test_batch.py

Тесты пакетного решения.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from puzzles import Cube2URFState
from solutions.verify import verify_solution
from solvers import solve_many
from utils.monitoring import get_monitor


SCRAMBLES = ["R", "R U", "R U F'", "", "U R U' R'"]


@pytest.mark.parametrize("workers", [1, 2])
def test_results_keep_input_order(workers):
    states = [Cube2URFState.from_scramble(s) for s in SCRAMBLES]
    results = solve_many(states, 2, workers=workers)
    assert len(results) == len(states)
    assert [r.distance for r in results] == [1, 2, 3, 0, 4]
    for state, result in zip(states, results):
        assert verify_solution(state, result.moves)


def test_unreachable_within_bound():
    states = [Cube2URFState.from_scramble("R U R' U'"), Cube2URFState.from_scramble("F")]
    results = solve_many(states, 1, workers=1, reconstruct=False)
    assert [r.found for r in results] == [False, True]
    assert results[1].moves is None


def test_monitor_counts_positions():
    monitor = get_monitor()
    monitor.reset()
    solve_many([Cube2URFState.solved(), Cube2URFState.from_scramble("U")], 1, workers=1)
    stats = monitor.get_stats()
    assert stats['counters']['positions'] == 2
    assert stats['counters']['solved'] == 2
    assert stats['operations']['solve_many']['count'] == 1
