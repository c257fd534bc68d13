"""
tests/test_frontier.py

Тесты карты посещённых состояний и очереди фронта.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.moves import Move
from puzzles import Cube3State
from solvers.frontier import FrontierQueue, Provenance, Side, VisitedMap


def test_side_other():
    assert Side.START.other is Side.END
    assert Side.END.other is Side.START


def test_first_insertion_wins():
    visited = VisitedMap()
    solved = Cube3State.solved()
    first = Provenance(Side.START, 2)
    assert visited.add(solved, first) is None
    # вторая вставка ничего не меняет и возвращает старую запись
    assert visited.add(solved, Provenance(Side.END, 0)) is first
    assert visited[solved] is first
    assert len(visited) == 1
    assert solved in visited
    assert visited.get(Cube3State.from_scramble("R")) is None


def test_path_from_origin():
    visited = VisitedMap()
    solved = Cube3State.solved()
    r, u = Move('R'), Move('U')
    root = Provenance(Side.END, 0)
    visited.add(solved, root)
    one = solved.apply_move(r)
    visited.add(one, root.child(solved, r))
    two = one.apply_move(u)
    visited.add(two, visited[one].child(one, u))

    assert visited[two].depth == 2
    assert visited[two].side is Side.END
    assert visited.path_from_origin(two) == [r, u]
    assert visited.path_from_origin(solved) == []


def test_path_needs_parents():
    visited = VisitedMap()
    solved = Cube3State.solved()
    root = Provenance(Side.START, 0)
    visited.add(solved, root)
    one = solved.apply_move(Move('F'))
    visited.add(one, root.child(None, Move('F')))
    with pytest.raises(ValueError):
        visited.path_from_origin(one)


def test_queue_is_fifo():
    queue = FrontierQueue()
    assert not queue
    states = [Cube3State.from_scramble(s) for s in ("R", "U", "F")]
    for state in states:
        queue.push(state)
    assert len(queue) == 3
    assert queue.peek() == states[0]
    assert list(queue) == states
    assert [queue.pop() for _ in range(3)] == states
    assert not queue
