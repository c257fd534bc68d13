"""
tests/test_main.py

Тесты командной строки и реестра пазлов.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from config import DEFAULT_PUZZLE, PUZZLES, SearchConfig, get_puzzle
from main import main
from utils.error_handling import ConfigError


def test_registry():
    assert DEFAULT_PUZZLE in PUZZLES
    for name, entry in PUZZLES.items():
        assert entry.state_class.solved().is_solved(), name
        assert entry.default_depth > 0
    with pytest.raises(ConfigError):
        get_puzzle('megaminx')


def test_search_config():
    assert SearchConfig().max_depth >= 0
    with pytest.raises(ConfigError):
        SearchConfig(max_depth=-1)


def test_solves_scramble(capsys):
    assert main(["R U R'", "--puzzle", "cube3", "--max-depth", "2"]) == 0
    out = capsys.readouterr().out
    assert "Ходов: 3" in out
    assert "R U' R'" in out


def test_distance_only(capsys):
    assert main(["R U", "-p", "cube2-urf", "-d", "1", "--no-path"]) == 0
    out = capsys.readouterr().out
    assert "Ходов: 2" in out
    assert "R'" not in out


def test_facelets_input(capsys):
    facelets = "UUUU RRRR FFFF DDDD LLLL BBBB"
    assert main(["--puzzle", "cube2", "--facelets", facelets, "-d", "1"]) == 0
    assert "Ходов: 0" in capsys.readouterr().out


def test_pyraminx(capsys):
    assert main(["U r'", "--puzzle", "pyraminx", "-d", "1"]) == 0
    assert "Ходов: 2" in capsys.readouterr().out


def test_not_found_exit_code(capsys):
    assert main(["R U R' U'", "-p", "cube3", "-d", "1"]) == 1
    assert "не найдено" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["R X"],
    ["--puzzle", "cube3", "--facelets", "UUU"],
    ["R", "--max-depth", "-1"],
])
def test_bad_input_exit_code(argv, capsys):
    assert main(argv) == 2
    assert "Ошибка" in capsys.readouterr().out
