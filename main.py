#!/usr/bin/env python3
"""
main.py

Точка входа: минимальное число ходов для заданной позиции.

Использование:
    python main.py "R U R' U'"                       # 2x2 (U, R, F)
    python main.py --puzzle cube3 "R U R' U R U2 R'" --max-depth 4
    python main.py --puzzle pyraminx "U L' R b"
    python main.py --puzzle cube2 --facelets "UUUU RRRR FFFF DDDD LLLL BBBB"
"""

import argparse
import logging
import sys
from typing import List, Optional

from config import DEFAULT_PUZZLE, PUZZLES, SearchConfig, get_puzzle
from solutions.verify import verify_solution
from solvers import BidirectionalSolver
from utils.error_handling import SolverError, safe_solve
from utils.logging import get_logger, setup_file_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Bidirectional BFS solver for small twisty puzzles',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Пазлы:\n" + "\n".join(
            f"  {name:<16} {entry.description}" for name, entry in PUZZLES.items()
        ),
    )
    parser.add_argument(
        'scramble', nargs='?', default='',
        help="Скрамбл от собранного состояния, например \"R U R' U'\""
    )
    parser.add_argument(
        '--puzzle', '-p', choices=list(PUZZLES.keys()),
        default=DEFAULT_PUZZLE, help=f'Пазл (default: {DEFAULT_PUZZLE})'
    )
    parser.add_argument(
        '--facelets', '-f',
        help='Позиция строкой наклеек вместо скрамбла'
    )
    parser.add_argument(
        '--max-depth', '-d', type=int,
        help='Граница глубины с каждой стороны (default: покрывает весь пазл)'
    )
    parser.add_argument(
        '--no-path', action='store_true',
        help='Только длина решения, без восстановления ходов'
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Логировать прогресс по глубинам')
    parser.add_argument('--log-file', help='Дублировать лог в файл')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file)

    try:
        entry = get_puzzle(args.puzzle)
        config = SearchConfig(
            max_depth=args.max_depth if args.max_depth is not None else entry.default_depth,
            reconstruct=not args.no_path,
            verbose=args.verbose,
        )
        state_class = entry.state_class
        if args.facelets:
            state = state_class.from_facelets(args.facelets)
        else:
            state = state_class.from_scramble(args.scramble)
    except SolverError as e:
        print(f"❌ Ошибка: {e}")
        return 2

    print(f"🎯 {args.puzzle}: {state.to_facelets()}")
    print(f"🔧 max_depth={config.max_depth} с каждой стороны")

    solver = BidirectionalSolver(reconstruct=config.reconstruct, verbose=config.verbose)
    result = safe_solve(solver, state, config.max_depth)
    if result is None:
        return 2

    if not result.found:
        print("\n❌ Решение не найдено в пределах max_depth")
        print(f"⏱ {result.stats}")
        return 1

    if result.moves is not None and not verify_solution(state, result.moves):
        print("\n❌ Найдено некорректное решение (валидация не пройдена)")
        return 2

    print(f"\n✅ Ходов: {result.distance}")
    if result.moves is not None:
        print(f"   {result}")
    print(f"⏱ {result.stats}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
