"""
setup.py

Установка twisty_solver.

Использование:
    pip install -e .            # разработка
    pip install -e .[tests]     # с pytest
    twisty-solve "R U R' U'"    # после установки
"""

from setuptools import setup

setup(
    name="twisty_solver",
    version="1.0.0",
    description="Bidirectional BFS solver for small twisty puzzles",
    python_requires=">=3.8",
    packages=["core", "puzzles", "solvers", "solutions", "utils"],
    py_modules=["config", "main"],
    extras_require={
        "tests": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "twisty-solve=main:main",
        ],
    },
    zip_safe=False,
)
