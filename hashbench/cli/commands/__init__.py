"""
Click command implementations for hashbench CLI.

Each module corresponds to a hashbench command (e.g., run.py implements
'hashbench run'). Commands are registered with the main CLI group via the
register_commands() function in hashbench.cli.
"""

from .algorithms import algorithms
from .config import config
from .run import run

COMMANDS = [
    algorithms,
    config,
    run,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "config",
    "run",
]
