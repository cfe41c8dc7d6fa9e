"""
Presenters for hashbench output.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
