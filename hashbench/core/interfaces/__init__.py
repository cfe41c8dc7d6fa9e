"""
Interface definitions for hashbench's services.
"""

from .logger import ILogger
from .presenter import IPresenter

__all__ = [
    "ILogger",
    "IPresenter",
]
