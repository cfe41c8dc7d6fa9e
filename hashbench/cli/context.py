"""
Click context extension for hashbench CLI.

Provides BenchContext dataclass that holds hashbench-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.settings import BenchSettings, load_settings


@dataclass
class BenchContext:
    """Extended context passed through Click command chain.

    Attributes:
        settings: Settings merged from config file, environment and defaults
    """

    settings: BenchSettings

    @classmethod
    def create(cls) -> BenchContext:
        """Load settings, searching for a config file upward from the cwd.

        Raises:
            ConfigError: If the configuration holds an invalid value
        """
        return cls(settings=load_settings(start_dir=str(Path.cwd())))

    @property
    def config_file(self) -> str | None:
        """Path of the config file in effect, if any."""
        return self.settings.config_file
