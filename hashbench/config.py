"""Configurable keys and dot-notation lookup for `hashbench config`."""

from __future__ import annotations

from typing import Any

# Config keys shown by `hashbench config list`
CONFIGURABLE_KEYS = {
    "benchmark.size": {
        "type": int,
        "default": 10,
        "description": "Megabytes of random data to generate when no file is given",
    },
    "benchmark.unit": {
        "type": str,
        "default": "ns",
        "description": "Time unit for reported timings (ns, us, ms, s)",
    },
    "benchmark.format": {
        "type": str,
        "default": "yaml",
        "description": "Output format (json, yaml, user)",
    },
    "benchmark.algorithm": {
        "type": str,
        "default": "sha3_512",
        "description": "Algorithm timed by the user (plain text) format",
    },
    "benchmark.escape_quotes": {
        "type": bool,
        "default": False,
        "description": 'Escape " characters in the rendered output',
    },
    "benchmark.random": {
        "type": bool,
        "default": True,
        "description": "Generate random input when no file is given",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to ~/.hashbench/hashbench.log",
    },
}


def get_nested(d: dict, key: str, default: Any = None) -> Any:
    """Get a nested key like 'benchmark.unit'."""
    for part in key.split("."):
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def config_list() -> dict:
    """Return all configurable keys with their metadata."""
    return CONFIGURABLE_KEYS


__all__ = [
    "CONFIGURABLE_KEYS",
    "config_list",
    "get_nested",
]
