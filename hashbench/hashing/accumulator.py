"""
Single-use hash accumulator.

Hash objects are stateful: once fed, their digest reflects everything they
have ever seen. A timed measurement must start from an accumulator that has
accepted no input, so each one is consumed exactly once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..core.exceptions import HashingError

if TYPE_CHECKING:
    from .strategies import HashStrategy


class SingleUseHasher:
    """A fresh hasher that computes one digest and refuses further input.

    Example:
        hasher = SingleUseHasher(strategy)
        digest = hasher.consume(data)
        hasher.consume(data)  # raises HashingError
    """

    __slots__ = ("_consumed", "_hasher", "_strategy")

    def __init__(self, strategy: HashStrategy) -> None:
        self._strategy = strategy
        self._hasher: Any = strategy.create_hasher()
        self._consumed = False

    @property
    def algorithm_name(self) -> str:
        return self._strategy.algorithm_name

    @property
    def consumed(self) -> bool:
        return self._consumed

    def consume(self, data: bytes) -> bytes:
        """Feed all of ``data`` in one update and return the final digest.

        Raises:
            HashingError: If this accumulator has already been consumed
        """
        if self._consumed:
            raise HashingError(
                "hash accumulator already consumed; a fresh one is required",
                algorithm=self.algorithm_name,
            )
        self._consumed = True
        self._strategy.update(self._hasher, data)
        return self._strategy.digest(self._hasher)
