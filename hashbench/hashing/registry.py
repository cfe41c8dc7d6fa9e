"""
Hash algorithm registry.

An ordered table of algorithm entries. The default table is rebuilt by
build_default_registry() for every benchmark run, so no entry or hasher
outlives the run that created it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..core.exceptions import ConfigError
from .accumulator import SingleUseHasher
from .strategies import (
    Blake3Strategy,
    HashlibStrategy,
    HashStrategy,
    MD4Strategy,
    RIPEMD160Strategy,
    XXHashStrategy,
)


@dataclass(frozen=True)
class AlgorithmEntry:
    """One benchmarked algorithm.

    The in-memory hasher and the file-digest selector both come from the
    same strategy, so they always denote the same algorithm.
    """

    name: str
    strategy: HashStrategy

    @property
    def file_selector(self) -> str:
        """Identifier for requesting this algorithm's digest over a file."""
        return self.name

    def fresh_hasher(self) -> SingleUseHasher:
        """Build an accumulator that has never accepted input."""
        return SingleUseHasher(self.strategy)


class HashAlgorithmRegistry:
    """
    Ordered registry of hash algorithm strategies.

    Iteration order is registration order. Names are unique and looked up
    case-insensitively.

    Example:
        registry = build_default_registry()

        for entry in registry:
            hasher = entry.fresh_hasher()

        entry = registry.resolve("SHA3_256")
    """

    def __init__(self) -> None:
        self._entries: dict[str, AlgorithmEntry] = {}

    def register(self, strategy: HashStrategy) -> None:
        """
        Register a hash strategy.

        Args:
            strategy: HashStrategy implementation

        Raises:
            ValueError: If an algorithm with the same name is registered
        """
        name = strategy.algorithm_name.lower()
        if name in self._entries:
            raise ValueError(f"Hash algorithm already registered: {name}")
        self._entries[name] = AlgorithmEntry(name=name, strategy=strategy)

    def get(self, algorithm: str) -> AlgorithmEntry | None:
        """
        Get entry by algorithm name.

        Args:
            algorithm: Algorithm name (e.g., 'sha3_256', 'md5')

        Returns:
            AlgorithmEntry or None if not found
        """
        return self._entries.get(algorithm.strip().lower())

    def resolve(self, algorithm: str) -> AlgorithmEntry:
        """
        Get entry by algorithm name, failing for unknown names.

        Raises:
            ConfigError: If the algorithm is not registered
        """
        entry = self.get(algorithm)
        if entry is None:
            raise ConfigError(
                f"unsupported algorithm '{algorithm}' "
                f"(supported: {', '.join(self.available_algorithms)})",
                key="algorithm",
            )
        return entry

    @property
    def entries(self) -> tuple[AlgorithmEntry, ...]:
        """All entries in registration order."""
        return tuple(self._entries.values())

    @property
    def available_algorithms(self) -> list[str]:
        """List available algorithm names."""
        return list(self._entries.keys())

    def __iter__(self) -> Iterator[AlgorithmEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)


# (name, hashlib name) in table order; None marks a non-hashlib backend.
DEFAULT_ALGORITHMS: tuple[tuple[str, str | None], ...] = (
    ("md4", None),
    ("md5", "md5"),
    ("sha1", "sha1"),
    ("sha256", "sha256"),
    ("sha256_224", "sha224"),
    ("sha512", "sha512"),
    ("sha512_224", "sha512_224"),
    ("sha512_256", "sha512_256"),
    ("sha384", "sha384"),
    ("ripemd160", None),
    ("sha3_224", "sha3_224"),
    ("sha3_256", "sha3_256"),
    ("sha3_384", "sha3_384"),
    ("sha3_512", "sha3_512"),
    ("blake2b", "blake2b"),
    ("blake2s", "blake2s"),
    ("blake3", None),
    ("xxh64", None),
    ("xxh3_64", None),
    ("xxh3_128", None),
)

_OTHER_STRATEGIES = {
    "md4": MD4Strategy,
    "ripemd160": RIPEMD160Strategy,
    "blake3": Blake3Strategy,
    "xxh64": lambda: XXHashStrategy("xxh64"),
    "xxh3_64": lambda: XXHashStrategy("xxh3_64"),
    "xxh3_128": lambda: XXHashStrategy("xxh3_128"),
}


def build_default_registry() -> HashAlgorithmRegistry:
    """Build a new registry holding the default algorithm table."""
    registry = HashAlgorithmRegistry()
    for name, hashlib_name in DEFAULT_ALGORITHMS:
        if hashlib_name is None:
            registry.register(_OTHER_STRATEGIES[name]())
        else:
            registry.register(HashlibStrategy(name, hashlib_name))
    return registry
