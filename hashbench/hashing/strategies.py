"""
Hash algorithm strategy implementations.

Each strategy knows how to build a fresh hasher for one algorithm. Hashers
from every backend (hashlib, pycryptodome, blake3, xxhash) share the
update()/digest() protocol, so the default methods here cover
all of them.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any

import blake3
import xxhash
from Crypto.Hash import MD4, RIPEMD160


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Unique identifier for the algorithm
    - create_hasher(): Factory method for hasher instances
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'sha3_256', 'md5')."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new hasher instance that has accepted no input."""
        pass

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return self.create_hasher().digest_size

    def update(self, hasher: Any, data: bytes) -> None:
        """Update hasher with data."""
        hasher.update(data)

    def digest(self, hasher: Any) -> bytes:
        """Get raw digest bytes from hasher."""
        return hasher.digest()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.algorithm_name!r})"


class HashlibStrategy(HashStrategy):
    """Any algorithm the interpreter's hashlib provides, looked up by name."""

    def __init__(self, name: str, hashlib_name: str | None = None) -> None:
        self._name = name
        self._hashlib_name = hashlib_name or name

    @property
    def algorithm_name(self) -> str:
        return self._name

    def create_hasher(self) -> Any:
        return hashlib.new(self._hashlib_name)


class MD4Strategy(HashStrategy):
    """MD4 - legacy only, dropped from default OpenSSL 3 builds of hashlib."""

    @property
    def algorithm_name(self) -> str:
        return "md4"

    def create_hasher(self) -> Any:
        return MD4.new()


class RIPEMD160Strategy(HashStrategy):
    """RIPEMD-160 - not guaranteed by hashlib either."""

    @property
    def algorithm_name(self) -> str:
        return "ripemd160"

    def create_hasher(self) -> Any:
        return RIPEMD160.new()


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - fast cryptographic hash."""

    @property
    def algorithm_name(self) -> str:
        return "blake3"

    def create_hasher(self) -> Any:
        return blake3.blake3()


class XXHashStrategy(HashStrategy):
    """xxHash family - fast non-cryptographic hashes."""

    _CONSTRUCTORS = {
        "xxh64": xxhash.xxh64,
        "xxh3_64": xxhash.xxh3_64,
        "xxh3_128": xxhash.xxh3_128,
    }

    def __init__(self, name: str) -> None:
        if name not in self._CONSTRUCTORS:
            raise ValueError(f"Unknown xxHash variant: {name}")
        self._name = name

    @property
    def algorithm_name(self) -> str:
        return self._name

    def create_hasher(self) -> Any:
        return self._CONSTRUCTORS[self._name]()
