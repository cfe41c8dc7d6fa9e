"""
Hash algorithm strategies and registry.

Strategies wrap one backend hash constructor each; the registry orders them
into the table every benchmark run walks.
"""

from .accumulator import SingleUseHasher
from .registry import (
    DEFAULT_ALGORITHMS,
    AlgorithmEntry,
    HashAlgorithmRegistry,
    build_default_registry,
)
from .strategies import (
    Blake3Strategy,
    HashlibStrategy,
    HashStrategy,
    MD4Strategy,
    RIPEMD160Strategy,
    XXHashStrategy,
)

__all__ = [
    "DEFAULT_ALGORITHMS",
    "AlgorithmEntry",
    "Blake3Strategy",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "HashlibStrategy",
    "MD4Strategy",
    "RIPEMD160Strategy",
    "SingleUseHasher",
    "XXHashStrategy",
    "build_default_registry",
]
