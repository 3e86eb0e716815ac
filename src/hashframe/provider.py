"""
Digest Providers

The codec never calls a hash library directly. It asks a DigestProvider,
so the digest backend can be swapped (or faked in tests) without touching
the framing logic.

HashlibProvider is the production backend. By default it wires the same
three algorithms the format historically shipped with (SHA1, SHA2-256,
SHA2-512); the SHA3, SHAKE and BLAKE2 families are known to the registry
but must be opted into.
"""

from __future__ import annotations
import hashlib
import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, FrozenSet, Iterable, Mapping, Optional

from .errors import UnsupportedAlgorithm
from .types import AlgorithmKind

logger = logging.getLogger(__name__)

DigestFunction = Callable[[bytes], bytes]


# =============================================================================
# CAPABILITY
# =============================================================================

class DigestProvider(ABC):
    """
    Capability for computing fixed-length digests.

    Implementations must be deterministic and produce a fixed output length
    per kind. IDENTITY is handled by the codec and is never asked for.
    """

    @abstractmethod
    def supports(self, kind: AlgorithmKind) -> bool:
        """Return True if compute_digest() can handle this kind."""
        pass

    @abstractmethod
    def compute_digest(self, kind: AlgorithmKind, data: bytes) -> bytes:
        """Digest `data` with the algorithm for `kind`."""
        pass

    @property
    def kinds(self) -> FrozenSet[AlgorithmKind]:
        return frozenset(k for k in AlgorithmKind if self.supports(k))


class FunctionProvider(DigestProvider):
    """Provider backed by a table of plain digest functions."""

    def __init__(self, table: Mapping[AlgorithmKind, DigestFunction]):
        self._table: Dict[AlgorithmKind, DigestFunction] = dict(table)

    def supports(self, kind: AlgorithmKind) -> bool:
        return kind in self._table

    def compute_digest(self, kind: AlgorithmKind, data: bytes) -> bytes:
        fn = self._table.get(kind)
        if fn is None:
            raise UnsupportedAlgorithm(kind)
        return fn(data)


# =============================================================================
# HASHLIB BACKEND
# =============================================================================

_HAS_NATIVE_SHA3 = hasattr(hashlib, 'sha3_512')
_HAS_NATIVE_SHAKE = hasattr(hashlib, 'shake_256')
_HAS_NATIVE_BLAKE2 = hasattr(hashlib, 'blake2b')

# Fixed output sizes (bytes) for every digest kind
DIGEST_SIZES: Dict[AlgorithmKind, int] = {
    AlgorithmKind.SHA1: 20,
    AlgorithmKind.SHA2_256: 32,
    AlgorithmKind.SHA2_512: 64,
    AlgorithmKind.SHA3_512: 64,
    AlgorithmKind.SHA3_384: 48,
    AlgorithmKind.SHA3_256: 32,
    AlgorithmKind.SHA3_224: 28,
    AlgorithmKind.SHAKE_128: 32,
    AlgorithmKind.SHAKE_256: 64,
    AlgorithmKind.BLAKE2B: 64,
    AlgorithmKind.BLAKE2S: 32,
}


def _hashlib_table() -> Dict[AlgorithmKind, DigestFunction]:
    table: Dict[AlgorithmKind, DigestFunction] = {
        AlgorithmKind.SHA1: lambda data: hashlib.sha1(data).digest(),
        AlgorithmKind.SHA2_256: lambda data: hashlib.sha256(data).digest(),
        AlgorithmKind.SHA2_512: lambda data: hashlib.sha512(data).digest(),
    }
    if _HAS_NATIVE_SHA3:
        table.update({
            AlgorithmKind.SHA3_512: lambda data: hashlib.sha3_512(data).digest(),
            AlgorithmKind.SHA3_384: lambda data: hashlib.sha3_384(data).digest(),
            AlgorithmKind.SHA3_256: lambda data: hashlib.sha3_256(data).digest(),
            AlgorithmKind.SHA3_224: lambda data: hashlib.sha3_224(data).digest(),
        })
    if _HAS_NATIVE_SHAKE:
        shake_128_size = DIGEST_SIZES[AlgorithmKind.SHAKE_128]
        shake_256_size = DIGEST_SIZES[AlgorithmKind.SHAKE_256]
        table.update({
            AlgorithmKind.SHAKE_128: lambda data: hashlib.shake_128(data).digest(shake_128_size),
            AlgorithmKind.SHAKE_256: lambda data: hashlib.shake_256(data).digest(shake_256_size),
        })
    if _HAS_NATIVE_BLAKE2:
        table.update({
            AlgorithmKind.BLAKE2B: lambda data: hashlib.blake2b(data).digest(),
            AlgorithmKind.BLAKE2S: lambda data: hashlib.blake2s(data).digest(),
        })
    return table


DEFAULT_KINDS: FrozenSet[AlgorithmKind] = frozenset({
    AlgorithmKind.SHA1,
    AlgorithmKind.SHA2_256,
    AlgorithmKind.SHA2_512,
})

ALL_KINDS: FrozenSet[AlgorithmKind] = frozenset(DIGEST_SIZES)


class HashlibProvider(FunctionProvider):
    """
    Digest provider on top of hashlib.

    Args:
        kinds: Which registry kinds to wire. Defaults to SHA1/SHA2-256/SHA2-512.

    Raises:
        UnsupportedAlgorithm: If a requested kind cannot be computed by the
            running interpreter's hashlib (or is IDENTITY).
    """

    def __init__(self, kinds: Optional[Iterable[AlgorithmKind]] = None):
        available = _hashlib_table()
        wanted = DEFAULT_KINDS if kinds is None else frozenset(kinds)
        for kind in wanted:
            if kind not in available:
                raise UnsupportedAlgorithm(kind)
        super().__init__({k: available[k] for k in wanted})
        logger.debug(
            "hashlib provider wired for %s",
            sorted(k.name for k in wanted),
        )

    @classmethod
    def full(cls) -> 'HashlibProvider':
        """Provider wired for every digest kind in the registry."""
        return cls(ALL_KINDS)
