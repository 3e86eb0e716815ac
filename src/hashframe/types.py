"""
Algorithm Registry for hashframe

Every supported hash kind is pinned to a one-byte identifier.
These identifiers are PINNED - changing them breaks compatibility with
every other reader of the framed format.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Dict, Optional

from .errors import UnknownAlgorithm


# =============================================================================
# ALGORITHM KINDS
# =============================================================================

class AlgorithmKind(IntEnum):
    """
    Closed registry of hash kinds known to the format.

    The member value IS the wire identifier. SHA3 is an alias of SHA3_512:
    both encode to 0x14, and 0x14 always resolves back to SHA3_512.
    """
    IDENTITY = 0x00

    SHA1 = 0x11
    SHA2_256 = 0x12
    SHA2_512 = 0x13

    # SHA3_512 must stay ahead of its alias so it is the canonical member
    SHA3_512 = 0x14
    SHA3 = 0x14
    SHA3_384 = 0x15
    SHA3_256 = 0x16
    SHA3_224 = 0x17

    SHAKE_128 = 0x18
    SHAKE_256 = 0x19

    BLAKE2B = 0x40
    BLAKE2S = 0x41

    @property
    def identifier(self) -> int:
        return identifier_for(self)

    @property
    def canonical_name(self) -> str:
        return CANONICAL_NAMES[self]


CANONICAL_NAMES: Dict[AlgorithmKind, str] = {
    AlgorithmKind.IDENTITY: 'identity',
    AlgorithmKind.SHA1: 'sha1',
    AlgorithmKind.SHA2_256: 'sha2-256',
    AlgorithmKind.SHA2_512: 'sha2-512',
    AlgorithmKind.SHA3_512: 'sha3-512',
    AlgorithmKind.SHA3_384: 'sha3-384',
    AlgorithmKind.SHA3_256: 'sha3-256',
    AlgorithmKind.SHA3_224: 'sha3-224',
    AlgorithmKind.SHAKE_128: 'shake-128',
    AlgorithmKind.SHAKE_256: 'shake-256',
    AlgorithmKind.BLAKE2B: 'blake2b',
    AlgorithmKind.BLAKE2S: 'blake2s',
}

_NAME_ALIASES: Dict[str, AlgorithmKind] = {
    'sha3': AlgorithmKind.SHA3,
}


# =============================================================================
# BIDIRECTIONAL MAPPING
# =============================================================================

def identifier_for(kind: AlgorithmKind) -> int:
    """Wire identifier byte for a kind. Total over AlgorithmKind."""
    return int(AlgorithmKind(kind))


def kind_for(identifier: int) -> Optional[AlgorithmKind]:
    """
    Resolve a wire identifier to its kind.

    Returns None for bytes outside the registry; callers decide whether
    that is an error. 0x14 resolves to SHA3_512.
    """
    try:
        return AlgorithmKind(identifier)
    except ValueError:
        return None


def kind_from_name(name: str) -> AlgorithmKind:
    """Look up a kind by canonical name (case-insensitive, '_' accepted for '-')."""
    key = name.strip().lower().replace('_', '-')
    if key in _NAME_ALIASES:
        return _NAME_ALIASES[key]
    for kind, canonical in CANONICAL_NAMES.items():
        if canonical == key:
            return kind
    raise UnknownAlgorithm(name)
