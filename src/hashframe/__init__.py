"""
hashframe: Self-Describing Hash Encoding

A multihash is a digest framed with the algorithm that produced it:

    [identifier:1][length:1][digest:length]

so any reader can tell which hash it is holding and how long it is.

Usage:
    from hashframe import AlgorithmKind, encode, decode

    mh = encode(AlgorithmKind.SHA2_256, b"hello world")
    kind, digest = decode(mh)

    # SHA3, SHAKE and BLAKE2 need an explicitly wired provider
    from hashframe import Multihash, HashlibProvider
    codec = Multihash(HashlibProvider.full())
    mh = codec.encode(AlgorithmKind.BLAKE2B, b"hello world")
"""

# Registry
from .types import (
    AlgorithmKind,
    CANONICAL_NAMES,
    identifier_for,
    kind_for,
    kind_from_name,
)

# Errors
from .errors import (
    MultihashError,
    UnsupportedAlgorithm,
    PayloadTooLarge,
    DigestComputationFailed,
    UnknownAlgorithm,
    Truncated,
    TrailingData,
)

# Providers
from .provider import (
    DigestProvider,
    FunctionProvider,
    HashlibProvider,
    DIGEST_SIZES,
    DEFAULT_KINDS,
    ALL_KINDS,
)

# Codec
from .codec import (
    Multihash,
    encode,
    decode,
    read_header,
    verify,
    multihash,
    HEADER_SIZE,
    MAX_PAYLOAD_SIZE,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Registry
    "AlgorithmKind",
    "CANONICAL_NAMES",
    "identifier_for",
    "kind_for",
    "kind_from_name",
    # Errors
    "MultihashError",
    "UnsupportedAlgorithm",
    "PayloadTooLarge",
    "DigestComputationFailed",
    "UnknownAlgorithm",
    "Truncated",
    "TrailingData",
    # Providers
    "DigestProvider",
    "FunctionProvider",
    "HashlibProvider",
    "DIGEST_SIZES",
    "DEFAULT_KINDS",
    "ALL_KINDS",
    # Codec
    "Multihash",
    "encode",
    "decode",
    "read_header",
    "verify",
    "multihash",
    "HEADER_SIZE",
    "MAX_PAYLOAD_SIZE",
]
