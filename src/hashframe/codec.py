"""
Multihash Codec

Framed buffer layout:

    byte 0        : algorithm identifier (AlgorithmKind value)
    byte 1        : payload length L (0..255)
    bytes 2..2+L  : payload (raw input for IDENTITY, digest otherwise)

Encoding dispatches on the kind: IDENTITY passes the input through,
digest kinds are delegated to a DigestProvider, and kinds the provider
is not wired for are rejected. Decoding is strict: no truncation and no
trailing bytes.
"""

from __future__ import annotations
import hmac
import logging
from typing import Optional, Tuple

from .errors import (
    DigestComputationFailed,
    MultihashError,
    PayloadTooLarge,
    TrailingData,
    Truncated,
    UnknownAlgorithm,
    UnsupportedAlgorithm,
)
from .provider import DigestProvider, HashlibProvider
from .types import AlgorithmKind, identifier_for, kind_for

logger = logging.getLogger(__name__)

HEADER_SIZE = 2
MAX_PAYLOAD_SIZE = PayloadTooLarge.MAX_LENGTH


class Multihash:
    """
    Multihash encoder/decoder bound to one digest provider.

    The provider decides which digest kinds this instance can compute;
    decoding works for every kind in the registry regardless.
    """

    def __init__(self, provider: Optional[DigestProvider] = None):
        self.provider = provider if provider is not None else HashlibProvider()

    def supports(self, kind: AlgorithmKind) -> bool:
        """True if encode() can produce this kind."""
        return kind == AlgorithmKind.IDENTITY or self.provider.supports(kind)

    def encode(self, kind: AlgorithmKind, data: bytes) -> bytes:
        """
        Hash `data` with `kind` and frame the result.

        Raises:
            PayloadTooLarge: IDENTITY input (or a provider digest) over 255 bytes.
            UnsupportedAlgorithm: Kind not wired to the provider.
            DigestComputationFailed: The provider raised while hashing.
            UnknownAlgorithm: `kind` is a raw identifier outside the registry.
            TypeError: `data` is not bytes-like.
        """
        resolved = kind_for(kind)
        if resolved is None:
            raise UnknownAlgorithm(kind)
        kind = resolved
        data = _as_bytes(data)

        if kind == AlgorithmKind.IDENTITY:
            if len(data) > MAX_PAYLOAD_SIZE:
                raise PayloadTooLarge(len(data))
            payload = data
        elif self.provider.supports(kind):
            payload = self._digest(kind, data)
        else:
            raise UnsupportedAlgorithm(kind)

        # A provider digest over 255 bytes cannot be represented; refuse it
        if len(payload) > MAX_PAYLOAD_SIZE:
            raise PayloadTooLarge(len(payload))

        logger.debug("encoded %s: %d-byte payload", kind.name, len(payload))
        return bytes([identifier_for(kind), len(payload)]) + payload

    def _digest(self, kind: AlgorithmKind, data: bytes) -> bytes:
        try:
            digest = self.provider.compute_digest(kind, data)
        except MultihashError:
            raise
        except Exception as e:
            logger.debug("provider failed for %s: %s", kind.name, e)
            raise DigestComputationFailed(str(e)) from e

        if not isinstance(digest, (bytes, bytearray, memoryview)):
            raise DigestComputationFailed(
                f"provider returned {type(digest).__name__} for {kind.name}, expected bytes"
            )
        return bytes(digest)

    def decode(self, buffer: bytes) -> Tuple[AlgorithmKind, bytes]:
        """
        Split a framed buffer into (kind, payload).

        Raises:
            Truncated: Buffer shorter than header or declared payload.
            UnknownAlgorithm: Identifier byte not in the registry.
            TrailingData: Bytes present past the declared payload.
        """
        buffer = _as_bytes(buffer)
        kind, length = self.read_header(buffer)

        end = HEADER_SIZE + length
        if len(buffer) < end:
            raise Truncated(end, len(buffer))
        if len(buffer) > end:
            raise TrailingData(len(buffer) - end)

        return kind, buffer[HEADER_SIZE:end]

    def read_header(self, buffer: bytes) -> Tuple[AlgorithmKind, int]:
        """Return (kind, declared payload length) without checking the payload."""
        buffer = _as_bytes(buffer)
        if len(buffer) < HEADER_SIZE:
            raise Truncated(HEADER_SIZE, len(buffer))

        kind = kind_for(buffer[0])
        if kind is None:
            raise UnknownAlgorithm(buffer[0])
        return kind, buffer[1]

    def verify(self, buffer: bytes, data: bytes) -> bool:
        """
        True if `buffer` is the multihash of `data` under its own algorithm.

        Identity data too long to frame is simply not a match.
        """
        buffer = _as_bytes(buffer)
        data = _as_bytes(data)
        kind, _ = self.decode(buffer)
        if kind == AlgorithmKind.IDENTITY and len(data) > MAX_PAYLOAD_SIZE:
            return False
        expected = self.encode(kind, data)
        return hmac.compare_digest(expected, buffer)


def _as_bytes(value) -> bytes:
    """Copy a bytes-like value; ints and str raise TypeError like hashlib does."""
    return memoryview(value).tobytes()


# Default instance (hashlib, SHA1/SHA2 family)
_default_codec = Multihash()


def encode(kind: AlgorithmKind, data: bytes) -> bytes:
    """Encode with the default hashlib provider."""
    return _default_codec.encode(kind, data)


def decode(buffer: bytes) -> Tuple[AlgorithmKind, bytes]:
    """Decode a framed buffer."""
    return _default_codec.decode(buffer)


def read_header(buffer: bytes) -> Tuple[AlgorithmKind, int]:
    """Read (kind, declared length) from a framed buffer's header."""
    return _default_codec.read_header(buffer)


def verify(buffer: bytes, data: bytes) -> bool:
    """Verify with the default hashlib provider."""
    return _default_codec.verify(buffer, data)


# Name kept from the original multihash API
multihash = encode
