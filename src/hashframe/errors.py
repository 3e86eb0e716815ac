"""Error types raised by the hashframe registry, providers and codec."""

from __future__ import annotations
from typing import Union


class MultihashError(ValueError):
    """Base class for every hashframe failure."""


# Encode-time failures

class UnsupportedAlgorithm(MultihashError):
    """Kind is known to the format but no digest provider is wired for it."""

    def __init__(self, kind):
        self.kind = kind
        name = getattr(kind, 'name', kind)
        super().__init__(f"Unsupported hash algorithm: {name}")


class PayloadTooLarge(MultihashError):
    """Payload does not fit the single-byte length field."""

    MAX_LENGTH = 255

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Payload of {length} bytes exceeds the {self.MAX_LENGTH}-byte limit"
        )


class DigestComputationFailed(MultihashError):
    """The digest provider raised; the original exception is chained."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Digest computation failed: {detail}")


# Decode-time failures

class UnknownAlgorithm(MultihashError):
    """Identifier byte (or name) is not in the registry."""

    def __init__(self, identifier: Union[int, str]):
        self.identifier = identifier
        if isinstance(identifier, int):
            shown = f"0x{identifier:02x}"
        else:
            shown = repr(identifier)
        super().__init__(f"Unknown hash algorithm: {shown}")


class Truncated(MultihashError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Truncated multihash: need {expected} bytes, got {actual}"
        )


class TrailingData(MultihashError):
    def __init__(self, extra: int):
        self.extra = extra
        super().__init__(f"Trailing bytes after multihash payload: {extra}")
