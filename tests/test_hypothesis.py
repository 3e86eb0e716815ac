"""
Property-Based Testing with Hypothesis

Random inputs and random buffers against the codec contract:
determinism, round-trip, identity ceiling and strict decoding.
"""

import pytest
from hypothesis import given, strategies as st, settings, assume

from hashframe.types import AlgorithmKind, identifier_for, kind_for
from hashframe.errors import (
    MultihashError, PayloadTooLarge, Truncated, TrailingData, UnknownAlgorithm,
)
from hashframe.provider import HashlibProvider
from hashframe.codec import Multihash


FULL = Multihash(HashlibProvider.full())

digest_kinds = st.sampled_from(
    [k for k in AlgorithmKind if k != AlgorithmKind.IDENTITY]
)


# =============================================================================
# PROPERTY: DETERMINISM
# =============================================================================

class TestDeterminism:

    @given(kind=digest_kinds, data=st.binary(max_size=2048))
    @settings(max_examples=300)
    def test_encode_deterministic(self, kind, data):
        assert FULL.encode(kind, data) == FULL.encode(kind, data)

    @given(kind=digest_kinds, data=st.binary(max_size=512))
    def test_digest_length_fixed(self, kind, data):
        """Length byte depends only on the algorithm, never on the input."""
        framed = FULL.encode(kind, data)
        assert framed[1] == FULL.encode(kind, b'')[1]
        assert len(framed) == 2 + framed[1]


# =============================================================================
# PROPERTY: ROUND-TRIP
# =============================================================================

class TestRoundTrip:

    @given(kind=digest_kinds, data=st.binary(max_size=2048))
    @settings(max_examples=300)
    def test_digest_roundtrip(self, kind, data):
        kind_out, payload = FULL.decode(FULL.encode(kind, data))
        assert kind_out == kind
        assert payload == FULL.provider.compute_digest(kind, data)

    @given(data=st.binary(max_size=255))
    @settings(max_examples=300)
    def test_identity_roundtrip(self, data):
        framed = FULL.encode(AlgorithmKind.IDENTITY, data)
        assert framed[:2] == bytes([0x00, len(data)])
        assert FULL.decode(framed) == (AlgorithmKind.IDENTITY, data)

    @given(data=st.binary(min_size=256, max_size=1024))
    def test_identity_ceiling(self, data):
        with pytest.raises(PayloadTooLarge):
            FULL.encode(AlgorithmKind.IDENTITY, data)

    @given(kind=digest_kinds, data=st.binary(max_size=256))
    def test_verify_accepts_own_encoding(self, kind, data):
        assert FULL.verify(FULL.encode(kind, data), data)


# =============================================================================
# PROPERTY: STRICT DECODING
# =============================================================================

class TestStrictDecoding:

    @given(identifier=st.integers(min_value=0, max_value=255))
    def test_registry_partial_inverse(self, identifier):
        kind = kind_for(identifier)
        if kind is not None:
            assert identifier_for(kind) == identifier

    @given(buffer=st.binary(max_size=300))
    @settings(max_examples=500)
    def test_decode_never_crashes(self, buffer):
        """Arbitrary bytes either decode or raise a MultihashError."""
        try:
            kind, payload = FULL.decode(buffer)
        except MultihashError:
            return
        assert buffer == bytes([identifier_for(kind), len(payload)]) + payload

    @given(data=st.binary(min_size=1, max_size=255), cut=st.integers(min_value=1))
    def test_truncation_rejected(self, data, cut):
        framed = FULL.encode(AlgorithmKind.IDENTITY, data)
        cut = cut % len(data) + 1
        with pytest.raises(Truncated):
            FULL.decode(framed[:-cut])

    @given(kind=digest_kinds, data=st.binary(max_size=64), extra=st.binary(min_size=1, max_size=16))
    def test_trailing_rejected(self, kind, data, extra):
        framed = FULL.encode(kind, data)
        with pytest.raises(TrailingData):
            FULL.decode(framed + extra)

    @given(identifier=st.integers(min_value=0, max_value=255), rest=st.binary(min_size=1, max_size=8))
    def test_unknown_identifier_rejected(self, identifier, rest):
        assume(kind_for(identifier) is None)
        with pytest.raises(UnknownAlgorithm):
            FULL.decode(bytes([identifier]) + rest)
