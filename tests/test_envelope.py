"""Tests for envelope encoding and decoding."""

import json

import pytest
from privatebin_cli.crypto import SjclAesGcmCipher
from privatebin_cli.envelope import (
    CipherEnvelope,
    encode_envelope,
    decode_envelope,
    is_cipher_envelope,
)
from privatebin_cli.types import InvalidEnvelopeError
from .test_vectors import RANDOM_KEY


@pytest.fixture
def envelope():
    return CipherEnvelope(iv=bytes(16), salt=bytes(8), ct=b"\x01" * 20)


class TestEncodeEnvelope:
    """Test JSON encoding."""

    def test_key_order(self, envelope) -> None:
        """Fields appear in the order sjcl emits them."""
        encoded = encode_envelope(envelope)
        assert list(json.loads(encoded)) == [
            "iv", "v", "iter", "ks", "ts", "mode", "adata", "cipher", "salt", "ct",
        ]

    def test_compact_json(self, envelope) -> None:
        encoded = encode_envelope(envelope)
        assert " " not in encoded
        assert encoded.startswith('{"iv":"AAAAAAAAAAAAAAAAAAAAAA==","v":1,"iter":10000,')

    def test_field_values(self, envelope) -> None:
        raw = json.loads(encode_envelope(envelope))
        assert raw["salt"] == "AAAAAAAAAAA="
        assert raw["ks"] == 256
        assert raw["ts"] == 128
        assert raw["mode"] == "gcm"
        assert raw["cipher"] == "aes"
        assert raw["adata"] == ""


class TestDecodeEnvelope:
    """Test JSON decoding."""

    def test_round_trip(self, envelope) -> None:
        assert decode_envelope(encode_envelope(envelope)) == envelope

    def test_encrypted_round_trip(self) -> None:
        """encrypt -> encode -> decode -> decrypt."""
        cipher = SjclAesGcmCipher()
        encoded = encode_envelope(cipher.encrypt(RANDOM_KEY, "Round trip test!"))
        assert cipher.decrypt(RANDOM_KEY, decode_envelope(encoded)) == "Round trip test!"

    def test_defaults_for_missing_parameters(self) -> None:
        decoded = decode_envelope('{"iv":"AAAAAAAAAAAAAAAAAAAAAA==","salt":"AAAAAAAAAAA=","ct":"AQ=="}')
        assert decoded.mode == "gcm"
        assert decoded.ks == 256

    @pytest.mark.parametrize(
        "data",
        [
            "not json",
            "[1, 2]",
            '{"salt":"AAAAAAAAAAA=","ct":"AQ=="}',
            '{"iv":"***","salt":"AAAAAAAAAAA=","ct":"AQ=="}',
            '{"iv":"AAAAAAAAAAAAAAAAAAAAAA==","salt":"AAAAAAAAAAA=","ct":"AQ==","ks":"256"}',
            '{"iv":"AAAAAAAAAAAAAAAAAAAAAA==","salt":"AAAAAAAAAAA=","ct":"AQ==","v":true}',
        ],
    )
    def test_invalid_envelopes(self, data: str) -> None:
        with pytest.raises(InvalidEnvelopeError):
            decode_envelope(data)
        assert not is_cipher_envelope(data)

    def test_is_cipher_envelope(self, envelope) -> None:
        assert is_cipher_envelope(encode_envelope(envelope))
