"""Tests for random key generation and key derivation."""

import base64

import pytest
from privatebin_cli.keys import (
    generate_random_key,
    derive_key,
    is_blank_password,
    validate_random_key,
)
from privatebin_cli.types import InvalidKeyMaterial
from .test_vectors import RANDOM_KEY, ABC_SHA256_HEX


class TestRandomKey:
    """Test random key generation."""

    def test_key_is_32_bytes(self) -> None:
        """Keys decode to 32 bytes."""
        key = generate_random_key()
        assert len(base64.b64decode(key)) == 32
        validate_random_key(key)

    def test_keys_are_fresh(self) -> None:
        """Two keys are never the same."""
        assert generate_random_key() != generate_random_key()

    def test_rejects_empty_key(self) -> None:
        with pytest.raises(InvalidKeyMaterial):
            validate_random_key("")

    def test_rejects_short_key(self) -> None:
        with pytest.raises(InvalidKeyMaterial, match="32 bytes"):
            validate_random_key("Zm9v")

    def test_rejects_non_base64(self) -> None:
        with pytest.raises(InvalidKeyMaterial, match="base64"):
            validate_random_key("this is not base64!")


class TestDeriveKey:
    """Test combining the random key with a password."""

    def test_no_password(self) -> None:
        """No password leaves the key unchanged."""
        assert derive_key(RANDOM_KEY) == RANDOM_KEY
        assert derive_key(RANDOM_KEY, None) == RANDOM_KEY

    def test_empty_password(self) -> None:
        assert derive_key(RANDOM_KEY, "") == RANDOM_KEY

    @pytest.mark.parametrize("password", ["   ", "\t", "\n \r\n"])
    def test_whitespace_password(self, password: str) -> None:
        """Whitespace-only passwords count as absent."""
        assert derive_key(RANDOM_KEY, password) == RANDOM_KEY

    def test_password_is_appended(self) -> None:
        """The password digest is concatenated, not mixed in."""
        assert derive_key(RANDOM_KEY, "abc") == RANDOM_KEY + ABC_SHA256_HEX

    def test_password_is_not_stripped(self) -> None:
        """Surrounding whitespace is part of a non-blank password."""
        assert derive_key(RANDOM_KEY, " abc ") != derive_key(RANDOM_KEY, "abc")

    def test_deterministic(self) -> None:
        assert derive_key(RANDOM_KEY, "secret") == derive_key(RANDOM_KEY, "secret")

    def test_blank_detection(self) -> None:
        assert is_blank_password(None)
        assert is_blank_password("  ")
        assert not is_blank_password(" x ")
