"""Random key generation and password strengthening for pastes."""

import base64
import hashlib
import os
from typing import Optional

from .types import RANDOM_KEY_SIZE, InvalidKeyMaterial


def generate_random_key() -> str:
    """
    Generate a fresh random paste key.

    Returns:
        Standard base64 encoding of 32 random bytes. This string is the URL
        fragment of the view URL and must never reach the server.
    """
    return base64.b64encode(os.urandom(RANDOM_KEY_SIZE)).decode("ascii")


def is_blank_password(password: Optional[str]) -> bool:
    """Whether a password counts as absent (empty or whitespace only)."""
    return not (password or "").strip()


def derive_key(random_key: str, password: Optional[str] = None) -> str:
    """
    Combine the random key with an optional password.

    The password digest is appended to the random key, so recovering the
    paste needs both the URL fragment and the password.

    Args:
        random_key: Base64 random key
        password: Optional user password

    Returns:
        `random_key` for a blank password, otherwise
        `random_key + hex(sha256(password))`
    """
    if is_blank_password(password):
        return random_key

    digest = hashlib.sha256(password.encode("utf-8")).hexdigest()
    return random_key + digest


def validate_random_key(random_key: str) -> None:
    """
    Check that a random key is base64 of exactly 32 bytes.

    Raises:
        InvalidKeyMaterial: If the key is empty or malformed
    """
    if not isinstance(random_key, str) or not random_key:
        raise InvalidKeyMaterial("Random key must be a non-empty string")

    try:
        raw = base64.b64decode(random_key, validate=True)
    except ValueError as e:
        raise InvalidKeyMaterial(f"Random key is not valid base64: {e}") from e

    if len(raw) != RANDOM_KEY_SIZE:
        raise InvalidKeyMaterial(
            f"Random key must encode {RANDOM_KEY_SIZE} bytes, got {len(raw)}"
        )
