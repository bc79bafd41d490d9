"""Encryption and decryption of paste payloads."""

import base64
import logging
import os
from abc import ABC, abstractmethod
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.hashes import SHA256
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .compression import Compressor, RawDeflateCompressor, encode_payload, decode_payload
from .envelope import CipherEnvelope
from .keys import derive_key, validate_random_key
from .types import (
    ENVELOPE_VERSION,
    CIPHER_NAME,
    CIPHER_MODE,
    KEY_SIZE_BITS,
    TAG_SIZE_BITS,
    KDF_ITERATIONS,
    SALT_SIZE,
    IV_SIZE,
    InvalidKeyMaterial,
    EncryptionError,
    DecryptionError,
    InvalidEnvelopeError,
)

logger = logging.getLogger(__name__)


class Cipher(ABC):
    """Interface for authenticated encryption of paste text."""

    @abstractmethod
    def encrypt(self, key: str, plaintext: str) -> CipherEnvelope:
        """Encrypt text under a key string."""
        ...

    @abstractmethod
    def decrypt(self, key: str, envelope: CipherEnvelope) -> str:
        """Decrypt an envelope produced by `encrypt`."""
        ...


def _check_key(key: str) -> bytes:
    if not isinstance(key, str) or not key:
        raise InvalidKeyMaterial("Encryption key must be a non-empty string")
    return key.encode("utf-8")


def _stretch_key(key: bytes, salt: bytes, iterations: int, key_size_bits: int) -> bytes:
    kdf = PBKDF2HMAC(
        algorithm=SHA256(),
        length=key_size_bits // 8,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(key)


class SjclAesGcmCipher(Cipher):
    """
    AES-256-GCM cipher compatible with `sjcl.encrypt` password mode.

    The key string is stretched with PBKDF2-HMAC-SHA256 (random 8-byte salt,
    10000 iterations) into a 256-bit AES key. Each call draws a fresh salt and
    a fresh 16-byte IV. The 128-bit tag is appended to the ciphertext.
    """

    def encrypt(self, key: str, plaintext: str) -> CipherEnvelope:
        """
        Encrypt text into a self-contained envelope.

        Args:
            key: Effective key string (random key, optionally with password digest)
            plaintext: Text to encrypt

        Returns:
            CipherEnvelope with everything needed to decrypt except the key

        Raises:
            InvalidKeyMaterial: If the key is empty or not a string
        """
        key_bytes = _check_key(key)

        salt = os.urandom(SALT_SIZE)
        iv = os.urandom(IV_SIZE)

        try:
            aes_key = _stretch_key(key_bytes, salt, KDF_ITERATIONS, KEY_SIZE_BITS)
            ct = AESGCM(aes_key).encrypt(iv, plaintext.encode("utf-8"), None)
        except ValueError as e:
            raise EncryptionError(f"Encryption failed: {e}") from e

        return CipherEnvelope(
            iv=iv,
            salt=salt,
            ct=ct,
            v=ENVELOPE_VERSION,
            iter=KDF_ITERATIONS,
            ks=KEY_SIZE_BITS,
            ts=TAG_SIZE_BITS,
            mode=CIPHER_MODE,
            adata="",
            cipher=CIPHER_NAME,
        )

    def decrypt(self, key: str, envelope: CipherEnvelope) -> str:
        """
        Decrypt and authenticate an envelope.

        Raises:
            InvalidKeyMaterial: If the key is empty or not a string
            InvalidEnvelopeError: If the envelope uses unsupported parameters
            DecryptionError: If authentication fails (wrong key or tampering)
        """
        key_bytes = _check_key(key)
        _check_parameters(envelope)

        try:
            aad = base64.b64decode(envelope.adata) if envelope.adata else None
            aes_key = _stretch_key(key_bytes, envelope.salt, envelope.iter, envelope.ks)
            plaintext = AESGCM(aes_key).decrypt(envelope.iv, envelope.ct, aad)
        except InvalidTag as e:
            raise DecryptionError("Decryption failed - incorrect key or corrupted data") from e
        except ValueError as e:
            raise InvalidEnvelopeError(f"Unusable envelope: {e}") from e

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionError("Decrypted payload is not UTF-8 text") from e


def _check_parameters(envelope: CipherEnvelope) -> None:
    """Reject envelopes this cipher cannot open."""
    if envelope.v != ENVELOPE_VERSION:
        raise InvalidEnvelopeError(f"Unknown version: {envelope.v}")
    if envelope.cipher != CIPHER_NAME:
        raise InvalidEnvelopeError(f"Unsupported cipher: {envelope.cipher}")
    if envelope.mode != CIPHER_MODE:
        raise InvalidEnvelopeError(f"Unsupported mode: {envelope.mode}")
    if envelope.ks not in (128, 192, 256):
        raise InvalidEnvelopeError(f"Unsupported key size: {envelope.ks}")
    # AESGCM only verifies full-length tags
    if envelope.ts != TAG_SIZE_BITS:
        raise InvalidEnvelopeError(f"Unsupported tag size: {envelope.ts}")
    if envelope.iter < 1:
        raise InvalidEnvelopeError(f"Invalid iteration count: {envelope.iter}")
    if len(envelope.ct) < envelope.tag_size:
        raise InvalidEnvelopeError("Ciphertext shorter than authentication tag")


def encrypt_paste(
    data: bytes,
    random_key: str,
    password: Optional[str] = None,
    cipher: Optional[Cipher] = None,
    compressor: Optional[Compressor] = None,
) -> CipherEnvelope:
    """
    Run the full client-side paste transform.

    data -> compress -> frame as base64 text -> encrypt under the effective key.

    Args:
        data: Raw paste content
        random_key: Base64 random key destined for the URL fragment
        password: Optional password strengthening the key
        cipher: Cipher implementation (default: SjclAesGcmCipher)
        compressor: Compressor implementation (default: RawDeflateCompressor)

    Returns:
        CipherEnvelope ready for submission

    Raises:
        InvalidKeyMaterial: If the random key is empty or malformed
    """
    validate_random_key(random_key)

    framed = encode_payload(data, compressor or RawDeflateCompressor())
    effective_key = derive_key(random_key, password)

    logger.debug("Encrypting %d bytes (%d framed)", len(data), len(framed))
    return (cipher or SjclAesGcmCipher()).encrypt(effective_key, framed)


def decrypt_paste(
    envelope: CipherEnvelope,
    random_key: str,
    password: Optional[str] = None,
    cipher: Optional[Cipher] = None,
    compressor: Optional[Compressor] = None,
) -> bytes:
    """
    Reverse `encrypt_paste`.

    Raises:
        DecryptionError: If the key or password is wrong or data was tampered with
        CompressionError: If the decrypted payload does not inflate
    """
    effective_key = derive_key(random_key, password)
    framed = (cipher or SjclAesGcmCipher()).decrypt(effective_key, envelope)
    return decode_payload(framed, compressor or RawDeflateCompressor())
