"""Envelope encoding and decoding for the SJCL paste format."""

import base64
import binascii
import json
from dataclasses import dataclass

from .types import (
    ENVELOPE_VERSION,
    CIPHER_NAME,
    CIPHER_MODE,
    KEY_SIZE_BITS,
    TAG_SIZE_BITS,
    KDF_ITERATIONS,
    InvalidEnvelopeError,
)


@dataclass(frozen=True)
class CipherEnvelope:
    """Self-describing encrypted paste."""
    iv: bytes  # 16 bytes
    salt: bytes  # 8 bytes, PBKDF2 salt
    ct: bytes  # ciphertext + 16-byte tag
    v: int = ENVELOPE_VERSION
    iter: int = KDF_ITERATIONS
    ks: int = KEY_SIZE_BITS
    ts: int = TAG_SIZE_BITS
    mode: str = CIPHER_MODE
    adata: str = ""
    cipher: str = CIPHER_NAME

    @property
    def tag_size(self) -> int:
        """Authentication tag length in bytes."""
        return self.ts // 8


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def encode_envelope(envelope: CipherEnvelope) -> str:
    """
    Encode an envelope to its JSON transport string.

    Format (compact JSON, fixed key order):
        {"iv":..., "v":1, "iter":10000, "ks":256, "ts":128, "mode":"gcm",
         "adata":"", "cipher":"aes", "salt":..., "ct":...}

    `iv`, `salt` and `ct` are standard padded base64.

    Args:
        envelope: CipherEnvelope to encode

    Returns:
        JSON string
    """
    return json.dumps(
        {
            "iv": _b64(envelope.iv),
            "v": envelope.v,
            "iter": envelope.iter,
            "ks": envelope.ks,
            "ts": envelope.ts,
            "mode": envelope.mode,
            "adata": envelope.adata,
            "cipher": envelope.cipher,
            "salt": _b64(envelope.salt),
            "ct": _b64(envelope.ct),
        },
        separators=(",", ":"),
    )


def decode_envelope(data: str) -> CipherEnvelope:
    """
    Decode a JSON transport string into an envelope.

    Args:
        data: Encoded envelope

    Returns:
        Decoded CipherEnvelope

    Raises:
        InvalidEnvelopeError: If data is not a well-formed envelope
    """
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, TypeError) as e:
        raise InvalidEnvelopeError(f"Envelope is not JSON: {e}") from e

    if not isinstance(raw, dict):
        raise InvalidEnvelopeError("Envelope must be a JSON object")

    for name in ("iv", "salt", "ct"):
        if not isinstance(raw.get(name), str):
            raise InvalidEnvelopeError(f"Missing or invalid field: {name}")

    try:
        iv = base64.b64decode(raw["iv"], validate=True)
        salt = base64.b64decode(raw["salt"], validate=True)
        ct = base64.b64decode(raw["ct"], validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEnvelopeError(f"Invalid base64 field: {e}") from e

    params = {}
    for name, kind in (("v", int), ("iter", int), ("ks", int), ("ts", int),
                       ("mode", str), ("adata", str), ("cipher", str)):
        if name not in raw:
            continue
        value = raw[name]
        if not isinstance(value, kind) or isinstance(value, bool):
            raise InvalidEnvelopeError(f"Invalid field type: {name}")
        params[name] = value

    return CipherEnvelope(iv=iv, salt=salt, ct=ct, **params)


def is_cipher_envelope(data: str) -> bool:
    """
    Check if a string looks like a decodable envelope.

    Args:
        data: String to check

    Returns:
        True if data decodes as an envelope
    """
    try:
        decode_envelope(data)
    except InvalidEnvelopeError:
        return False
    return True
