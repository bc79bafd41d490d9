"""
privatebin-cli - Zero-knowledge pastes from the command line

Python client for PrivateBin servers using raw DEFLATE + PBKDF2 + AES-256-GCM.
"""

from .compression import Compressor, RawDeflateCompressor, encode_payload, decode_payload
from .keys import generate_random_key, derive_key, is_blank_password, validate_random_key
from .crypto import Cipher, SjclAesGcmCipher, encrypt_paste, decrypt_paste
from .envelope import CipherEnvelope, encode_envelope, decode_envelope, is_cipher_envelope
from .models import (
    Expiration,
    Formatter,
    Protocol,
    PasteOptions,
    PasteRequest,
    PasteResponse,
    ResultUrls,
)
from .config import ServerConfig
from .transport import Transport, TransportResponse, RequestsTransport
from .submitter import PasteSubmitter, build_request, parse_response
from .urls import compose_urls, parse_paste_url
from .client import PasteClient
from .types import (
    PasteError,
    ValidationError,
    InvalidKeyMaterial,
    CompressionError,
    EncryptionError,
    DecryptionError,
    InvalidEnvelopeError,
    TransportError,
    ProtocolError,
    UnknownServerStatus,
    ApplicationRejected,
)

__version__ = "0.1.0"

__all__ = [
    # Compression
    "Compressor",
    "RawDeflateCompressor",
    "encode_payload",
    "decode_payload",
    # Keys
    "generate_random_key",
    "derive_key",
    "is_blank_password",
    "validate_random_key",
    # Crypto
    "Cipher",
    "SjclAesGcmCipher",
    "encrypt_paste",
    "decrypt_paste",
    # Envelope
    "CipherEnvelope",
    "encode_envelope",
    "decode_envelope",
    "is_cipher_envelope",
    # Models
    "Expiration",
    "Formatter",
    "Protocol",
    "PasteOptions",
    "PasteRequest",
    "PasteResponse",
    "ResultUrls",
    # Config
    "ServerConfig",
    # Transport
    "Transport",
    "TransportResponse",
    "RequestsTransport",
    # Submitter
    "PasteSubmitter",
    "build_request",
    "parse_response",
    # URLs
    "compose_urls",
    "parse_paste_url",
    # Client
    "PasteClient",
    # Errors
    "PasteError",
    "ValidationError",
    "InvalidKeyMaterial",
    "CompressionError",
    "EncryptionError",
    "DecryptionError",
    "InvalidEnvelopeError",
    "TransportError",
    "ProtocolError",
    "UnknownServerStatus",
    "ApplicationRejected",
]
