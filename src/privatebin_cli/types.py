"""Type definitions and protocol constants for privatebin-cli."""

# Envelope constants (SJCL v1 format)
ENVELOPE_VERSION = 1
CIPHER_NAME = "aes"
CIPHER_MODE = "gcm"
KEY_SIZE_BITS = 256
TAG_SIZE_BITS = 128
KDF_ITERATIONS = 10000
SALT_SIZE = 8
IV_SIZE = 16

# Random key length before base64 encoding
RANDOM_KEY_SIZE = 32

# Server status codes
STATUS_OK = 0
STATUS_ERROR = 1

# Request headers
CONTENT_TYPE = "application/x-www-form-urlencoded"
REQUESTED_WITH = "JSONHttpRequest"

# Defaults
DEFAULT_HOST = "colle.delire.party"
DEFAULT_PATH = "/"
DEFAULT_TIMEOUT = 30.0


# Exception types
class PasteError(Exception):
    """Base exception for privatebin-cli errors."""
    pass


class ValidationError(PasteError):
    """Invalid option or configuration value."""
    pass


class InvalidKeyMaterial(PasteError):
    """Encryption key is empty or malformed."""
    pass


class CompressionError(PasteError):
    """Compressed payload could not be inflated or framed."""
    pass


class EncryptionError(PasteError):
    """Encryption failed."""
    pass


class DecryptionError(PasteError):
    """Decryption or authentication failed."""
    pass


class InvalidEnvelopeError(PasteError):
    """Invalid envelope format."""
    pass


class TransportError(PasteError):
    """Network or connection failure while talking to the server."""
    pass


class ProtocolError(PasteError):
    """Server response could not be understood."""
    pass


class UnknownServerStatus(ProtocolError):
    """Server returned a status code outside the known set."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"unknown status: {status}")


class ApplicationRejected(PasteError):
    """Server refused the paste with a structured error."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
