"""
Paste client tying the protocol pieces into one pipeline.

Example usage:
    ```python
    client = PasteClient(ServerConfig.from_url("https://paste.example/"))

    urls = client.paste(b"hello", PasteOptions(burn_after_reading=True))
    print(urls.view_url)
    ```
"""

import logging
from typing import Optional

from .compression import Compressor, RawDeflateCompressor
from .config import ServerConfig
from .crypto import Cipher, SjclAesGcmCipher, encrypt_paste, decrypt_paste
from .envelope import decode_envelope
from .keys import generate_random_key
from .models import PasteOptions, ResultUrls
from .submitter import PasteSubmitter
from .transport import Transport, RequestsTransport
from .urls import compose_urls, parse_paste_url

logger = logging.getLogger(__name__)


class PasteClient:
    """
    One-shot paste publisher.

    Each call to `paste` generates its own random key, encrypts fully in
    memory, and makes at most one request. Nothing is retried.
    """

    def __init__(
        self,
        config: ServerConfig,
        transport: Optional[Transport] = None,
        cipher: Optional[Cipher] = None,
        compressor: Optional[Compressor] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Server to publish to.
            transport: HTTP transport (default: RequestsTransport).
            cipher: Cipher implementation (default: SjclAesGcmCipher).
            compressor: Compressor implementation (default: RawDeflateCompressor).
        """
        self.config = config
        self.transport = transport or RequestsTransport()
        self.cipher = cipher or SjclAesGcmCipher()
        self.compressor = compressor or RawDeflateCompressor()
        self.submitter = PasteSubmitter(self.transport, config)

    def paste(
        self,
        data: bytes,
        options: Optional[PasteOptions] = None,
        password: Optional[str] = None,
    ) -> Optional[ResultUrls]:
        """
        Encrypt and publish a paste.

        Args:
            data: Paste content.
            options: Server-side paste options (default: PasteOptions()).
            password: Optional password required to open the paste.

        Returns:
            ResultUrls, or None when `data` is empty and nothing was sent.

        Raises:
            InvalidKeyMaterial: If key preconditions fail (before any request).
            TransportError: If the server could not be reached.
            ProtocolError: If the server's answer could not be understood.
            ApplicationRejected: If the server refused the paste.
        """
        if not data:
            logger.warning("Nothing to send, early exit.")
            return None

        options = options or PasteOptions()
        random_key = generate_random_key()

        envelope = encrypt_paste(
            data,
            random_key,
            password,
            cipher=self.cipher,
            compressor=self.compressor,
        )

        logger.info("Sending %d bytes to %s", len(data), self.config.base_url)
        response = self.submitter.submit(envelope, options)

        return compose_urls(
            self.config.base_url,
            response.paste_id,
            random_key,
            response.delete_token,
            options.burn_after_reading,
        )

    def open_envelope(
        self,
        envelope_data: str,
        view_url: str,
        password: Optional[str] = None,
    ) -> bytes:
        """
        Decrypt a paste envelope using the key carried by its view URL.

        Args:
            envelope_data: Envelope JSON as stored by the server.
            view_url: URL returned by `paste`.
            password: Password the paste was created with, if any.

        Returns:
            The original paste content.
        """
        _, _, random_key = parse_paste_url(view_url)
        envelope = decode_envelope(envelope_data)
        return decrypt_paste(
            envelope,
            random_key,
            password,
            cipher=self.cipher,
            compressor=self.compressor,
        )
