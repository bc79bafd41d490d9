"""Posting encrypted pastes and interpreting the server's answer."""

import json
import logging

from .config import ServerConfig
from .envelope import CipherEnvelope, encode_envelope
from .models import PasteOptions, PasteRequest, PasteResponse
from .transport import Transport
from .types import (
    CONTENT_TYPE,
    REQUESTED_WITH,
    STATUS_OK,
    STATUS_ERROR,
    ProtocolError,
    UnknownServerStatus,
    ApplicationRejected,
)

logger = logging.getLogger(__name__)

REQUEST_HEADERS = {
    "Content-Type": CONTENT_TYPE,
    "X-Requested-With": REQUESTED_WITH,
}


def build_request(envelope: CipherEnvelope, options: PasteOptions) -> PasteRequest:
    """Serializes an envelope together with the paste options."""
    return PasteRequest(data=encode_envelope(envelope), options=options)


def parse_response(body: str) -> PasteResponse:
    """
    Interpret the JSON body returned by the server.

    Args:
        body: Response body

    Returns:
        PasteResponse for status 0

    Raises:
        ApplicationRejected: For status 1, carrying the server's message
        UnknownServerStatus: For any other integer status
        ProtocolError: If the body is not a JSON object with an integer status
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, TypeError) as e:
        raise ProtocolError(f"Server response is not JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ProtocolError("Server response is not a JSON object")

    status = payload.get("status")
    if isinstance(status, bool) or not isinstance(status, int):
        raise ProtocolError(f"Server response has no integer status: {status!r}")

    if status == STATUS_ERROR:
        message = payload.get("message")
        raise ApplicationRejected(str(message) if message is not None else "no reason given")

    if status != STATUS_OK:
        raise UnknownServerStatus(status)

    paste_id = payload.get("id")
    if not isinstance(paste_id, str) or not paste_id:
        raise ProtocolError("Server response is missing the paste id")

    delete_token = payload.get("deletetoken")
    if delete_token is not None and not isinstance(delete_token, str):
        raise ProtocolError("Server response has an invalid delete token")

    return PasteResponse(status=status, paste_id=paste_id, delete_token=delete_token)


class PasteSubmitter:
    """Submits one envelope per call through a Transport."""

    def __init__(self, transport: Transport, config: ServerConfig) -> None:
        self.transport = transport
        self.config = config

    def submit(self, envelope: CipherEnvelope, options: PasteOptions) -> PasteResponse:
        """
        Post an envelope and return the server's answer.

        Raises:
            TransportError: If the server could not be reached
            ProtocolError: If the answer could not be understood
            ApplicationRejected: If the server refused the paste
        """
        request = build_request(envelope, options)
        response = self.transport.post_form(
            self.config.endpoint,
            request.to_form(),
            REQUEST_HEADERS,
            timeout=self.config.timeout,
        )

        result = parse_response(response.body)
        logger.info("Paste %s created", result.paste_id)
        return result
