"""
HTTP transport used to post pastes.

The pipeline only depends on the `Transport` interface, so tests and other
HTTP stacks can be swapped in. `RequestsTransport` is the default backend.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional

import requests

from .types import DEFAULT_TIMEOUT, TransportError

logger = logging.getLogger(__name__)


@dataclass
class TransportResponse:
    """Raw HTTP answer from the server."""

    status_code: int
    """HTTP status code."""

    body: str
    """Response body decoded as UTF-8."""


class Transport(ABC):
    """Abstract base class for issuing the paste POST request."""

    @abstractmethod
    def post_form(
        self,
        url: str,
        form: Mapping[str, str],
        headers: Mapping[str, str],
        timeout: float = DEFAULT_TIMEOUT,
    ) -> TransportResponse:
        """
        POST url-encoded form fields.

        Raises:
            TransportError: If the server could not be reached or the
                connection failed before a response arrived
        """
        pass


class RequestsTransport(Transport):
    """Transport backed by `requests`."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session

    def post_form(
        self,
        url: str,
        form: Mapping[str, str],
        headers: Mapping[str, str],
        timeout: float = DEFAULT_TIMEOUT,
    ) -> TransportResponse:
        post = self.session.post if self.session is not None else requests.post
        logger.debug("POST %s", url)
        try:
            response = post(url, data=dict(form), headers=dict(headers), timeout=timeout)
        except requests.RequestException as e:
            raise TransportError(str(e) or type(e).__name__) from e

        response.encoding = "utf-8"
        logger.debug("Server answered HTTP %d", response.status_code)
        return TransportResponse(status_code=response.status_code, body=response.text)
