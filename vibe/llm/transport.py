from __future__ import annotations

import logging
from typing import Mapping

import httpx

from vibe.errors import NetworkError, RequestBuildError

from .base import TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Blocking single-request transport over ``httpx.Client``.

    ``timeout_s=None`` disables httpx's default timeout so the call waits as
    long as the connection allows. ``transport`` lets tests plug in an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        *,
        timeout_s: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.timeout_s = timeout_s
        self.transport = transport

    def post(self, url: str, *, content: bytes, headers: Mapping[str, str]) -> TransportResponse:
        with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
            try:
                request = client.build_request("POST", url, content=content, headers=dict(headers))
            except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError, ValueError) as exc:
                raise RequestBuildError(exc) from exc

            logger.debug("POST %s (%d bytes)", request.url, len(content))
            try:
                r = client.send(request)
            except httpx.UnsupportedProtocol as exc:
                raise RequestBuildError(exc) from exc
            except httpx.HTTPError as exc:
                raise NetworkError(exc) from exc

        logger.debug("HTTP %d (%d bytes)", r.status_code, len(r.content))
        return TransportResponse(status_code=r.status_code, body=r.content)
