# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Async HTTP transport for the YouTube Data API v3."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ydf.core.errors import MalformedResponseError, TransportError
from ydf.core.logging import log_event
from ydf.core.options import DEFAULT_BASE_URL


class Transport:
    """Sends GET requests and resolves their JSON bodies.

    Args:
        base_url: API root that resource names are appended to.
        timeout: Seconds before a request is abandoned. None waits forever.
        client: An existing AsyncClient to use. It is not closed by aclose().
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def get(self, resource: str, params: dict[str, Any]) -> dict:
        """GET ``<base_url>/<resource>`` and return the decoded JSON object.

        Raises:
            TransportError: On a network failure, a non-2xx response, or if
                the HTTP client has already been closed.
            MalformedResponseError: If the body is not a JSON object.
        """
        if self.is_closed:
            log_event(
                logging.WARNING,
                f"GET {resource} refused: client closed",
                resource=resource,
                event="client_closed",
                params=params,
            )
            raise TransportError(
                0, "Client closed", f"GET {resource} failed: the HTTP client has been closed"
            )

        log_event(
            logging.DEBUG,
            f"GET {resource}",
            resource=resource,
            event="request",
            params=params,
        )

        try:
            response = await self._client.get(f"{self._base_url}/{resource}", params=params)
        except httpx.HTTPError as exc:
            log_event(
                logging.WARNING,
                f"GET {resource} failed: {exc}",
                resource=resource,
                event="network_error",
                params=params,
                error=str(exc),
            )
            raise TransportError(0, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            message = _api_error_message(response)
            log_event(
                logging.WARNING,
                f"GET {resource} returned {response.status_code}",
                resource=resource,
                event="http_error",
                params=params,
                status=response.status_code,
                error=message,
            )
            raise TransportError(
                response.status_code,
                response.reason_phrase,
                f"GET {resource} failed with {response.status_code} "
                f"{response.reason_phrase}" + (f": {message}" if message else ""),
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"GET {resource} returned invalid JSON") from exc
        if not isinstance(body, dict):
            raise MalformedResponseError(
                f"GET {resource} returned {type(body).__name__}, expected an object"
            )
        return body

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _api_error_message(response: httpx.Response) -> str | None:
    """Extract ``error.message`` from a Google API error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("message")
    return None
