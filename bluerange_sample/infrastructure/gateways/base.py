"""Shared request handling for the BlueRange gateways."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from bluerange_sample.domain.entities.errors import ApiError
from bluerange_sample.shared import get_logger

logger = get_logger(__name__)

API_PREFIX = "/relution/api/v2"


class BlueRangeGateway:
    """Base class translating HTTP failures into ``ApiError``."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def _send(
        self,
        event: str,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> httpx.Response:
        """
        Send a request and return the successful response.

        Args:
            event: Dotted event prefix used for log records
            method: HTTP method
            path: Path below the API prefix
            params: Query parameters, list values are repeated
            json: Request body

        Raises:
            ApiError: If the server answers with an error status
            httpx.RequestError: If the server cannot be reached
        """
        url = f"{API_PREFIX}{path}"
        logger.debug(f"{event}.request", method=method, url=url, params=params)

        try:
            response = self._client.request(method, url, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # The body may explain an auth failure; it is logged by the caller
            logger.debug(
                f"{event}.http_error",
                status_code=e.response.status_code,
                url=str(e.request.url),
            )
            raise ApiError(
                e.response.status_code,
                e.response.text,
                method=e.request.method,
                url=str(e.request.url),
            ) from e
        except httpx.RequestError as e:
            logger.debug(f"{event}.request_error", error=str(e), url=url)
            raise

        logger.debug(f"{event}.response", status_code=response.status_code)
        return response

    @staticmethod
    def _results(response: httpx.Response) -> list:
        if not response.content:
            return []
        payload = response.json()
        if not isinstance(payload, dict):
            return []
        return [item for item in payload.get("results") or [] if isinstance(item, dict)]
