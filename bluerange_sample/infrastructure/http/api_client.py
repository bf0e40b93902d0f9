"""
HTTP client for the BlueRange REST API - Infrastructure layer.

Authentication and tracing are httpx event hooks composed around the
transport: the request hook adds the access token header and the tenant
query parameter, the response hook logs every response.
"""

from __future__ import annotations

from typing import Callable, Optional
from urllib.parse import quote, urlsplit, urlunsplit

import httpx

from bluerange_sample.domain.entities.credentials import Credentials
from bluerange_sample.shared import (
    ACCESS_TOKEN_HEADER,
    TENANT_ORGANIZATION_PARAM,
    get_logger,
)

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


def append_query_param(url: str, key: str, value: str) -> str:
    """
    Append ``key=value`` to the query of ``url``.

    Scheme, authority, path and fragment are kept. An existing query is
    extended with ``&``, otherwise a new one is started. The value is
    percent-encoded with ``/`` kept literal.
    """
    parts = urlsplit(url)
    param = f"{quote(key)}={quote(value, safe='/')}"
    query = f"{parts.query}&{param}" if parts.query else param
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def make_authorize_request(
    credentials: Credentials,
) -> Callable[[httpx.Request], None]:
    """Build the request hook that attaches ``credentials``."""

    def authorize_request(request: httpx.Request) -> None:
        if credentials.access_token is not None:
            request.headers[ACCESS_TOKEN_HEADER] = credentials.access_token
        if credentials.tenant_organization_uuid is not None:
            request.url = httpx.URL(
                append_query_param(
                    str(request.url),
                    TENANT_ORGANIZATION_PARAM,
                    credentials.tenant_organization_uuid,
                )
            )

    return authorize_request


def trace_response(response: httpx.Response) -> None:
    request = response.request
    logger.info(f"{request.method} {request.url}: {response.status_code}")


def create_api_client(
    base_url: str,
    credentials: Credentials,
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """
    Create the synchronous client shared by all gateways.

    Args:
        base_url: Server URL, e.g. https://bluerange.io
        credentials: Token and tenant scope added to each request
        timeout: Transport timeout in seconds
        transport: Optional transport override, used by tests

    Returns:
        httpx.Client: Client with the authorization and tracing hooks installed
    """
    logger.debug(
        "api_client.create",
        base_url=base_url,
        timeout=timeout,
        credentials=repr(credentials),
    )
    return httpx.Client(
        base_url=base_url.rstrip("/"),
        timeout=timeout,
        headers={"Accept": "application/json"},
        event_hooks={
            "request": [make_authorize_request(credentials)],
            "response": [trace_response],
        },
        transport=transport,
    )
