from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Iterator, List, Tuple

import httpx
import pytest
import structlog

from bluerange_sample.domain.entities.credentials import Credentials
from bluerange_sample.domain.entities.device import Device, DeviceStatus
from bluerange_sample.infrastructure.http import create_api_client

BASE_URL = "https://bluerange.test"


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _clean_bluerange_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    keys = (
        "BLUERANGE_USER_ACCESS_TOKEN",
        "BLUERANGE_USER_ACCESS_TOKEN_FILE",
        "BLUERANGE_TENANT_ORGANIZATION_UUID",
        "BLUERANGE_BASE_URL",
        "BLUERANGE_TIMEOUT",
        "LOG_LEVEL",
        "LOG_FILE_PATH",
        "ENVIRONMENT",
    )
    for key in keys:
        monkeypatch.delenv(key, raising=False)
    yield
    # secret files are resolved straight into os.environ
    for key in keys:
        os.environ.pop(key, None)


class RecordingServer:
    """In-memory BlueRange server behind an ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.devices: List[Dict[str, Any]] = []
        self.actuator_infos: List[Dict[str, Any]] = []
        self.overrides: Dict[str, Tuple[int, str]] = {}

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def respond_with(self, path: str, status_code: int, body: str = "") -> None:
        self.overrides[path] = (status_code, body)

    @staticmethod
    def json_of(request: httpx.Request) -> Any:
        return json.loads(request.content)

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [request for request in self.requests if request.url.path == path]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.overrides:
            status_code, body = self.overrides[path]
            return httpx.Response(status_code, text=body)
        if path == "/relution/api/v2/devices":
            return httpx.Response(200, json={"results": self.devices})
        if path == "/relution/api/v2/iot/actuator/info/query":
            return httpx.Response(200, json={"results": self.actuator_infos})
        if path == "/relution/api/v2/iot/actuator/data/action":
            return httpx.Response(204)
        return httpx.Response(404, text=f"no route for {path}")


@pytest.fixture()
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture()
def api_client(server: RecordingServer) -> Iterator[httpx.Client]:
    client = create_api_client(BASE_URL, Credentials(), transport=server.transport)
    yield client
    client.close()


@pytest.fixture()
def sample_device() -> Device:
    return Device(
        uuid="6c0d5f1e-uuid",
        device_id="D1",
        name="Meeting room",
        status=DeviceStatus.COMPLIANT,
    )
