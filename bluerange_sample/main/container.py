"""
Dependency container injection module - Main Layer

Wires credentials, the HTTP client, gateways and use cases from the
application settings.
"""

from typing import Iterator, Optional

import httpx
from dependency_injector import containers, providers

from bluerange_sample.application.use_cases.actuator_use_cases import (
    ListActuatorTypesUseCase,
    SubmitActuatorCommandUseCase,
)
from bluerange_sample.application.use_cases.device_control_use_case import (
    DeviceControlUseCase,
)
from bluerange_sample.application.use_cases.device_use_cases import (
    ListDevicesUseCase,
    ResolveDeviceUseCase,
)
from bluerange_sample.domain.entities.credentials import Credentials
from bluerange_sample.infrastructure.gateways import DevicesGateway, IotActuatorGateway
from bluerange_sample.infrastructure.http import create_api_client
from bluerange_sample.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _api_client_resource(
    base_url: str,
    credentials: Credentials,
    timeout: float,
    transport: Optional[httpx.BaseTransport] = None,
) -> Iterator[httpx.Client]:
    client = create_api_client(
        base_url, credentials, timeout=timeout, transport=transport
    )
    try:
        yield client
    finally:
        logger.debug("container.api_client.close")
        client.close()


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    # Settings
    config = providers.Configuration()

    credentials = providers.Singleton(
        Credentials,
        access_token=config.bluerange.user_access_token,
        tenant_organization_uuid=config.bluerange.tenant_organization_uuid,
    )

    # Infrastructure
    transport = providers.Object(None)

    api_client = providers.Resource(
        _api_client_resource,
        base_url=config.bluerange.base_url,
        credentials=credentials,
        timeout=config.bluerange.timeout,
        transport=transport,
    )

    # Gateways
    devices_gateway = providers.Singleton(DevicesGateway, client=api_client)

    iot_actuator_gateway = providers.Singleton(IotActuatorGateway, client=api_client)

    # Application (use cases)
    list_devices_use_case = providers.Factory(
        ListDevicesUseCase,
        devices_gateway=devices_gateway,
    )

    resolve_device_use_case = providers.Factory(
        ResolveDeviceUseCase,
        devices_gateway=devices_gateway,
    )

    list_actuator_types_use_case = providers.Factory(
        ListActuatorTypesUseCase,
        iot_actuator_gateway=iot_actuator_gateway,
    )

    submit_actuator_command_use_case = providers.Factory(
        SubmitActuatorCommandUseCase,
        iot_actuator_gateway=iot_actuator_gateway,
    )

    device_control_use_case = providers.Factory(
        DeviceControlUseCase,
        list_devices_use_case=list_devices_use_case,
        resolve_device_use_case=resolve_device_use_case,
        list_actuator_types_use_case=list_actuator_types_use_case,
        submit_actuator_command_use_case=submit_actuator_command_use_case,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
