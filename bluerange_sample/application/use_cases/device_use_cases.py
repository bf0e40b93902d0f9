"""
Device Use Cases - Application Layer

Listing the accessible devices and resolving one device by identifier.
"""

from typing import List

from bluerange_sample.domain.entities.device import Device
from bluerange_sample.domain.entities.errors import (
    AmbiguousDeviceError,
    NoDeviceFoundError,
)
from bluerange_sample.domain.entities.filters import active_device_filter
from bluerange_sample.domain.gateways.devices_gateway import IDevicesGateway
from bluerange_sample.shared import get_logger

logger = get_logger(__name__)


class ListDevicesUseCase:
    """Use case for listing the identifiers of all accessible devices."""

    def __init__(self, devices_gateway: IDevicesGateway):
        self.devices_gateway = devices_gateway

    def execute(self) -> List[str]:
        """
        Fetch the first page of devices sorted by identifier.

        Only ``uuid`` and ``deviceId`` are requested. Devices without an
        identifier are skipped.

        Returns:
            List[str]: Device identifiers in server order
        """
        devices = self.devices_gateway.get_devices(
            sort_order=f"+{Device.DEVICE_ID}",
            fields=[Device.UUID, Device.DEVICE_ID],
        )
        device_ids = [device.device_id for device in devices if device.device_id]

        logger.info("Following devices are accessible: " + ", ".join(device_ids))
        return device_ids


class ResolveDeviceUseCase:
    """Use case for looking up exactly one active device by identifier."""

    def __init__(self, devices_gateway: IDevicesGateway):
        self.devices_gateway = devices_gateway

    def execute(self, device_id: str) -> Device:
        """
        Resolve ``device_id`` to the single matching active device.

        Raises:
            NoDeviceFoundError: If no active device has this identifier
            AmbiguousDeviceError: If several active devices share it
            ApiError: If the server rejects the query
        """
        device_filter = active_device_filter(device_id)
        logger.debug("devices.resolve.request", filter=device_filter.to_json())

        devices = self.devices_gateway.get_devices(filter=device_filter)
        if not devices:
            raise NoDeviceFoundError(device_id)
        if len(devices) != 1:
            raise AmbiguousDeviceError(device_id, len(devices))

        device = devices[0]
        logger.info(f"Device {device.name} ({device.uuid}/{device.device_id})")
        return device
