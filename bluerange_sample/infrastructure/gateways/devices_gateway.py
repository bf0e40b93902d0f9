"""Devices gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from bluerange_sample.domain.entities.device import Device, DeviceStatus
from bluerange_sample.domain.entities.filters import Filter
from bluerange_sample.domain.gateways.devices_gateway import IDevicesGateway
from bluerange_sample.shared import get_logger

from .base import BlueRangeGateway

logger = get_logger(__name__)


class DevicesGateway(BlueRangeGateway, IDevicesGateway):
    """HTTP client for the devices endpoint."""

    def get_devices(
        self,
        *,
        sort_order: Optional[str] = None,
        filter: Optional[Filter] = None,
        fields: Optional[Sequence[str]] = None,
    ) -> List[Device]:
        params: Dict[str, Any] = {"getNonpagedCount": "true"}
        if sort_order:
            params["sortOrder"] = sort_order
        if filter is not None:
            params["filter"] = filter.to_json()
        if fields:
            params["field"] = list(fields)

        response = self._send("devices.list", "GET", "/devices", params=params)
        devices = [self._parse_device(item) for item in self._results(response)]

        logger.debug("devices.list.parsed", count=len(devices))
        return devices

    def _parse_device(self, data: Dict[str, Any]) -> Device:
        return Device(
            uuid=data.get(Device.UUID),
            device_id=data.get(Device.DEVICE_ID),
            name=data.get(Device.NAME),
            status=DeviceStatus.parse(data.get(Device.STATUS)),
        )
