"""IoT actuator gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List

from bluerange_sample.domain.entities.actuator import (
    ActuatorDataRequest,
    ActuatorInfo,
    ActuatorInfoQuery,
)
from bluerange_sample.domain.gateways.iot_actuator_gateway import IIotActuatorGateway

from .base import BlueRangeGateway


class IotActuatorGateway(BlueRangeGateway, IIotActuatorGateway):
    """HTTP client for the IoT actuator endpoints."""

    def query_actuator_info(self, query: ActuatorInfoQuery) -> List[ActuatorInfo]:
        response = self._send(
            "actuators.info",
            "POST",
            "/iot/actuator/info/query",
            json=query.to_dict(),
        )
        return [self._parse_actuator_info(item) for item in self._results(response)]

    def action_actuator_data(self, request: ActuatorDataRequest) -> None:
        self._send(
            "actuators.action",
            "POST",
            "/iot/actuator/data/action",
            json=request.to_dict(),
        )

    def _parse_actuator_info(self, data: Dict[str, Any]) -> ActuatorInfo:
        index = data.get("index")
        return ActuatorInfo(
            device_uuid=data.get("deviceUuid"),
            type=data.get("type"),
            index=int(index) if index is not None else None,
        )
