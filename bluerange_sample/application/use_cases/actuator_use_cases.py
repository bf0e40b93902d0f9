"""
Actuator Use Cases - Application Layer

Describing the actuators of a device and sending actuator commands.
"""

import json
from typing import List, Optional

from bluerange_sample.domain.entities.actuator import (
    ActuatorDataRequest,
    ActuatorInfoQuery,
)
from bluerange_sample.domain.entities.device import Device
from bluerange_sample.domain.gateways.iot_actuator_gateway import IIotActuatorGateway
from bluerange_sample.shared import get_logger

logger = get_logger(__name__)


class ListActuatorTypesUseCase:
    """Use case for listing the actuator types a device knows."""

    def __init__(self, iot_actuator_gateway: IIotActuatorGateway):
        self.iot_actuator_gateway = iot_actuator_gateway

    def execute(self, device: Device) -> List[str]:
        """
        Query the actuators of ``device``.

        Returns:
            List[str]: Distinct actuator types, sorted
        """
        query = ActuatorInfoQuery(device_uuids=[device.uuid])
        infos = self.iot_actuator_gateway.query_actuator_info(query)
        types = sorted({info.type for info in infos if info.type is not None})

        logger.info("Known actuator types are: " + ", ".join(types))
        return types


class SubmitActuatorCommandUseCase:
    """Use case for setting an actuator of a device."""

    def __init__(self, iot_actuator_gateway: IIotActuatorGateway):
        self.iot_actuator_gateway = iot_actuator_gateway

    def execute(
        self, device: Device, actuator_type: str, actuator_value: Optional[str] = None
    ) -> ActuatorDataRequest:
        """
        Send a command for actuator index 0 of ``actuator_type``.

        Args:
            device: Resolved target device
            actuator_type: Actuator type, e.g. ``light``
            actuator_value: JSON text of the value to set; no value is sent
                when omitted

        Returns:
            ActuatorDataRequest: The submitted command

        Raises:
            json.JSONDecodeError: If ``actuator_value`` is not valid JSON
            ApiError: If the server rejects the command
        """
        request = ActuatorDataRequest(
            type=actuator_type,
            device_uuids=[device.uuid],
            index=0,
        )
        if actuator_value is not None:
            request.value = json.loads(actuator_value)

        logger.info(
            "Actuator body payload: "
            + json.dumps(request.to_dict(), separators=(",", ":"))
        )
        self.iot_actuator_gateway.action_actuator_data(request)
        return request
