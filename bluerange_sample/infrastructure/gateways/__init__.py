from .devices_gateway import DevicesGateway
from .iot_actuator_gateway import IotActuatorGateway

__all__ = ["DevicesGateway", "IotActuatorGateway"]
