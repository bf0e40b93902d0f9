from .devices_gateway import IDevicesGateway
from .iot_actuator_gateway import IIotActuatorGateway

__all__ = ["IDevicesGateway", "IIotActuatorGateway"]
