from .actuator import NO_VALUE, ActuatorDataRequest, ActuatorInfo, ActuatorInfoQuery
from .credentials import Credentials
from .device import (
    DEVICE_FIELDS,
    INACTIVE_DEVICE_STATUSES,
    Device,
    DeviceStatus,
    active_device_statuses,
)
from .errors import AmbiguousDeviceError, ApiError, DomainError, NoDeviceFoundError
from .filters import (
    Filter,
    LogOperation,
    LogOpFilter,
    StringEnumFilter,
    active_device_filter,
    and_,
    or_,
    string_enum,
)

__all__ = [
    "NO_VALUE",
    "ActuatorDataRequest",
    "ActuatorInfo",
    "ActuatorInfoQuery",
    "AmbiguousDeviceError",
    "ApiError",
    "Credentials",
    "DEVICE_FIELDS",
    "Device",
    "DeviceStatus",
    "DomainError",
    "Filter",
    "INACTIVE_DEVICE_STATUSES",
    "LogOpFilter",
    "LogOperation",
    "NoDeviceFoundError",
    "StringEnumFilter",
    "active_device_filter",
    "active_device_statuses",
    "and_",
    "or_",
    "string_enum",
]
