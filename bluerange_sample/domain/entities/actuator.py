"""Domain entities for IoT actuators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class _NoValue:
    """Marker for an actuator command without a value."""

    _instance: Optional["_NoValue"] = None

    def __new__(cls) -> "_NoValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE: Any = _NoValue()


@dataclass(slots=True, frozen=True)
class ActuatorInfo:
    """Describes one actuator capability exposed by a device."""

    device_uuid: Optional[str]
    type: Optional[str]
    index: Optional[int] = None


@dataclass(slots=True)
class ActuatorInfoQuery:
    """Selects the devices whose actuators should be described."""

    device_uuids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"deviceUuids": list(self.device_uuids)}


@dataclass(slots=True)
class ActuatorDataRequest:
    """
    Command that sets an actuator of one or more devices.

    ``value`` is an arbitrary JSON value. It is left out of the request
    body entirely when it is ``NO_VALUE``, whereas ``None`` is sent as
    JSON ``null``.
    """

    type: str
    device_uuids: List[str] = field(default_factory=list)
    index: int = 0
    value: Any = NO_VALUE

    @property
    def has_value(self) -> bool:
        return self.value is not NO_VALUE

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "deviceUuids": list(self.device_uuids),
            "type": self.type,
            "index": self.index,
        }
        if self.has_value:
            body["value"] = self.value
        return body
