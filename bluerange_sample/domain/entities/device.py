"""Domain entities for BlueRange devices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DeviceStatus(str, Enum):
    """Lifecycle status of a device as reported by the server."""

    ENROLLMENT_PENDING = "ENROLLMENT_PENDING"
    COMPLIANT = "COMPLIANT"
    NONCOMPLIANT = "NONCOMPLIANT"
    INACTIVE = "INACTIVE"
    DELETION_PENDING = "DELETION_PENDING"
    DELETED = "DELETED"
    WITHDRAW_PENDING = "WITHDRAW_PENDING"
    WITHDRAWN = "WITHDRAWN"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["DeviceStatus"]:
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Devices in these states cannot receive actuator commands.
INACTIVE_DEVICE_STATUSES = frozenset(
    {
        DeviceStatus.ENROLLMENT_PENDING,
        DeviceStatus.DELETION_PENDING,
        DeviceStatus.DELETED,
        DeviceStatus.WITHDRAW_PENDING,
        DeviceStatus.WITHDRAWN,
    }
)


def active_device_statuses() -> list[DeviceStatus]:
    """All statuses except the pending and terminal ones, in declaration order."""
    return [status for status in DeviceStatus if status not in INACTIVE_DEVICE_STATUSES]


@dataclass(slots=True, frozen=True)
class Device:
    """A device registered with the BlueRange server."""

    # JSON property names, used for sorting, field selection and filters
    UUID = "uuid"
    DEVICE_ID = "deviceId"
    NAME = "name"
    STATUS = "status"

    uuid: Optional[str] = None
    device_id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[DeviceStatus] = None


DEVICE_FIELDS = frozenset({Device.UUID, Device.DEVICE_ID, Device.NAME, Device.STATUS})
