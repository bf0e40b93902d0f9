"""
Filter expressions for server-side queries.

A filter is a small tree: ``LogOpFilter`` nodes combine child filters
with AND/OR, ``StringEnumFilter`` leaves match a field against a set of
allowed values. The tree is serialized to JSON and sent as the ``filter``
query parameter.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Tuple

from .device import DEVICE_FIELDS, Device, active_device_statuses


class LogOperation(str, Enum):
    AND = "AND"
    OR = "OR"


class Filter(ABC):
    """Base class of all filter tree nodes."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation of this node."""

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


@dataclass(slots=True, frozen=True)
class StringEnumFilter(Filter):
    """Matches entities whose ``field_name`` equals one of ``values``."""

    field_name: str
    values: Tuple[str, ...]
    known_fields: FrozenSet[str] = field(default=DEVICE_FIELDS, repr=False)

    def __post_init__(self) -> None:
        if self.field_name not in self.known_fields:
            raise ValueError(f"Unknown filter field: {self.field_name}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "stringEnum",
            "fieldName": self.field_name,
            "values": list(self.values),
        }


@dataclass(slots=True, frozen=True)
class LogOpFilter(Filter):
    """Combines child filters with a logical operation."""

    operation: LogOperation
    filters: Tuple[Filter, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "logOp",
            "operation": self.operation.value,
            "filters": [child.to_dict() for child in self.filters],
        }


def and_(*filters: Filter) -> LogOpFilter:
    return LogOpFilter(LogOperation.AND, tuple(filters))


def or_(*filters: Filter) -> LogOpFilter:
    return LogOpFilter(LogOperation.OR, tuple(filters))


def string_enum(field_name: str, values: Iterable[str]) -> StringEnumFilter:
    return StringEnumFilter(field_name, tuple(values))


def active_device_filter(device_id: str) -> LogOpFilter:
    """Select the device with ``device_id`` unless it is pending or removed."""
    statuses: List[str] = [status.value for status in active_device_statuses()]
    return and_(
        string_enum(Device.STATUS, statuses),
        string_enum(Device.DEVICE_ID, [device_id]),
    )
