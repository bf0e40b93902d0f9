"""
Devices Gateway Interface - Domain Layer

This module defines the interface for querying devices on the server.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from bluerange_sample.domain.entities.device import Device
from bluerange_sample.domain.entities.filters import Filter


class IDevicesGateway(ABC):
    """Interface for the devices endpoint."""

    @abstractmethod
    def get_devices(
        self,
        *,
        sort_order: Optional[str] = None,
        filter: Optional[Filter] = None,
        fields: Optional[Sequence[str]] = None,
    ) -> List[Device]:
        """
        Fetch the first page of devices.

        Args:
            sort_order: Sort expression such as ``+deviceId``
            filter: Server-side filter expression
            fields: Restrict the returned properties

        Returns:
            List[Device]: Devices of the requested page

        Raises:
            ApiError: If the server answers with an error status
        """
        pass
