"""
IoT Actuator Gateway Interface - Domain Layer

This module defines the interface for describing and driving actuators.
"""

from abc import ABC, abstractmethod
from typing import List

from bluerange_sample.domain.entities.actuator import (
    ActuatorDataRequest,
    ActuatorInfo,
    ActuatorInfoQuery,
)


class IIotActuatorGateway(ABC):
    """Interface for the IoT actuator endpoints."""

    @abstractmethod
    def query_actuator_info(self, query: ActuatorInfoQuery) -> List[ActuatorInfo]:
        """Describe the actuators of the queried devices."""
        pass

    @abstractmethod
    def action_actuator_data(self, request: ActuatorDataRequest) -> None:
        """
        Submit an actuator command.

        Raises:
            ApiError: If the server rejects the command
        """
        pass
