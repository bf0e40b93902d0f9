"""
Device Control Use Case - Application Layer

Runs one CLI invocation: each positional argument that is present unlocks
a more specific operation. Failures are not retried; they are turned into
the run outcome the entry point reports.
"""

from typing import Optional

from bluerange_sample.application.models.outcome import (
    ApiFailure,
    LocalFailure,
    RunOutcome,
    Success,
)
from bluerange_sample.domain.entities.errors import ApiError
from bluerange_sample.shared import get_logger

from .actuator_use_cases import ListActuatorTypesUseCase, SubmitActuatorCommandUseCase
from .device_use_cases import ListDevicesUseCase, ResolveDeviceUseCase

logger = get_logger(__name__)


class DeviceControlUseCase:
    """Use case orchestrating device lookup and actuator control."""

    def __init__(
        self,
        list_devices_use_case: ListDevicesUseCase,
        resolve_device_use_case: ResolveDeviceUseCase,
        list_actuator_types_use_case: ListActuatorTypesUseCase,
        submit_actuator_command_use_case: SubmitActuatorCommandUseCase,
    ):
        self.list_devices_use_case = list_devices_use_case
        self.resolve_device_use_case = resolve_device_use_case
        self.list_actuator_types_use_case = list_actuator_types_use_case
        self.submit_actuator_command_use_case = submit_actuator_command_use_case

    def execute(
        self,
        device_id: Optional[str] = None,
        actuator_type: Optional[str] = None,
        actuator_value: Optional[str] = None,
    ) -> RunOutcome:
        """
        Run the operation selected by the given arguments.

        Args:
            device_id: Identifier of the target device; lists devices if omitted
            actuator_type: Actuator to set; lists actuator types if omitted
            actuator_value: JSON text of the value to set, optional

        Returns:
            RunOutcome: Success, or the failure that ended the run
        """
        logger.debug(
            "device_control.started",
            device_id=device_id,
            actuator_type=actuator_type,
            has_value=actuator_value is not None,
        )

        try:
            if device_id is None:
                self.list_devices_use_case.execute()
                return Success()

            device = self.resolve_device_use_case.execute(device_id)

            if actuator_type is None:
                self.list_actuator_types_use_case.execute(device)
                return Success()

            self.submit_actuator_command_use_case.execute(
                device, actuator_type, actuator_value
            )
            return Success()

        except ApiError as e:
            return ApiFailure(status=e.status_code, body=e.response_body, error=e)
        except Exception as e:
            return LocalFailure(message=str(e), error=e)
