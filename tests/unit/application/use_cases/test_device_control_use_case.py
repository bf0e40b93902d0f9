from __future__ import annotations

from typing import Optional

import httpx

from bluerange_sample.application.models.outcome import (
    ApiFailure,
    LocalFailure,
    Success,
)
from bluerange_sample.application.use_cases.device_control_use_case import (
    DeviceControlUseCase,
)
from bluerange_sample.domain.entities.device import Device
from bluerange_sample.domain.entities.errors import ApiError, NoDeviceFoundError


class _Recorder:
    def __init__(self, result=None, error: Optional[BaseException] = None) -> None:
        self.calls: list[tuple] = []
        self._result = result
        self._error = error

    def execute(self, *args):
        self.calls.append(args)
        if self._error is not None:
            raise self._error
        return self._result


def _use_case(
    device: Device,
    list_devices: _Recorder | None = None,
    resolve: _Recorder | None = None,
    list_types: _Recorder | None = None,
    submit: _Recorder | None = None,
):
    recorders = {
        "list_devices": list_devices or _Recorder([]),
        "resolve": resolve or _Recorder(device),
        "list_types": list_types or _Recorder([]),
        "submit": submit or _Recorder(),
    }
    use_case = DeviceControlUseCase(
        list_devices_use_case=recorders["list_devices"],
        resolve_device_use_case=recorders["resolve"],
        list_actuator_types_use_case=recorders["list_types"],
        submit_actuator_command_use_case=recorders["submit"],
    )
    return use_case, recorders


def test_no_arguments_lists_devices(sample_device) -> None:
    use_case, recorders = _use_case(sample_device)

    assert use_case.execute() == Success()
    assert recorders["list_devices"].calls == [()]
    assert recorders["resolve"].calls == []


def test_device_id_only_lists_actuator_types(sample_device) -> None:
    use_case, recorders = _use_case(sample_device)

    assert use_case.execute("D1") == Success()
    assert recorders["resolve"].calls == [("D1",)]
    assert recorders["list_types"].calls == [(sample_device,)]
    assert recorders["submit"].calls == []


def test_actuator_type_submits_command(sample_device) -> None:
    use_case, recorders = _use_case(sample_device)

    assert use_case.execute("D1", "light", "true") == Success()
    assert recorders["submit"].calls == [(sample_device, "light", "true")]
    assert recorders["list_types"].calls == []


def test_actuator_type_without_value_submits_command(sample_device) -> None:
    use_case, recorders = _use_case(sample_device)

    assert use_case.execute("D1", "light") == Success()
    assert recorders["submit"].calls == [(sample_device, "light", None)]


def test_missing_device_is_local_failure(sample_device) -> None:
    error = NoDeviceFoundError("D1")
    use_case, recorders = _use_case(sample_device, resolve=_Recorder(error=error))

    outcome = use_case.execute("D1", "light", "true")

    assert outcome == LocalFailure(message=str(error), error=error)
    assert recorders["submit"].calls == []


def test_api_error_is_api_failure(sample_device) -> None:
    error = ApiError(404, "not found", method="POST", url="https://h.test/x")
    use_case, _ = _use_case(sample_device, submit=_Recorder(error=error))

    outcome = use_case.execute("D1", "light")

    assert isinstance(outcome, ApiFailure)
    assert outcome.status == 404
    assert outcome.body == "not found"
    assert outcome.error is error


def test_transport_error_is_local_failure(sample_device) -> None:
    error = httpx.ConnectError("connection refused")
    use_case, _ = _use_case(sample_device, list_devices=_Recorder(error=error))

    outcome = use_case.execute()

    assert isinstance(outcome, LocalFailure)
    assert outcome.message == "connection refused"
