from __future__ import annotations

import pytest

from bluerange_sample.domain.entities.actuator import (
    ActuatorDataRequest,
    ActuatorInfo,
    ActuatorInfoQuery,
)
from bluerange_sample.domain.entities.errors import ApiError
from bluerange_sample.infrastructure.gateways import IotActuatorGateway


def test_query_actuator_info_posts_device_uuids(server, api_client) -> None:
    server.actuator_infos = [
        {"deviceUuid": "u-1", "type": "light", "index": "0"},
        {"deviceUuid": "u-1", "type": "relay"},
    ]

    infos = IotActuatorGateway(api_client).query_actuator_info(
        ActuatorInfoQuery(device_uuids=["u-1"])
    )

    request = server.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/relution/api/v2/iot/actuator/info/query"
    assert server.json_of(request) == {"deviceUuids": ["u-1"]}
    assert infos == [
        ActuatorInfo(device_uuid="u-1", type="light", index=0),
        ActuatorInfo(device_uuid="u-1", type="relay", index=None),
    ]


def test_action_actuator_data_posts_command(server, api_client) -> None:
    gateway = IotActuatorGateway(api_client)

    gateway.action_actuator_data(
        ActuatorDataRequest(type="light", device_uuids=["u-1"], value=True)
    )

    request = server.requests_to("/relution/api/v2/iot/actuator/data/action")[0]
    assert server.json_of(request) == {
        "deviceUuids": ["u-1"],
        "type": "light",
        "index": 0,
        "value": True,
    }


def test_action_actuator_data_raises_api_error(server, api_client) -> None:
    server.respond_with(
        "/relution/api/v2/iot/actuator/data/action", 500, "internal"
    )

    with pytest.raises(ApiError) as exc:
        IotActuatorGateway(api_client).action_actuator_data(
            ActuatorDataRequest(type="light", device_uuids=["u-1"])
        )

    assert exc.value.status_code == 500
    assert exc.value.response_body == "internal"
