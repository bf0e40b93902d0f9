from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from bluerange_sample.application.models.outcome import (
    ApiFailure,
    LocalFailure,
    Success,
)
from bluerange_sample.domain.entities.credentials import Credentials
from bluerange_sample.domain.entities.errors import ApiError, NoDeviceFoundError
from bluerange_sample.main.cli import create_parser, report_outcome

TOKEN_HINT = (
    "You must provide an access token in environment variable "
    "BLUERANGE_USER_ACCESS_TOKEN!"
)


def test_parser_accepts_up_to_three_positionals() -> None:
    parser = create_parser()

    args = parser.parse_args(["D1", "light", "-1"])
    assert (args.device_id, args.actuator_type, args.actuator_value) == (
        "D1",
        "light",
        "-1",
    )

    empty = parser.parse_args([])
    assert (empty.device_id, empty.actuator_type, empty.actuator_value) == (
        None,
        None,
        None,
    )


def test_parser_rejects_extra_arguments() -> None:
    with pytest.raises(SystemExit) as exc:
        create_parser().parse_args(["D1", "light", "true", "extra"])

    assert exc.value.code == 2


def test_success_exits_zero() -> None:
    assert report_outcome(Success(), Credentials()) == 0


def test_unauthorized_without_token_hides_body() -> None:
    error = ApiError(401, "secret body", method="GET", url="https://h.test")

    with capture_logs() as logs:
        code = report_outcome(ApiFailure(401, "secret body", error), Credentials())

    assert code == 401
    assert [entry["event"] for entry in logs] == [TOKEN_HINT]
    assert "exc_info" not in logs[0]


def test_unauthorized_with_token_logs_body() -> None:
    error = ApiError(401, "token expired")

    with capture_logs() as logs:
        code = report_outcome(
            ApiFailure(401, "token expired", error), Credentials(access_token="t")
        )

    assert code == 401
    assert logs[0]["event"] == "token expired"
    assert logs[0]["exc_info"] is error


def test_other_api_failure_exits_with_status_and_logs_body() -> None:
    error = ApiError(404, '{"message":"unknown"}')

    with capture_logs() as logs:
        code = report_outcome(ApiFailure(404, error.response_body, error), Credentials())

    assert code == 404
    assert logs[0]["event"] == '{"message":"unknown"}'
    assert logs[0]["log_level"] == "error"


def test_api_failure_with_empty_body_logs_error_message() -> None:
    error = ApiError(500, "", method="POST", url="https://h.test/x")

    with capture_logs() as logs:
        code = report_outcome(ApiFailure(500, "", error), Credentials())

    assert code == 500
    assert logs[0]["event"] == "POST https://h.test/x returned HTTP 500"


def test_local_failure_exits_one() -> None:
    error = NoDeviceFoundError("D1")

    with capture_logs() as logs:
        code = report_outcome(LocalFailure(str(error), error), Credentials())

    assert code == 1
    assert logs[0]["event"] == "No device found with deviceId D1"
    assert logs[0]["exc_info"] is error
