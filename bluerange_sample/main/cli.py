#!/usr/bin/env python3
"""
CLI Entry Point - Main Layer

    bluerange-sample [deviceId] [actuatorType] [actuatorValue]

Without arguments the accessible devices are listed. A device id lists the
actuator types of that device, adding an actuator type (and optionally a
JSON value) sends an actuator command. The process exit code is 0 on
success, the HTTP status of a failed API call, or 1 for any other error.
"""

import argparse
import sys
from typing import Optional, Sequence

from bluerange_sample.application.models.outcome import (
    ApiFailure,
    LocalFailure,
    RunOutcome,
)
from bluerange_sample.domain.entities.credentials import Credentials
from bluerange_sample.main.config import AppSettings, get_settings
from bluerange_sample.main.container import init_container
from bluerange_sample.shared import (
    ACCESS_TOKEN_ENV,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)

HTTP_UNAUTHORIZED = 401


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bluerange-sample",
        description="Control the actuators of a BlueRange device.",
    )
    parser.add_argument(
        "device_id", nargs="?", metavar="deviceId", help="device identifier"
    )
    parser.add_argument(
        "actuator_type", nargs="?", metavar="actuatorType", help="actuator type"
    )
    parser.add_argument(
        "actuator_value",
        nargs="?",
        metavar="actuatorValue",
        help="JSON encoded actuator value",
    )
    return parser


def report_outcome(outcome: RunOutcome, credentials: Credentials) -> int:
    """
    Log how the run ended and return the process exit code.

    A 401 without a configured access token only gets a hint about the
    missing variable; the response body is not logged in that case.
    """
    if isinstance(outcome, ApiFailure):
        if outcome.status == HTTP_UNAUTHORIZED and not credentials.has_access_token:
            logger.error(
                f"You must provide an access token in environment variable "
                f"{ACCESS_TOKEN_ENV}!"
            )
        else:
            logger.error(outcome.body or str(outcome.error), exc_info=outcome.error)
        return outcome.status

    if isinstance(outcome, LocalFailure):
        logger.error(outcome.message, exc_info=outcome.error)
        return 1

    return 0


def run(
    argv: Optional[Sequence[str]] = None, settings: Optional[AppSettings] = None
) -> int:
    """Run one invocation and return its exit code."""
    args = create_parser().parse_args(argv)

    configure_logging()

    try:
        if settings is None:
            settings = get_settings()
    except Exception as e:
        return report_outcome(LocalFailure(str(e), e), Credentials())

    update_logging_from_settings(settings)

    container = init_container(settings)
    credentials = container.credentials()
    try:
        use_case = container.device_control_use_case()
        outcome = use_case.execute(
            args.device_id, args.actuator_type, args.actuator_value
        )
    except Exception as e:
        outcome = LocalFailure(str(e), e)
    finally:
        container.shutdown_resources()

    return report_outcome(outcome, credentials)


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
