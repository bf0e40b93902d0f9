"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and the logging setup used by every other layer.
It must not depend on Infrastructure or the Main layer.
"""

from .consts import (
    ACCESS_TOKEN_ENV,
    ACCESS_TOKEN_HEADER,
    TENANT_ORGANIZATION_PARAM,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "ACCESS_TOKEN_ENV",
    "ACCESS_TOKEN_HEADER",
    "TENANT_ORGANIZATION_PARAM",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
