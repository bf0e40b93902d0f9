from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


ACCESS_TOKEN_ENV = "BLUERANGE_USER_ACCESS_TOKEN"
ACCESS_TOKEN_HEADER = "X-User-Access-Token"
TENANT_ORGANIZATION_PARAM = "tenantOrganizationUuid"
