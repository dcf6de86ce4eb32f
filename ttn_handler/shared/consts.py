from enum import Enum

HANDLER_PACKAGE = "handler"
APPLICATION_MANAGER_SERVICE = f"{HANDLER_PACKAGE}.ApplicationManager"

# gRPC metadata key carrying the application access key
ACCESS_KEY_METADATA = "key"


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
