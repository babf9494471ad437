import enum
import logging
from dataclasses import dataclass


@dataclass
class RegistryConfig:
    """Runtime options for an EventRegistry."""

    isolate_failures: bool = False
    log_level: int = logging.INFO


class Config:
    """Base configuration."""

    ISOLATE_FAILURES = False
    LOG_LEVEL = logging.INFO
    CONFIG_FILE = "eventhub.ini"

    @classmethod
    def registry_config(cls) -> RegistryConfig:
        return RegistryConfig(isolate_failures=cls.ISOLATE_FAILURES, log_level=cls.LOG_LEVEL)


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = logging.DEBUG


class ProductionConfig(Config):
    """Production configuration."""

    # A broken subscriber should not take down the publisher
    ISOLATE_FAILURES = True
    LOG_LEVEL = logging.WARNING


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LEVEL = logging.DEBUG


class ConfigType(enum.Enum):
    DEVELOPMENT = DevelopmentConfig
    PRODUCTION = ProductionConfig
    TESTING = TestingConfig
