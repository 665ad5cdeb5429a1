from enum import StrEnum


# Short URL base used when none is configured
DEFAULT_BASE_URL = 'https://micro.url/'

# First id issued by the in-process counter generator
DEFAULT_COUNTER_START = 1


class GeneratorBackend(StrEnum):
    """Supported identifier generator backends."""

    COUNTER = 'counter'
    REDIS = 'redis'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        LOG_LEVEL = 'LOG_LEVEL'

    class Service(StrEnum):
        BASE_URL = 'MICROURL_BASE_URL'
        GENERATOR = 'MICROURL_GENERATOR'
        COUNTER_START = 'MICROURL_COUNTER_START'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
