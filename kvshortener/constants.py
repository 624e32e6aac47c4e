from enum import StrEnum


# Short key shape accepted by the redirect route
KEY_LENGTH = 6
KEY_PATTERN = '[0-9a-z]{6}'

# Upper bound on candidate draws and conditional writes per allocation
MAX_KEY_ALLOCATION_ATTEMPTS = 10

# Reverse index namespace (target digest -> short key)
REVERSE_INDEX_NAMESPACE = 'targets'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
