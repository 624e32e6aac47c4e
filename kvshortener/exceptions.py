class KVShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:kvshortener_error'


class KeyAllocationError(KVShortenerError):
    """Raised when no free short key could be allocated within the attempt budget."""

    error_code = 'app:key_allocation_error'


class ConfigurationError(KVShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
