class MicroUrlError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:microurl_error'


class InvalidUrlError(MicroUrlError, ValueError):
    """Raised when an original URL can't be shortened (e.g. empty string)."""

    error_code = 'input:invalid_url_error'


class InvalidIdError(MicroUrlError, ValueError):
    """Raised when an identifier is negative or not an integer."""

    error_code = 'input:invalid_id_error'


class InvalidCodeError(MicroUrlError, ValueError):
    """Raised when a short code doesn't parse under the codec's alphabet."""

    error_code = 'input:invalid_code_error'


class ConfigurationError(MicroUrlError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class InfrastructureError(MicroUrlError):
    """Base exception for all infrastructure errors."""

    error_code = 'infra:infrastructure_error'


class GeneratorUnavailableError(InfrastructureError):
    """Raised when the identifier generator can't issue a new id (e.g. backing store unreachable)."""

    error_code = 'infra:generator_unavailable_error'


class AppConfigError(InfrastructureError):
    """Raised when AppConfig responds with erroneous data."""

    error_code = 'infra:appconfig_error'
