class LinkShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkshortener_error'


class StoreError(LinkShortenerError):
    """Base exception for all mapping store errors."""

    error_code = 'store:store_error'


class ValidationError(StoreError):
    """Raised when a caller supplies an empty or non-string URL."""

    error_code = 'store:validation_error'


class DurableWriteError(StoreError):
    """Raised when the durable tier fails to accept a new mapping."""

    error_code = 'store:durable_write_error'


class NotFoundError(StoreError):
    """Raised when a shortcode can't be resolved from either tier."""

    error_code = 'store:not_found_error'


class ConfigurationError(LinkShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
