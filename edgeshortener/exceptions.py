class EdgeShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:edgeshortener_error'


class ConfigurationError(EdgeShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class PasscodeUnavailableError(ConfigurationError):
    """Raised when the reference passcode can't be read from the secret store."""

    error_code = 'config:passcode_unavailable_error'


class AuthorizationError(EdgeShortenerError):
    """Raised when a caller presents a missing or wrong passcode."""

    error_code = 'auth:authorization_error'


class RequestError(EdgeShortenerError):
    """Base exception for all malformed client requests."""

    error_code = 'request:request_error'


class MalformedRequestError(RequestError):
    """Raised when a request body can't be decoded into a ShortURLRequest."""

    error_code = 'request:malformed_request_error'


class MalformedURLError(RequestError):
    """Raised when the request path holds no shortcode."""

    error_code = 'request:malformed_url_error'


class MalformedShortcodeError(RequestError):
    """Raised when a shortcode contains non-alphanumeric characters."""

    error_code = 'request:malformed_shortcode_error'


class InfrastructureError(EdgeShortenerError):
    """Base exception for all infrastructure (AWS) errors."""

    error_code = 'infra:infrastructure_error'


class MalformedResponseError(InfrastructureError):
    """Raised when a response is malformed."""

    error_code = 'infra:malformed_response_error'
