from enum import StrEnum


# Length of generated shortcodes
SHORTCODE_LENGTH = 8

# Shortcode reserved for the API documentation redirect
RESERVED_SHORTCODE = 'api'
API_DOCS_URL = 'https://developer.fastly.com/reference/api/'

# Name of the cookie (and secret key) holding the shared passcode
PASSCODE_KEY = 'passcode'  # noqa: S105

ALLOWED_METHODS = 'GET, POST, OPTIONS'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105

    class Secrets(StrEnum):
        # Secrets Manager name holding the passcode JSON: {"passcode": "..."}
        PASSCODE_SECRET = 'PASSCODE_SECRET'  # noqa: S105

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


class ContentType(StrEnum):
    TEXT = 'text/plain; charset=utf-8'
    HTML = 'text/html; charset=utf-8'
    JSON = 'application/json'
    FORM = 'application/x-www-form-urlencoded'


# Log event codes
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
API_DOCS_REDIRECT = 'API_DOCS_REDIRECT'
REDIRECT_FAILED = 'REDIRECT_FAILED'
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
SHORT_URL_REJECTED = 'SHORT_URL_REJECTED'
EDITOR_SERVED = 'EDITOR_SERVED'
MISSING_CONFIGURATION = 'MISSING_CONFIGURATION'
METHOD_NOT_ALLOWED = 'METHOD_NOT_ALLOWED'
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
