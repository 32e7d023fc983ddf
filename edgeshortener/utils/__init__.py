from edgeshortener.utils.config import app_env, app_name, app_prefix, redis_config
from edgeshortener.utils.helpers import require_environment, guarantee_500_response
from edgeshortener.utils.shortener import generate_shortcode, is_valid_shortcode
from edgeshortener.utils.passcode import extract_passcode, authorize, passcode_cookie, load_passcode
from edgeshortener.utils.logging import initialize_logging


__all__ = [
    'app_env',
    'app_name',
    'app_prefix',
    'redis_config',
    'require_environment',
    'guarantee_500_response',
    'generate_shortcode',
    'is_valid_shortcode',
    'extract_passcode',
    'authorize',
    'passcode_cookie',
    'load_passcode',
    'initialize_logging',
]
