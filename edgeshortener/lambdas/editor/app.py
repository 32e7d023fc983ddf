import logging
from importlib import resources

from edgeshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from edgeshortener.constants import EDITOR_SERVED, MISSING_CONFIGURATION
from edgeshortener.dao.base import SecretBaseDAO
from edgeshortener.dao.secrets import SecretsManagerDAO
from edgeshortener.exceptions import PasscodeUnavailableError
from edgeshortener.utils import load_passcode, passcode_cookie
from edgeshortener.utils.responses import response_200_html, response_500


logger = logging.getLogger(__name__)


def secret_dao() -> SecretBaseDAO:
    return SecretsManagerDAO()


def editor_page() -> str:
    return resources.files(__package__).joinpath('editor.html').read_text(encoding='utf-8')


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Serve the short URL editor page on GET /

    The current passcode is handed to the browser as a Secure, HttpOnly,
    SameSite=Strict cookie, so the page's own POST requests are authorized.

    HTTP responses:
        200: Editor page (text/html) with Set-Cookie: passcode=<passcode>
        500: Passcode can't be read (text/plain 'Missing configuration')
    """
    try:
        passcode = load_passcode(secret_dao)
    except PasscodeUnavailableError:
        logger.exception('Failed to load passcode for editor page. Responding with 500.', extra={'event': MISSING_CONFIGURATION})
        return response_500('Missing configuration')

    logger.info('Serving editor page. Responding with 200.', extra={'event': EDITOR_SERVED})
    return response_200_html(body=editor_page(), set_cookie=passcode_cookie(passcode))
