import logging
from collections.abc import Callable

from edgeshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from edgeshortener.constants import API_DOCS_URL, RESERVED_SHORTCODE, API_DOCS_REDIRECT, REDIRECT_SUCCESS, REDIRECT_FAILED
from edgeshortener.exceptions import ConfigurationError, MalformedShortcodeError, MalformedURLError, RequestError
from edgeshortener.dao.base import ShortURLBaseDAO
from edgeshortener.dao.redis import ShortURLRedisDAO
from edgeshortener.dao.exceptions import DAOError, DataStoreError
from edgeshortener.utils import app_prefix, redis_config, is_valid_shortcode
from edgeshortener.utils.events import get_path
from edgeshortener.utils.responses import response_301, response_404


logger = logging.getLogger(__name__)


def short_url_dao() -> ShortURLBaseDAO:
    return ShortURLRedisDAO(**redis_config(), prefix=app_prefix())


def resolve_shortcode(path: str, short_url_dao_factory: Callable[[], ShortURLBaseDAO]) -> str:
    """Resolve a request path to its redirect location

    - Step 1: Strip the leading '/' to get the shortcode
    - Step 2: Short-circuit the reserved 'api' shortcode to the API docs
    - Step 3: Reject shortcodes with non-alphanumeric characters
    - Step 4: Look up the shortcode's target URL in the data store

    The data store is only opened after steps 1-3 pass.

    Args:
        path (str):
            Request path, e.g. '/q3ZxT0bK'.
        short_url_dao_factory (Callable[[], ShortURLBaseDAO]):
            Builds the DAO used to look up the shortcode.

    Returns:
        str: redirect location

    Raises:
        MalformedURLError: path holds no shortcode.
        MalformedShortcodeError: shortcode isn't alphanumeric.
        DataStoreError: data store is unreachable or misconfigured.
        ShortURLNotFoundError: no mapping for the shortcode.
    """
    shortcode = path.removeprefix('/')
    if not shortcode:
        raise MalformedURLError('mal-formatted URL')

    if shortcode == RESERVED_SHORTCODE:
        return API_DOCS_URL

    if not is_valid_shortcode(shortcode):
        raise MalformedShortcodeError('mal-formatted short id')

    try:
        dao = short_url_dao_factory()
    except (DataStoreError, ConfigurationError) as e:
        logger.warning('Failed to open short URL data store: %s', e)
        raise DataStoreError('object store not exists') from e

    try:
        return dao.get(shortcode).target
    except DataStoreError as e:
        logger.warning('Failed to read short URL data store: %s', e)
        raise DataStoreError('object store not exists') from e


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle GET /<shortcode> requests

    HTTP responses:
        301: Successful redirect
            headers:
                Location: target URL destination (or API docs for /api)
                Access-Control-Allow-Origin: *
        404: Shortcode can't be resolved
            body (text/plain): 'mal-formatted URL', 'mal-formatted short id',
                               'object store not exists' or 'redirect location not found'
    """
    path = get_path(event)

    try:
        location = resolve_shortcode(path, short_url_dao)
    except (RequestError, DAOError) as e:
        logger.info(
            'Failed to resolve short URL. Responding with 404.',
            extra={'path': path, 'event': REDIRECT_FAILED, 'error': e.__class__.__name__},
        )
        return response_404(str(e))

    if path.removeprefix('/') == RESERVED_SHORTCODE:
        logger.info('Redirecting client to API docs. Responding with 301.', extra={'event': API_DOCS_REDIRECT})
        return response_301(location=location, cors=False)

    logger.info(
        'Redirecting client to target URL. Responding with 301.',
        extra={'path': path, 'event': REDIRECT_SUCCESS},
    )
    return response_301(location=location)
