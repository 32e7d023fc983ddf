import json
import logging
from collections.abc import Callable
from urllib.parse import parse_qs

from edgeshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from edgeshortener.constants import ContentType, SHORT_URL_CREATED, SHORT_URL_REJECTED
from edgeshortener.models import ShortURLModel, ShortURLRequest
from edgeshortener.exceptions import AuthorizationError, ConfigurationError, EdgeShortenerError, MalformedRequestError
from edgeshortener.dao.base import ShortURLBaseDAO, SecretBaseDAO
from edgeshortener.dao.redis import ShortURLRedisDAO
from edgeshortener.dao.secrets import SecretsManagerDAO
from edgeshortener.dao.exceptions import DAOError, DataStoreError
from edgeshortener.utils import app_prefix, redis_config, generate_shortcode, extract_passcode, authorize, load_passcode
from edgeshortener.utils.events import get_body, get_content_type, get_cookie_header
from edgeshortener.utils.responses import response_201, response_406


logger = logging.getLogger(__name__)


def short_url_dao() -> ShortURLBaseDAO:
    return ShortURLRedisDAO(**redis_config(), prefix=app_prefix())


def secret_dao() -> SecretBaseDAO:
    return SecretsManagerDAO()


def parse_request(event: LambdaEvent) -> ShortURLRequest:
    """Decode a ShortURLRequest from a form-encoded or JSON request body

    Raises:
        MalformedRequestError:
            If the body can't be decoded or 'url' is missing.
    """
    body = get_body(event)

    if get_content_type(event) == ContentType.FORM:
        fields = {key: values[0] for key, values in parse_qs(body, keep_blank_values=True).items()}
    else:
        try:
            fields = json.loads(body)
        except json.JSONDecodeError as e:
            raise MalformedRequestError('invalid JSON body') from e
        if not isinstance(fields, dict):
            raise MalformedRequestError('invalid JSON body')

    url = fields.get('url')
    short = fields.get('short')
    if not isinstance(url, str):
        raise MalformedRequestError("missing 'url' in request body")
    if short is not None and not isinstance(short, str):
        raise MalformedRequestError("'short' must be a string")

    return ShortURLRequest(url=url, short=short)


def create_short_url(
    event: LambdaEvent,
    short_url_dao_factory: Callable[[], ShortURLBaseDAO],
    secret_dao_factory: Callable[[], SecretBaseDAO],
) -> ShortURLModel:
    """Authorize the caller and store a new short URL mapping

    - Step 1: Read the reference passcode from the secret store
    - Step 2: Compare it with the passcode cookie presented by the caller
    - Step 3: Decode the requested URL (and optional shortcode) from the body
    - Step 4: Use the requested shortcode as-is, or generate one
    - Step 5: Store the mapping, overwriting any existing one

    NOTE: A caller-supplied shortcode is stored verbatim and is not validated
          here. Shortcodes with non-alphanumeric characters are only rejected
          on lookup, which makes such mappings unreachable.

    Raises:
        PasscodeUnavailableError: reference passcode can't be read.
        AuthorizationError: passcode cookie is missing or wrong.
        MalformedRequestError: body can't be decoded.
        DataStoreError: data store is unreachable or misconfigured.
    """
    reference = load_passcode(secret_dao_factory)

    if not authorize(extract_passcode(get_cookie_header(event)), reference):
        raise AuthorizationError('passcode not matching')

    request = parse_request(event)
    shortcode = request.short or generate_shortcode()
    short_url = ShortURLModel(target=request.url, shortcode=shortcode)

    try:
        short_url_dao_factory().insert(short_url=short_url)
    except (DataStoreError, ConfigurationError) as e:
        logger.warning('Failed to write short URL data store: %s', e)
        raise DataStoreError('object store not exists') from e

    return short_url


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle POST requests creating short URLs

    HTTP responses:
        201: Short URL created
            body (application/json): {"short": "<shortcode>"}
            headers:
                Access-Control-Allow-Origin: *
        406: Short URL rejected
            body (text/plain): reason (missing passcode, wrong passcode,
                               malformed body, unavailable data store)
    """
    try:
        short_url = create_short_url(event, short_url_dao, secret_dao)
    except (EdgeShortenerError, DAOError) as e:
        logger.info(
            'Short URL creation rejected. Responding with 406.',
            extra={'event': SHORT_URL_REJECTED, 'error': e.__class__.__name__, 'reason': str(e)},
        )
        return response_406(str(e))

    logger.info(
        'Short URL created. Responding with 201.',
        extra={'shortcode': short_url.shortcode, 'event': SHORT_URL_CREATED},
    )
    return response_201(shortcode=short_url.shortcode)
