import logging

from edgeshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from edgeshortener.constants import METHOD_NOT_ALLOWED
from edgeshortener.lambdas.editor import app as editor
from edgeshortener.lambdas.redirect_url import app as redirect_url
from edgeshortener.lambdas.shorten_url import app as shorten_url
from edgeshortener.utils import guarantee_500_response
from edgeshortener.utils.events import get_method, get_path
from edgeshortener.utils.responses import response_204_preflight, response_405


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Route API Gateway requests by HTTP method and path

    Routes:
        GET /            -> editor page
        GET /<shortcode> -> redirect to target URL
        POST (any path)  -> create short URL
        OPTIONS (any)    -> CORS preflight (204)
        anything else    -> 405

    Every request is handled independently; nothing is kept between invocations.
    """
    method = get_method(event)
    path = get_path(event)
    logger.debug('Routing request.', extra={'method': method, 'path': path})

    match method:
        case 'GET' if path == '/':
            return editor.lambda_handler(event, context)
        case 'GET':
            return redirect_url.lambda_handler(event, context)
        case 'POST':
            return shorten_url.lambda_handler(event, context)
        case 'OPTIONS':
            return response_204_preflight()
        case _:
            logger.info('Method not allowed. Responding with 405.', extra={'method': method, 'event': METHOD_NOT_ALLOWED})
            return response_405()
