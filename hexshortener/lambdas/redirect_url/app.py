import logging

from hexshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from hexshortener.dao.exceptions import DataStoreError
from hexshortener.exceptions import ShortenerError, StoreUnavailableError
from hexshortener.lambdas.dependencies import get_short_url_dao
from hexshortener.lambdas.responses import response_302, response_error
from hexshortener.utils.helpers import guarantee_500_response
from hexshortener.workflows import ResolveWorkflow
from hexshortener.lambdas.redirect_url.constants import REDIRECT_SUCCESS, REDIRECT_REJECTED, STORE_UNAVAILABLE


logger = logging.getLogger(__name__)

LAMBDA_NAME = 'redirect_url'


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs

    Route: GET /{id}

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Connect to the key-value store (once per cold start)
    - Step 2: Extract shortcode from request path
    - Step 3: Resolve shortcode to its original URL
    - Step 4: Redirect client to the original URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: original URL
        400: Shortcode is not 7 alphanumeric characters
        404: Shortcode doesn't exist (never created or expired)
        500: Stored value can't be decoded
        503: Key-value store unavailable

    Example:
        >>> event = {'pathParameters': {'id': 'dca7568'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com'
    """
    # 1- Connect to the key-value store
    try:
        dao = get_short_url_dao(LAMBDA_NAME)
    except DataStoreError:
        logger.exception('Key-value store unavailable. Responding with 503.', extra={'event': STORE_UNAVAILABLE})
        return response_error(StoreUnavailableError())

    # 2- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('id')

    # 3- Resolve shortcode
    try:
        target_url = ResolveWorkflow(dao=dao).resolve(shortcode)
    except ShortenerError as e:
        logger.info(
            'Shortcode could not be resolved. Responding with %s.',
            e.status_code,
            extra={'shortcode': shortcode, 'event': REDIRECT_REJECTED, 'errorCode': e.error_code},
        )
        return response_error(e)

    # 4- Redirect client to target URL
    logger.info('Redirecting client to target URL. Responding with 302.', extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS})
    return response_302(location=target_url)
