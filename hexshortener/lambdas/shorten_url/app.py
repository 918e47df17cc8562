import logging

from hexshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from hexshortener.dao.exceptions import DataStoreError
from hexshortener.exceptions import ShortenerError, StoreUnavailableError
from hexshortener.lambdas.dependencies import get_short_url_dao
from hexshortener.lambdas.responses import response_json, response_error
from hexshortener.utils.helpers import public_host, guarantee_500_response
from hexshortener.workflows import ShortenWorkflow
from hexshortener.lambdas.shorten_url.constants import SHORTEN_SUCCESS, SHORTEN_REJECTED, STORE_UNAVAILABLE


logger = logging.getLogger(__name__)

LAMBDA_NAME = 'shorten_url'


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten a single URL

    Route: GET /api?url=<url-bearing text>&dur=<seconds>

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Connect to the key-value store (once per cold start)
    - Step 2: Read `url` and `dur` query string parameters
    - Step 3: Run the shortening workflow
    - Step 4: Respond with 200 and a Cache-Control hint equal to the TTL

    HTTP responses:
        200: Successful URL shortening
            short_url: {host}/{shortcode}
            duration: TTL in seconds applied to the mapping
            already_existed: True if the shortcode was already stored
        400: Bad client request
            error: invalid params, duration too high or unsupported url
        503: Key-value store unavailable

    Example:
        >>> event = {'queryStringParameters': {'url': 'https://example.com', 'dur': '120'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])
        {'short_url': 'http://localhost:3000/dca7568', 'duration': 120, 'already_existed': False}
    """
    # 1- Connect to the key-value store
    try:
        dao = get_short_url_dao(LAMBDA_NAME)
    except DataStoreError:
        logger.exception('Key-value store unavailable. Responding with 503.', extra={'event': STORE_UNAVAILABLE})
        return response_error(StoreUnavailableError())

    # 2- Read query string parameters
    params = event.get('queryStringParameters') or {}
    url_input = params.get('url')
    duration = params.get('dur')

    # 3- Shorten the URL
    workflow = ShortenWorkflow(dao=dao, host=public_host(event))
    try:
        result = workflow.shorten(url_input, duration)
    except ShortenerError as e:
        logger.info(
            'Shortening request rejected. Responding with %s.',
            e.status_code,
            extra={'event': SHORTEN_REJECTED, 'errorCode': e.error_code},
        )
        return response_error(e)

    # 4- Return successful response to user
    logger.info(
        'Shortened URL. Responding with 200.',
        extra={'event': SHORTEN_SUCCESS, 'shortUrl': result.short_url, 'alreadyExisted': result.already_existed},
    )
    return response_json(200, result.to_dict(), headers={'Cache-Control': f'max-age={result.duration}'})
