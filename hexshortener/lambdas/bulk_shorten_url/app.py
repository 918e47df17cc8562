import logging

from hexshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from hexshortener.dao.exceptions import DataStoreError
from hexshortener.exceptions import ShortenerError, StoreUnavailableError
from hexshortener.lambdas.dependencies import get_short_url_dao
from hexshortener.lambdas.responses import response_json, response_error
from hexshortener.utils.helpers import public_host, guarantee_500_response
from hexshortener.workflows import BulkShortenWorkflow, parse_bulk_body
from hexshortener.lambdas.bulk_shorten_url.constants import BULK_SHORTEN_SUCCESS, BULK_SHORTEN_REJECTED, STORE_UNAVAILABLE


logger = logging.getLogger(__name__)

LAMBDA_NAME = 'bulk_shorten_url'


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten a batch of URLs

    Route: POST /api/bulk
    Body:  {"data": [{"url": "<url-bearing text>", "duration": <seconds>}, ...]}

    Procedure:
    - Step 1: Parse and validate the request body (one pass)
    - Step 2: Connect to the key-value store (once per cold start)
    - Step 3: Shorten all URLs concurrently
    - Step 4: Respond with 201 and one result per URL

    HTTP responses:
        201: Batch processed (individual items may carry an error)
            data: list of {short_url, duration, original_url, already_existed}
                  or {original_url, duration, error, error_code}
        400: Malformed body, empty batch or more than 50 URLs
            error: reason
        503: Key-value store unavailable
    """
    # 1- Parse and validate the batch before doing any work
    try:
        requests = parse_bulk_body(event.get('body'))
    except ShortenerError as e:
        logger.info('Bulk request body rejected. Responding with 400.', extra={'event': BULK_SHORTEN_REJECTED, 'errorCode': e.error_code})
        return response_error(e)

    # 2- Connect to the key-value store
    try:
        dao = get_short_url_dao(LAMBDA_NAME)
    except DataStoreError:
        logger.exception('Key-value store unavailable. Responding with 503.', extra={'event': STORE_UNAVAILABLE})
        return response_error(StoreUnavailableError())

    # 3- Shorten all URLs concurrently
    workflow = BulkShortenWorkflow(dao=dao, host=public_host(event))
    try:
        results = workflow.shorten_bulk(requests)
    except ShortenerError as e:
        logger.info('Bulk request rejected. Responding with 400.', extra={'event': BULK_SHORTEN_REJECTED, 'errorCode': e.error_code})
        return response_error(e)

    # 4- Respond with per-item results
    logger.info('Bulk request processed. Responding with 201.', extra={'event': BULK_SHORTEN_SUCCESS, 'total': len(results)})
    return response_json(201, {'data': [result.to_dict() for result in results]})
