import logging

from pydantic import ValidationError

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse, LambdaConfiguration
from kvshortener.constants import KEY_PATTERN, MAX_KEY_ALLOCATION_ATTEMPTS
from kvshortener.exceptions import ConfigurationError, KeyAllocationError
from kvshortener.registry import LinkRegistry
from kvshortener.dao.factory import kv_store_dao
from kvshortener.utils import load_config, app_prefix, get_short_url
from kvshortener.utils.helpers import guarantee_500_response
from kvshortener.web import Request, Router, CreateLinkForm, csrf_protect, validate_form, render
from kvshortener.web.responses import response_200, response_302, response_404, response_500
from kvshortener.lambdas.web.constants import (
    LINK_REDIRECT,
    LINK_NOT_FOUND,
    LINK_CREATED,
    INVALID_FORM,
    ROUTE_NOT_FOUND,
    KEY_ALLOCATION_FAILED,
    CONFIG_LOAD_FAILED,
)


logger = logging.getLogger(__name__)


def not_found(request: Request) -> LambdaResponse:
    logger.info(
        'No route matched request. Responding with 404.',
        extra={'event': ROUTE_NOT_FOUND, 'method': request.method, 'path': request.path},
    )
    return response_404(render('not_found.html', title='Not Found', base_url=request.base_url))


router = Router(not_found=not_found)


def link_registry(config: LambdaConfiguration) -> LinkRegistry:
    """Build the link registry for the configured key-value store backend"""
    links = config.get('links', {})
    return LinkRegistry(
        store=kv_store_dao(config, prefix=app_prefix()),
        dedupe=bool(links.get('dedupe_targets', False)),
        max_attempts=int(links.get('max_attempts', MAX_KEY_ALLOCATION_ATTEMPTS)),
    )


def allowed_origins(request: Request) -> list[str]:
    return request.state.config.get('csrf', {}).get('allowed_origins', [])


def invalid_form(request: Request, error: ValidationError) -> LambdaResponse:
    logger.info(
        'Invalid link creation form. Responding with error page.',
        extra={'event': INVALID_FORM, 'errors': [e['msg'] for e in error.errors()]},
    )
    return response_200(render('error.html', title='Error', base_url=request.base_url))


@router.get('/')
def index(request: Request) -> LambdaResponse:
    return response_200(render('index.html', base_url=request.base_url))


@router.get(f'/(?P<key>{KEY_PATTERN})')
def redirect_link(request: Request, key: str) -> LambdaResponse:
    """Redirect to the target stored under key (or home if the key is unknown)

    HTTP responses:
        302: Location is the target URL, or <base_url>/ for unknown keys
    """
    target = link_registry(request.state.config).resolve(key)
    if target is None:
        logger.info(
            'Short key not found. Redirecting to home page.',
            extra={'event': LINK_NOT_FOUND, 'key': key},
        )
        return response_302(location=f'{request.base_url}/')

    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'event': LINK_REDIRECT, 'key': key},
    )
    return response_302(location=target)


@router.post('/create')
@csrf_protect(allowed_origins=allowed_origins)
@validate_form(CreateLinkForm, on_error=invalid_form)
def create_link(request: Request, form: CreateLinkForm) -> LambdaResponse:
    """Shorten the submitted URL

    HTTP responses:
        200: page with the absolute short URL (or the error page for an invalid URL)
        403: Origin header missing or not trusted
        500: no free short key could be allocated
    """
    try:
        link = link_registry(request.state.config).create(form.url)
    except KeyAllocationError as error:
        logger.exception(
            'Failed to allocate a short key. Responding with 500.',
            extra={'event': KEY_ALLOCATION_FAILED, 'error_code': error.error_code},
        )
        return response_500(error_code=error.error_code)

    short_url = get_short_url(link.key, request.event)
    logger.info(
        'Created short link %s.',
        short_url,
        extra={'event': LINK_CREATED, 'key': link.key},
    )
    return response_200(render('created.html', title='Created', base_url=request.base_url, short_url=short_url))


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Serve the URL shortener web pages from API Gateway proxy events

    Routes:
        GET  /                      creation form
        GET  /<key>                 redirect to the stored target (key: [0-9a-z]{6})
        POST /create                create a short link from form field 'url'

    Anything else responds 404. Store access happens only inside route
    handlers, so unmatched paths never touch the key-value store.

    Example:
        >>> event = {'httpMethod': 'GET', 'path': '/', 'headers': {}}
        >>> lambda_handler(event, None)['statusCode']
        200
    """
    try:
        config = load_config('web')
    except ConfigurationError as error:
        logger.exception(
            'Failed to load AppConfig for web function. Responding with 500.',
            extra={'event': CONFIG_LOAD_FAILED, 'error_code': error.error_code},
        )
        return response_500(error_code=error.error_code)

    request = Request.from_event(event)
    request.state.config = config
    return router.dispatch(request)
