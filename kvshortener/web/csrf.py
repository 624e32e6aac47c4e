"""Origin-based CSRF protection for state-changing routes"""

import logging
import functools
from collections.abc import Callable, Iterable

from kvshortener.types import LambdaResponse
from kvshortener.utils.helpers import origin_of
from kvshortener.web.request import Request
from kvshortener.web.responses import response_403


logger = logging.getLogger(__name__)

SAFE_METHODS = frozenset({'GET', 'HEAD', 'OPTIONS'})
CSRF_REJECTED = 'CSRF_REJECTED'

type AllowedOrigins = Iterable[str] | Callable[[Request], Iterable[str]]


def csrf_protect[F: Callable[..., LambdaResponse]](allowed_origins: AllowedOrigins | None = None) -> Callable[[F], F]:
    """Reject unsafe requests whose Origin header isn't trusted

    A request is trusted when its Origin header equals the origin the request
    was served from, or one of allowed_origins.

    Args:
        allowed_origins (AllowedOrigins | None):
            Extra trusted origins, or a callable computing them per request
            (e.g. from request.state.config).

    Example:
        >>> @csrf_protect(allowed_origins=['https://short.example'])
        ... def create_link(request): ...
    """

    def decorator(handler: F) -> F:
        @functools.wraps(handler)
        def wrapper(request: Request, **kwargs) -> LambdaResponse:
            if request.method in SAFE_METHODS:
                return handler(request, **kwargs)

            origin = request.headers.get('origin')
            if origin is not None and origin_of(origin) in _trusted_origins(request, allowed_origins):
                return handler(request, **kwargs)

            logger.warning(
                'Rejected cross-origin request.',
                extra={'event': CSRF_REJECTED, 'origin': origin, 'path': request.path},
            )
            return response_403()

        return wrapper

    return decorator


def _trusted_origins(request: Request, allowed_origins: AllowedOrigins | None) -> set[str]:
    if callable(allowed_origins):
        allowed_origins = allowed_origins(request)
    return {request.origin, *(origin_of(o) for o in allowed_origins or ())}
