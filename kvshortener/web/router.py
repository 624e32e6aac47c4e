"""Minimal method + path router for the web Lambda

Routes are regexes matched against the whole request path. Named groups are
passed to the handler as keyword arguments:

    '/create'                    matches '/create' only
    '/(?P<key>[0-9a-z]{6})'      matches exactly six lower-case alphanumerics

Paths are matched in full, so '/abc1234' never matches the key route.
"""

import re
import logging
from collections.abc import Callable
from dataclasses import dataclass

from kvshortener.types import LambdaResponse
from kvshortener.web.request import Request
from kvshortener.web.responses import response_404


logger = logging.getLogger(__name__)

type Handler = Callable[..., LambdaResponse]


@dataclass(frozen=True)
class Route:
    method: str
    regex: re.Pattern
    handler: Handler


class Router:
    """Dispatch requests to the first route matching method and path

    Args:
        not_found (Handler | None):
            Called with the request when no route matches.
            Defaults to a plain text 404 response.

    Example:
        >>> router = Router()
        >>> @router.get(r'/(?P<key>[0-9a-z]{6})')
        ... def redirect_link(request, key): ...
    """

    def __init__(self, not_found: Handler | None = None):
        self.routes: list[Route] = []
        self.not_found = not_found or (lambda request: response_404())

    def route[F: Handler](self, method: str, pattern: str) -> Callable[[F], F]:
        regex = re.compile(pattern)

        def decorator(handler: F) -> F:
            self.routes.append(Route(method=method.upper(), regex=regex, handler=handler))
            return handler

        return decorator

    def get[F: Handler](self, pattern: str) -> Callable[[F], F]:
        return self.route('GET', pattern)

    def post[F: Handler](self, pattern: str) -> Callable[[F], F]:
        return self.route('POST', pattern)

    def dispatch(self, request: Request) -> LambdaResponse:
        for route in self.routes:
            if route.method != request.method:
                continue
            match = route.regex.fullmatch(request.path)
            if match is not None:
                return route.handler(request, **match.groupdict())

        logger.debug('No route matched.', extra={'method': request.method, 'path': request.path})
        return self.not_found(request)
