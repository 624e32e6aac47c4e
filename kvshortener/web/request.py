"""HTTP request view over an API Gateway proxy event

Both REST API (payload v1.0) and HTTP API (payload v2.0) proxy events are
supported:

    v1.0: {'httpMethod': 'GET', 'path': '/abc123', 'headers': {...}, 'body': ..., ...}
    v2.0: {'version': '2.0', 'rawPath': '/abc123', 'requestContext': {'http': {'method': 'GET'}}, ...}
"""

import base64
import binascii
import functools
from dataclasses import dataclass, field
from types import SimpleNamespace
from urllib.parse import parse_qs

from kvshortener.types import LambdaEvent, HttpHeaders, FormData
from kvshortener.utils.helpers import base_url, origin_of


FORM_URLENCODED = 'application/x-www-form-urlencoded'


@dataclass(eq=False)
class Request:
    """Incoming HTTP request

    Attributes:
        method (str): Upper-cased HTTP method.
        path (str): Request path relative to the API stage, e.g. '/abc123'.
        headers (HttpHeaders): Request headers with lower-cased names.
        body (str): Decoded request body ('' when absent).
        event (LambdaEvent): The original API Gateway event.
        state (SimpleNamespace): Per-request wiring set up by the Lambda handler.
    """

    method: str
    path: str
    headers: HttpHeaders
    body: str
    event: LambdaEvent
    state: SimpleNamespace = field(default_factory=SimpleNamespace)

    @classmethod
    def from_event(cls, event: LambdaEvent) -> 'Request':
        request_context = event.get('requestContext') or {}

        if event.get('version') == '2.0':
            method = request_context.get('http', {}).get('method', 'GET')
            path = _strip_stage(event.get('rawPath') or '/', request_context.get('stage', ''))
        else:
            method = event.get('httpMethod') or 'GET'
            path = event.get('path') or '/'

        headers = {name.lower(): value for name, value in (event.get('headers') or {}).items() if value is not None}

        body = event.get('body') or ''
        if body and event.get('isBase64Encoded'):
            try:
                body = base64.b64decode(body).decode('utf-8', errors='replace')
            except (binascii.Error, ValueError):
                body = ''

        return cls(method=method.upper(), path=path, headers=headers, body=body, event=event)

    @property
    def content_type(self) -> str:
        """Media type of the body, without parameters (e.g. charset)"""
        return self.headers.get('content-type', '').split(';', 1)[0].strip().lower()

    @functools.cached_property
    def base_url(self) -> str:
        return base_url(self.event)

    @property
    def origin(self) -> str:
        """Origin (scheme://host) this request was served from"""
        return origin_of(self.base_url)

    @functools.cached_property
    def _form(self) -> FormData:
        if self.content_type != FORM_URLENCODED:
            return {}
        return {name: values[0] for name, values in parse_qs(self.body, keep_blank_values=True).items()}

    def form(self) -> FormData:
        """Return url-encoded form fields (first value per field)

        Bodies of any other content type yield an empty form.
        """
        return dict(self._form)


def _strip_stage(path: str, stage: str) -> str:
    # HTTP API named stages prefix rawPath with '/<stage>'
    if not stage or stage == '$default':
        return path
    prefix = f'/{stage}'
    if path == prefix:
        return '/'
    if path.startswith(prefix + '/'):
        return path[len(prefix):]
    return path
