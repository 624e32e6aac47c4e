"""API Gateway proxy responses used by the web Lambda"""

import json

from kvshortener.types import LambdaResponse
from kvshortener.constants import UNKNOWN_INTERNAL_SERVER_ERROR


HTML = 'text/html; charset=utf-8'
TEXT = 'text/plain; charset=utf-8'


def response_200(html: str) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': HTML},
        'body': html,
    }


def response_302(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 302,
        'headers': {'Location': location},
        'body': '',  # no body needed for redirects
    }


def response_403(message: str | None = None) -> LambdaResponse:
    return {
        'statusCode': 403,
        'headers': {'Content-Type': TEXT},
        'body': message or 'Forbidden',
    }


def response_404(html: str | None = None) -> LambdaResponse:
    if html is None:
        return {
            'statusCode': 404,
            'headers': {'Content-Type': TEXT},
            'body': 'Not Found',
        }
    return {
        'statusCode': 404,
        'headers': {'Content-Type': HTML},
        'body': html,
    }


def response_500(error_code: str = UNKNOWN_INTERNAL_SERVER_ERROR) -> LambdaResponse:
    return {
        'statusCode': 500,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps({'message': 'Internal Server Error', 'error_code': error_code}),
    }
