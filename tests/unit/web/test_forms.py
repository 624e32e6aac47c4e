"""Unit tests for form schemas and the validate_form decorator.

Test coverage includes:
    1. CreateLinkForm URL validation
    2. validate_form success and failure paths
"""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from kvshortener.web.forms import CreateLinkForm, validate_form
from kvshortener.web.request import Request


# -------------------------------
# 1. CreateLinkForm
# -------------------------------


@pytest.mark.parametrize(
    'url',
    [
        'https://example.com',
        'https://example.com/page?q=1#frag',
        'http://localhost:8080/x',
        'ftp://files.example.com/a.txt',
        'HTTPS://Example.COM/Path',
    ],
)
def test_valid_urls_are_kept_verbatim(url):
    assert CreateLinkForm.model_validate({'url': url}).url == url


@pytest.mark.parametrize(
    'data',
    [
        {'url': 'not-a-url'},
        {'url': ''},
        {'url': '/relative/path'},
        {'url': 'example.com'},
        {'url': 'mailto:someone@example.com'},
        {'url': 'https://'},
        {'url': 'https://example.com/\r\nSet-Cookie: x=1'},
        {'url': 'https://exa\tmple.com'},
        {'url': ' https://example.com '},
        {'url': 'https://example.com/\x00'},
        {},
    ],
)
def test_invalid_urls_are_rejected(data):
    with pytest.raises(ValidationError):
        CreateLinkForm.model_validate(data)


# -------------------------------
# 2. validate_form
# -------------------------------


def form_request(event_factory, body: str) -> Request:
    headers = {'content-type': 'application/x-www-form-urlencoded'}
    return Request.from_event(event_factory('POST', '/create', headers=headers, body=body))


def test_validate_form_passes_model(event_factory):
    handler = MagicMock(return_value={'statusCode': 200})
    on_error = MagicMock()
    request = form_request(event_factory, 'url=https%3A%2F%2Fexample.com')

    validate_form(CreateLinkForm, on_error=on_error)(handler)(request, extra=1)

    handler.assert_called_once_with(request, form=CreateLinkForm(url='https://example.com'), extra=1)
    on_error.assert_not_called()


def test_validate_form_short_circuits_on_error(event_factory):
    handler = MagicMock()
    on_error = MagicMock(return_value={'statusCode': 200, 'body': 'error page'})
    request = form_request(event_factory, 'url=not-a-url')

    response = validate_form(CreateLinkForm, on_error=on_error)(handler)(request)

    assert response == {'statusCode': 200, 'body': 'error page'}
    handler.assert_not_called()
    (called_request, error), _ = on_error.call_args
    assert called_request is request
    assert isinstance(error, ValidationError)
