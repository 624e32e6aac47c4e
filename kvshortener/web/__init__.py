from kvshortener.web.request import Request
from kvshortener.web.router import Router
from kvshortener.web.csrf import csrf_protect
from kvshortener.web.forms import CreateLinkForm, validate_form
from kvshortener.web.renderer import render


__all__ = [
    'Request',
    'Router',
    'csrf_protect',
    'CreateLinkForm',
    'validate_form',
    'render',
]
