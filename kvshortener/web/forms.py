"""Form schemas and the form validation decorator"""

import re
import functools
from typing import Annotated
from collections.abc import Callable

from pydantic import AnyUrl, BaseModel, TypeAdapter, UrlConstraints, ValidationError, field_validator

from kvshortener.types import LambdaResponse
from kvshortener.web.request import Request


# Absolute URL: scheme plus host (rejects mailto:, file:///... and relative paths)
_url_adapter = TypeAdapter(Annotated[AnyUrl, UrlConstraints(host_required=True)])

# URL parsing silently drops tabs, CR/LF and surrounding spaces, but the
# submitted string is stored (and later sent as Location) verbatim
_FORBIDDEN_CHARACTERS = re.compile(r'[\x00-\x20\x7f]')


class CreateLinkForm(BaseModel):
    """Submission of the link creation form

    Attributes:
        url (str): Absolute URL to shorten, kept exactly as submitted.
    """

    url: str

    @field_validator('url')
    @classmethod
    def url_must_be_absolute(cls, value: str) -> str:
        if _FORBIDDEN_CHARACTERS.search(value):
            raise ValueError('URL must not contain whitespace or control characters')

        try:
            _url_adapter.validate_python(value)
        except ValidationError as e:
            raise ValueError(e.errors()[0]['msg']) from e
        return value


def validate_form[F: Callable[..., LambdaResponse]](
    schema: type[BaseModel],
    on_error: Callable[[Request, ValidationError], LambdaResponse],
) -> Callable[[F], F]:
    """Validate the request form against schema before calling the handler

    On success the handler receives the validated model as form=...
    On failure on_error(request, error) builds the response and the handler is skipped.
    """

    def decorator(handler: F) -> F:
        @functools.wraps(handler)
        def wrapper(request: Request, **kwargs) -> LambdaResponse:
            try:
                form = schema.model_validate(request.form())
            except ValidationError as error:
                return on_error(request, error)
            return handler(request, form=form, **kwargs)

        return wrapper

    return decorator
