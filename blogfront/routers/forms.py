"""Comment and contact form proxies.

Both endpoints answer ``{"ok": true}`` or ``{"error": "..."}`` with a
status code; schema failures are reported the same way instead of as a
422 ``detail`` list.
"""

import logging
from collections.abc import Callable

from fastapi import APIRouter, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from blogfront.config import get_settings
from blogfront.middleware import request_id_var
from blogfront.models.forms import CommentSubmission, ContactSubmission, FormResponse
from blogfront.services.forms import FormRejected, submit_comment, submit_contact

logger = logging.getLogger(__name__)


def validation_message(exc: RequestValidationError) -> str:
    """Readable one-line summary of a body validation failure.

    Submitted values are never echoed back.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request body."
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body is not valid JSON."
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(loc) or "request body"
    return f"Invalid {field}: {first.get('msg', 'invalid value')}"


def _rejected(exc: FormRejected, request: Request) -> JSONResponse:
    client_ip = request.client.host if request.client else "unknown"
    logger.warning(
        "Rejected %s from %s [%s]: %s",
        request.url.path,
        client_ip,
        request_id_var.get(),
        exc.message,
    )
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


class FormRoute(APIRoute):
    """Route that turns request validation errors into ``{error}`` 400s."""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def form_route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except RequestValidationError as exc:
                return _rejected(FormRejected(validation_message(exc)), request)

        return form_route_handler


router = APIRouter(tags=["forms"], route_class=FormRoute)


@router.post("/comments", response_model=FormResponse)
async def post_comment(submission: CommentSubmission, request: Request):
    """Screen a comment and forward it to WordPress."""
    try:
        await submit_comment(submission, get_settings())
    except FormRejected as exc:
        return _rejected(exc, request)
    return FormResponse()


@router.post("/contact", response_model=FormResponse)
async def post_contact(submission: ContactSubmission, request: Request):
    """Screen a contact message and file it as a WPForms entry."""
    try:
        await submit_contact(submission, get_settings())
    except FormRejected as exc:
        return _rejected(exc, request)
    return FormResponse()
