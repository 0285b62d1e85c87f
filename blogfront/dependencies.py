"""FastAPI dependencies and error mapping shared by the routers."""

from fastapi import HTTPException, Request

from blogfront.config import get_settings
from blogfront.services.wordpress import (
    ConfigurationError,
    WordPressClient,
    WordPressError,
)


def get_wordpress(request: Request) -> WordPressClient:
    """A WordPress client bound to the app's response cache."""
    settings = get_settings()
    cache = getattr(request.app.state, "response_cache", None)
    return WordPressClient(settings.api_base, cache=cache)


def wordpress_http_error(exc: WordPressError) -> HTTPException:
    """Map a WordPress failure to the response the reader sees."""
    if isinstance(exc, ConfigurationError):
        return HTTPException(status_code=500, detail=str(exc))
    return HTTPException(status_code=502, detail=str(exc))
