"""
blogfront API

Thin FastAPI front end serving WordPress content, SEO metadata, and form
proxies for the blog.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogfront.config import get_settings
from blogfront.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from blogfront.routers import categories, forms, pages, posts
from blogfront.services.cache import TTLCache
from blogfront.services.http_client import close_shared_client

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    yield
    await close_shared_client()


app = FastAPI(
    title="blogfront API",
    description="Server-side front end for a WordPress-powered blog",
    version="0.1.0",
    lifespan=lifespan,
)

# One response cache per app; routers reach it through get_wordpress()
app.state.response_cache = TTLCache(ttl=settings.cache_ttl)

# Security headers, then request ID (added last, so it runs outermost)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIDMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

# Routers
app.include_router(pages.router, prefix="/api/blog")
app.include_router(posts.router, prefix="/api/blog")
app.include_router(categories.router, prefix="/api/blog")
app.include_router(forms.router, prefix="/api/blog")


def _run_health_checks() -> dict[str, Any]:
    """Verify required configuration is present."""
    s = get_settings()
    checks = {
        "wordpress_api": "ok" if s.api_base else "fail",
        "contact_form": (
            "ok"
            if s.wpform_id
            and s.wordpress_basic_auth_user
            and s.wordpress_basic_auth_password
            else "fail"
        ),
    }
    failed = [k for k, v in checks.items() if v != "ok"]

    if failed:
        overall = "degraded"
        logger.warning("Health check degraded — failed: %s", ", ".join(failed))
    else:
        overall = "ok"

    return {
        "status": overall,
        "service": "blogfront",
        "version": "0.1.0",
        "checks": checks,
    }


@app.get("/api/blog/health")
async def health_check() -> JSONResponse:
    """Health check reporting missing configuration."""
    result = _run_health_checks()
    return JSONResponse(content=result, status_code=200)
