"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # WordPress REST API, e.g. https://example.com/wp-json/wp/v2
    wordpress_api_url: str = ""

    # WPForms form that receives contact submissions
    wpform_id: str = ""

    # Application password used for authenticated JSON posts
    wordpress_basic_auth_user: str = ""
    wordpress_basic_auth_password: str = ""

    # Site identity used in metadata fallbacks and JSON-LD
    site_name: str = "Sejan · Blog"
    publisher_name: str = "Sejan.xyz"
    default_author: str = "Sejan"
    google_site_verification: str | None = None

    # Response cache lifetime (seconds)
    cache_ttl: float = 300

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def api_base(self) -> str:
        """WordPress API base without a trailing slash ("" when unset)."""
        return self.wordpress_api_url.rstrip("/")

    @property
    def site_base(self) -> str:
        """Public site root, derived by dropping the ``/wp-json`` suffix."""
        base = self.api_base
        if "/wp-json" in base:
            return base.split("/wp-json")[0]
        return base


@lru_cache
def get_settings() -> Settings:
    return Settings()
