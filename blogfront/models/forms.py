"""Comment and contact form submission models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Any:
    # Form clients send numbers and booleans for text fields; keep them as text.
    if value is None or isinstance(value, (str, dict, list)):
        return value
    return str(value)


class CommentSubmission(BaseModel):
    """Comment form payload.

    Fields are optional here; the comment proxy reports missing ones with a
    400 and a readable message instead of a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    post_id: int | None = Field(None, alias="postId")
    name: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=200)
    message: str | None = Field(None, max_length=10000)
    # Caller-supplied WordPress application password; selects the
    # authenticated JSON route when both are present.
    auth_user: str | None = Field(None, alias="authUser")
    auth_pass: str | None = Field(None, alias="authPass")

    @field_validator(
        "name", "email", "message", "auth_user", "auth_pass", mode="before"
    )
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class ContactSubmission(BaseModel):
    """Contact form payload."""

    name: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=200)
    subject: str | None = Field(None, max_length=300)
    message: str | None = Field(None, max_length=10000)

    @field_validator("name", "email", "subject", "message", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class FormResponse(BaseModel):
    ok: bool = True
