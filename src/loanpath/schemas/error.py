# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Problem Details body returned for every non-2xx response.

    See https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str = Field(
        default="about:blank",
        description="URI reference identifying the problem type.",
    )
    title: str = Field(description="Short human-readable summary of the problem.")
    status: int = Field(description="HTTP status code.")
    detail: str = Field(
        default="",
        description="User-facing explanation of this occurrence.",
    )
    request_id: str = Field(
        default="",
        description="Correlation ID echoed from X-Request-ID, or generated.",
    )
    errors: list[dict] | None = Field(
        default=None,
        description="Field-level validation failures (422 only).",
    )
