from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Confirmation body returned by delete endpoints."""

    message: str


class ErrorResponse(BaseModel):
    """Shape of every error body (documentation only)."""

    message: str
    request_id: str | None = None
