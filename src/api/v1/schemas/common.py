"""Response envelopes shared by the v1 routes."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "NO_PROFILE",
                "message": "There is no profile for this user",
                "details": {"user_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6"},
            }
        }
    )

    error_code: str
    message: str
    details: Any | None = None


class MessageResponse(BaseModel):
    """Acknowledgement for operations with nothing else to return."""

    model_config = ConfigDict(json_schema_extra={"example": {"message": "User deleted"}})

    message: str
