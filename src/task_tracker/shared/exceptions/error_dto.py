"""
Error DTO returned by the exception handlers.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Structured error body for every non-2xx response."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    error: str
    validation_details: Optional[dict[str, list[str]]] = Field(
        default=None, alias="validationDetails"
    )

    def to_content(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
