"""
Shared response schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EntityResponse(BaseModel):
    """Fields common to every stored entity."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(
        ...,
        description="Unique identifier",
    )
    created_at: datetime = Field(
        ...,
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        ...,
        description="Last update timestamp",
    )


class MetaResponse(BaseModel):
    """Aggregate information about a collection."""

    count: int = Field(
        ...,
        description="Number of matching records",
    )
