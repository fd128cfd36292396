"""
Property listing endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_property_service
from api.schemas import (
    MetaResponse,
    PropertyCreate,
    PropertyResponse,
    PropertyUpdate,
)
from core.logging import get_logger
from core.storage import PropertyStatus
from services import PropertyService


logger = get_logger(__name__)
router = APIRouter(prefix="/api/properties", tags=["Properties"])


@router.get("", response_model=list[PropertyResponse])
async def list_properties(
    skip: int = Query(default=0, ge=0),
    take: Optional[int] = Query(default=None, ge=1),
    status: Optional[PropertyStatus] = None,
    city: Optional[str] = None,
    agent_id: Optional[str] = None,
    service: PropertyService = Depends(get_property_service),
) -> list[PropertyResponse]:
    """List properties, newest first. Filter by status, city or agent."""
    properties = await service.find_many(
        skip=skip, take=take, status=status, city=city, agent_id=agent_id
    )
    return [PropertyResponse.model_validate(p) for p in properties]


@router.post("", response_model=PropertyResponse, status_code=201)
async def create_property(
    request: PropertyCreate,
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse:
    """
    Create a property listing.

    Status defaults to available when omitted.
    """
    logger.info("Creating property", city=request.city, agent_id=request.agent_id)
    prop = await service.create(request.model_dump())
    return PropertyResponse.model_validate(prop)


@router.get("/meta", response_model=MetaResponse)
async def properties_meta(
    status: Optional[PropertyStatus] = None,
    city: Optional[str] = None,
    agent_id: Optional[str] = None,
    service: PropertyService = Depends(get_property_service),
) -> MetaResponse:
    """Count properties matching the filters."""
    count = await service.count(status=status, city=city, agent_id=agent_id)
    return MetaResponse(count=count)


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str,
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse:
    """Get a property by id."""
    prop = await service.find_one(property_id)
    if prop is None:
        raise HTTPException(
            status_code=404,
            detail=f"No resource was found for {property_id}",
        )
    return PropertyResponse.model_validate(prop)


@router.patch("/{property_id}", response_model=PropertyResponse)
async def update_property(
    property_id: str,
    request: PropertyUpdate,
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse:
    """
    Update a property.

    Only the fields present in the body change. Address and status
    may be omitted but not set to null.
    """
    prop = await service.update(property_id, request.model_dump(exclude_unset=True))
    return PropertyResponse.model_validate(prop)


@router.delete("/{property_id}", response_model=PropertyResponse)
async def delete_property(
    property_id: str,
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse:
    """Delete a property listing."""
    prop = await service.delete(property_id)
    return PropertyResponse.model_validate(prop)
