"""
Appointment endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_appointment_service
from api.schemas import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
    MetaResponse,
)
from core.logging import get_logger
from services import AppointmentService


logger = get_logger(__name__)
router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


@router.get("", response_model=list[AppointmentResponse])
async def list_appointments(
    skip: int = Query(default=0, ge=0),
    take: Optional[int] = Query(default=None, ge=1),
    client_id: Optional[str] = None,
    property_id: Optional[str] = None,
    agent_id: Optional[str] = None,
    service: AppointmentService = Depends(get_appointment_service),
) -> list[AppointmentResponse]:
    """List appointments, newest first. Filter by client, property or agent."""
    appointments = await service.find_many(
        skip=skip,
        take=take,
        client_id=client_id,
        property_id=property_id,
        agent_id=agent_id,
    )
    return [AppointmentResponse.model_validate(a) for a in appointments]


@router.post("", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    request: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    """Book an appointment."""
    logger.info(
        "Booking appointment",
        client_id=request.client_id,
        property_id=request.property_id,
    )
    appointment = await service.create(request.model_dump())
    return AppointmentResponse.model_validate(appointment)


@router.get("/meta", response_model=MetaResponse)
async def appointments_meta(
    service: AppointmentService = Depends(get_appointment_service),
) -> MetaResponse:
    """Count appointments matching the filters."""
    return MetaResponse(count=await service.count())


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    """Get an appointment by id."""
    appointment = await service.find_one(appointment_id)
    if appointment is None:
        raise HTTPException(
            status_code=404,
            detail=f"No resource was found for {appointment_id}",
        )
    return AppointmentResponse.model_validate(appointment)


@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    request: AppointmentUpdate,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    """
    Update an appointment.

    Only the fields present in the body change.
    """
    appointment = await service.update(
        appointment_id, request.model_dump(exclude_unset=True)
    )
    return AppointmentResponse.model_validate(appointment)


@router.delete("/{appointment_id}", response_model=AppointmentResponse)
async def delete_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    """Cancel and delete an appointment."""
    appointment = await service.delete(appointment_id)
    return AppointmentResponse.model_validate(appointment)
