"""
Client endpoints.

- GET /api/clients - List clients
- POST /api/clients - Create client
- GET /api/clients/meta - Count clients
- GET /api/clients/{id} - Get client
- PATCH /api/clients/{id} - Update client
- DELETE /api/clients/{id} - Delete client
- GET /api/clients/{id}/appointments - Appointments of a client
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_client_service
from api.schemas import (
    AppointmentResponse,
    ClientCreate,
    ClientResponse,
    ClientUpdate,
    MetaResponse,
)
from core.logging import get_logger
from services import ClientService


logger = get_logger(__name__)
router = APIRouter(prefix="/api/clients", tags=["Clients"])


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    skip: int = Query(default=0, ge=0),
    take: Optional[int] = Query(default=None, ge=1),
    email: Optional[str] = None,
    last_name: Optional[str] = None,
    service: ClientService = Depends(get_client_service),
) -> list[ClientResponse]:
    """List clients, newest first. Filter by email or last name."""
    clients = await service.find_many(
        skip=skip, take=take, email=email, last_name=last_name
    )
    return [ClientResponse.model_validate(client) for client in clients]


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(
    request: ClientCreate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Create a new client."""
    client = await service.create(request.model_dump())
    return ClientResponse.model_validate(client)


@router.get("/meta", response_model=MetaResponse)
async def clients_meta(
    email: Optional[str] = None,
    last_name: Optional[str] = None,
    service: ClientService = Depends(get_client_service),
) -> MetaResponse:
    """Count clients matching the filters."""
    return MetaResponse(count=await service.count(email=email, last_name=last_name))


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Get a client by id."""
    client = await service.find_one(client_id)
    if client is None:
        raise HTTPException(
            status_code=404,
            detail=f"No resource was found for {client_id}",
        )
    return ClientResponse.model_validate(client)


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    request: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """
    Update a client.

    Only the fields present in the body change.
    """
    client = await service.update(client_id, request.model_dump(exclude_unset=True))
    return ClientResponse.model_validate(client)


@router.delete("/{client_id}", response_model=ClientResponse)
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Delete a client."""
    client = await service.delete(client_id)
    return ClientResponse.model_validate(client)


@router.get("/{client_id}/appointments", response_model=list[AppointmentResponse])
async def list_client_appointments(
    client_id: str,
    skip: int = Query(default=0, ge=0),
    take: Optional[int] = Query(default=None, ge=1),
    service: ClientService = Depends(get_client_service),
) -> list[AppointmentResponse]:
    """List a client's appointments, soonest first."""
    appointments = await service.find_appointments(client_id, skip=skip, take=take)
    return [AppointmentResponse.model_validate(a) for a in appointments]
