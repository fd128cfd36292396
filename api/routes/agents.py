"""
Agent endpoints.

CRUD under /api/agents plus GET /api/agents/{id}/properties.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_agent_service
from api.schemas import (
    AgentCreate,
    AgentResponse,
    AgentUpdate,
    MetaResponse,
    PropertyResponse,
)
from core.logging import get_logger
from services import AgentService


logger = get_logger(__name__)
router = APIRouter(prefix="/api/agents", tags=["Agents"])


@router.get("", response_model=list[AgentResponse])
async def list_agents(
    skip: int = Query(default=0, ge=0),
    take: Optional[int] = Query(default=None, ge=1),
    email: Optional[str] = None,
    last_name: Optional[str] = None,
    service: AgentService = Depends(get_agent_service),
) -> list[AgentResponse]:
    """List agents, newest first. Filter by email or last name."""
    agents = await service.find_many(
        skip=skip, take=take, email=email, last_name=last_name
    )
    return [AgentResponse.model_validate(agent) for agent in agents]


@router.post("", response_model=AgentResponse, status_code=201)
async def create_agent(
    request: AgentCreate,
    service: AgentService = Depends(get_agent_service),
) -> AgentResponse:
    """Register a new agent."""
    agent = await service.create(request.model_dump())
    return AgentResponse.model_validate(agent)


@router.get("/meta", response_model=MetaResponse)
async def agents_meta(
    service: AgentService = Depends(get_agent_service),
) -> MetaResponse:
    """Count agents matching the filters."""
    return MetaResponse(count=await service.count())


@router.get("/{agent_id}", response_model=AgentResponse)
async def get_agent(
    agent_id: str,
    service: AgentService = Depends(get_agent_service),
) -> AgentResponse:
    """Get an agent by id."""
    agent = await service.find_one(agent_id)
    if agent is None:
        raise HTTPException(
            status_code=404,
            detail=f"No resource was found for {agent_id}",
        )
    return AgentResponse.model_validate(agent)


@router.patch("/{agent_id}", response_model=AgentResponse)
async def update_agent(
    agent_id: str,
    request: AgentUpdate,
    service: AgentService = Depends(get_agent_service),
) -> AgentResponse:
    """
    Update an agent.

    Only the fields present in the body change.
    """
    agent = await service.update(agent_id, request.model_dump(exclude_unset=True))
    return AgentResponse.model_validate(agent)


@router.delete("/{agent_id}", response_model=AgentResponse)
async def delete_agent(
    agent_id: str,
    service: AgentService = Depends(get_agent_service),
) -> AgentResponse:
    """
    Delete an agent.

    Cached properties and appointments referencing the agent are invalidated.
    """
    agent = await service.delete(agent_id)
    return AgentResponse.model_validate(agent)


@router.get("/{agent_id}/properties", response_model=list[PropertyResponse])
async def list_agent_properties(
    agent_id: str,
    skip: int = Query(default=0, ge=0),
    take: Optional[int] = Query(default=None, ge=1),
    service: AgentService = Depends(get_agent_service),
) -> list[PropertyResponse]:
    """List the properties an agent is listing."""
    properties = await service.find_properties(agent_id, skip=skip, take=take)
    return [PropertyResponse.model_validate(p) for p in properties]
