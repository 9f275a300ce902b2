# estate_http_api/routers/clients.py

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from estate_http_api.db.models import ClientStatus, ClientType
from estate_http_api.db.session import get_session
from estate_http_api.repositories.clients import ClientsRepository
from estate_http_api.schemas.clients import ClientCreate, ClientRead, ClientUpdate
from estate_http_api.services.client_service import ClientService

router = APIRouter(prefix="/clients", tags=["clients"])


def get_client_service(session: Session = Depends(get_session)) -> ClientService:
    return ClientService(ClientsRepository(session))


@router.get("", response_model=List[ClientRead], summary="List clients")
def list_clients(service: ClientService = Depends(get_client_service)) -> List[ClientRead]:
    return service.list_all()


@router.get("/type/{client_type}", response_model=List[ClientRead])
def list_by_type(
    client_type: ClientType,
    service: ClientService = Depends(get_client_service),
) -> List[ClientRead]:
    return service.list_by_type(client_type)


@router.get(
    "/search",
    response_model=List[ClientRead],
    description="Match first name, last name, e-mail or phone.",
)
def search(
    query: str = Query(...),
    service: ClientService = Depends(get_client_service),
) -> List[ClientRead]:
    return service.search(query)


@router.get("/search/advanced", response_model=List[ClientRead])
def advanced_search(
    name: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    type: Optional[ClientType] = Query(None),
    status_: Optional[ClientStatus] = Query(None, alias="status"),
    service: ClientService = Depends(get_client_service),
) -> List[ClientRead]:
    return service.advanced_search(name=name, email=email, client_type=type, status=status_)


@router.get("/{client_id}", response_model=ClientRead, summary="Get a single client")
def get_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> ClientRead:
    return service.get(client_id)


@router.post(
    "",
    response_model=ClientRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a client",
)
def create_client(
    *,
    service: ClientService = Depends(get_client_service),
    payload: ClientCreate,
) -> ClientRead:
    return service.create(payload)


@router.put("/{client_id}", response_model=ClientRead, summary="Update a client")
def update_client(
    client_id: int,
    payload: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientRead:
    return service.update(client_id, payload)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a client")
def delete_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> Response:
    if not service.delete(client_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
