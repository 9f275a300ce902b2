# estate_http_api/routers/properties.py

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from estate_http_api.db.models import PropertyStatus, PropertyType
from estate_http_api.db.session import get_session
from estate_http_api.repositories.properties import PropertiesRepository
from estate_http_api.schemas.properties import PropertyCreate, PropertyRead, PropertyUpdate
from estate_http_api.services.property_service import PropertyService

router = APIRouter(prefix="/properties", tags=["properties"])


def get_property_service(session: Session = Depends(get_session)) -> PropertyService:
    return PropertyService(PropertiesRepository(session))


@router.get("", response_model=List[PropertyRead], summary="List properties")
def list_properties(
    service: PropertyService = Depends(get_property_service),
) -> List[PropertyRead]:
    return service.list_all()


@router.get("/type/{property_type}", response_model=List[PropertyRead])
def list_by_type(
    property_type: PropertyType,
    service: PropertyService = Depends(get_property_service),
) -> List[PropertyRead]:
    return service.list_by_type(property_type)


@router.get("/status/{property_status}", response_model=List[PropertyRead])
def list_by_status(
    property_status: PropertyStatus,
    service: PropertyService = Depends(get_property_service),
) -> List[PropertyRead]:
    return service.list_by_status(property_status)


@router.get(
    "/search",
    response_model=List[PropertyRead],
    summary="Free-text property search",
    description="Case-insensitive match on name or address.",
)
def search(
    query: str = Query(..., description="Text to look for in name or address."),
    service: PropertyService = Depends(get_property_service),
) -> List[PropertyRead]:
    return service.search(query)


@router.get("/search/criteria", response_model=List[PropertyRead], summary="Filter properties")
def search_by_criteria(
    type: Optional[PropertyType] = Query(None),
    status_: Optional[PropertyStatus] = Query(None, alias="status"),
    min_price: Optional[Decimal] = Query(None, alias="minPrice"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice"),
    min_area: Optional[Decimal] = Query(None, alias="minArea"),
    max_area: Optional[Decimal] = Query(None, alias="maxArea"),
    service: PropertyService = Depends(get_property_service),
) -> List[PropertyRead]:
    return service.search_by_criteria(
        property_type=type,
        status=status_,
        min_price=min_price,
        max_price=max_price,
        min_area=min_area,
        max_area=max_area,
    )


@router.get("/{property_id}", response_model=PropertyRead, summary="Get a single property")
def get_property(
    property_id: int,
    service: PropertyService = Depends(get_property_service),
) -> PropertyRead:
    return service.get(property_id)


@router.post(
    "",
    response_model=PropertyRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a property",
)
def create_property(
    *,
    service: PropertyService = Depends(get_property_service),
    payload: PropertyCreate,
) -> PropertyRead:
    return service.create(payload)


@router.put("/{property_id}", response_model=PropertyRead, summary="Update a property")
def update_property(
    property_id: int,
    payload: PropertyUpdate,
    service: PropertyService = Depends(get_property_service),
) -> PropertyRead:
    return service.update(property_id, payload)


@router.delete(
    "/{property_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a property",
)
def delete_property(
    property_id: int,
    service: PropertyService = Depends(get_property_service),
) -> Response:
    if not service.delete(property_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
