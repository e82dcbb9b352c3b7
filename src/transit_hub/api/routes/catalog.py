"""Route catalog endpoints."""

from __future__ import annotations

import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...data.places import KOSOVO_CENTER
from ...data.route_catalog import CatalogError, get_all_routes
from ...schemas.catalog import PlaceModel, RouteModel
from ...services.catalog import find_route, list_places, list_routes
from ...services.export.geojson import routes_to_geojson

router = APIRouter(prefix="/catalog", tags=["catalog"])

DEFAULT_MAP_ZOOM = 9


def _catalog_unavailable(exc: Exception) -> HTTPException:
    logging.error(f"Route catalog failed to load: {exc}")
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=f"Route catalog is invalid: {str(exc)}",
    )


@router.get("/routes", response_model=List[RouteModel], status_code=status.HTTP_200_OK)
def get_routes(
    kind: Optional[Literal["city", "intercity"]] = Query(default=None, description="Filter by line kind"),
) -> List[RouteModel]:
    try:
        return list_routes(kind)
    except (CatalogError, FileNotFoundError) as exc:
        raise _catalog_unavailable(exc) from exc


@router.get("/routes/{route_id}", response_model=RouteModel, status_code=status.HTTP_200_OK)
def get_route(route_id: str) -> RouteModel:
    try:
        route = find_route(route_id)
    except (CatalogError, FileNotFoundError) as exc:
        raise _catalog_unavailable(exc) from exc
    if route is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Route '{route_id}' not found")
    return route


@router.get("/geojson", status_code=status.HTTP_200_OK)
def get_routes_geojson() -> dict:
    """Route polylines for the live map."""
    try:
        return routes_to_geojson(get_all_routes())
    except (CatalogError, FileNotFoundError) as exc:
        raise _catalog_unavailable(exc) from exc


@router.get("/places", response_model=List[PlaceModel], status_code=status.HTTP_200_OK)
def get_places() -> List[PlaceModel]:
    return list_places()


@router.get("/map-defaults", status_code=status.HTTP_200_OK)
def get_map_defaults() -> dict:
    """Initial view for the live map."""
    return {"center": list(KOSOVO_CENTER), "zoom": DEFAULT_MAP_ZOOM}
