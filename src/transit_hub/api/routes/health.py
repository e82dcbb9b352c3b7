"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/catalog", status_code=status.HTTP_200_OK)
def health_catalog() -> dict:
    """Check that the route catalog loads and validates."""
    from ...data.route_catalog import load_routes

    try:
        routes = load_routes()
        return {"service": "catalog", "healthy": True, "routes": len(routes)}
    except Exception as exc:
        return {"service": "catalog", "healthy": False, "error": str(exc)}
