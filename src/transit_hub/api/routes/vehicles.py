"""Live vehicle feed endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.vehicles import VehicleFeedRequest, VehicleFeedResponse
from ...services.simulation.service import simulate_fleet

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.post("/live", response_model=VehicleFeedResponse, status_code=status.HTTP_200_OK)
def live_vehicles(payload: VehicleFeedRequest) -> VehicleFeedResponse:
    try:
        return simulate_fleet(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error simulating vehicles: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to simulate vehicles: {str(exc)}"
        ) from exc
