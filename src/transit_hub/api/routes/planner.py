"""Trip planner endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.planner import TripPlanRequest, TripPlanResponse
from ...services.planner.service import plan_itineraries

router = APIRouter(prefix="/planner", tags=["planner"])


@router.post("/plan", response_model=TripPlanResponse, status_code=status.HTTP_200_OK)
def plan(payload: TripPlanRequest) -> TripPlanResponse:
    try:
        return plan_itineraries(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        # Log the full error for debugging
        logging.exception(f"Error planning trip: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to plan trip: {str(exc)}"
        ) from exc
