"""Circuit endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ...schemas.routing import CircuitRequest, CircuitResponse, DistanceRequest, DistanceResponse
from ...services.geospatial import distance_km
from ...services.outputs.routing_formatter import circuit_to_csv
from ...services.routing.service import build_circuit, optimize_circuit

router = APIRouter(prefix="/circuits", tags=["circuits"])


@router.post("/distance", response_model=DistanceResponse, status_code=status.HTTP_200_OK)
def distance(payload: DistanceRequest) -> DistanceResponse:
    """Great-circle distance between two points, in kilometres."""
    return DistanceResponse(distance_km=distance_km(payload.origin, payload.destination))


@router.post("/optimize", response_model=CircuitResponse, status_code=status.HTTP_200_OK)
def optimize(payload: CircuitRequest) -> CircuitResponse:
    try:
        return optimize_circuit(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error optimizing circuit: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize circuit: {str(exc)}"
        ) from exc


@router.post("/optimize.csv", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def optimize_csv(payload: CircuitRequest) -> PlainTextResponse:
    """Same circuit as ``/optimize`` rendered as CSV, one row per stop."""
    try:
        plan = build_circuit(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error exporting circuit: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export circuit: {str(exc)}"
        ) from exc
    return PlainTextResponse(circuit_to_csv(plan), media_type="text/csv")
