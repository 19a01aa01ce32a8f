"""Receipt endpoints - submit a receipt and look up its points."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from pydantic import BaseModel

from ..service import get_points, process_receipt
from ..storage import ReceiptStore

router = APIRouter(prefix="/receipts", tags=["receipts"])


class ProcessReceiptResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class ErrorResponse(BaseModel):
    """Body of every receipt error response"""
    description: str


def get_store(request: Request) -> ReceiptStore:
    """Dependency returning the store created with the application."""
    return request.app.state.receipt_store


@router.post(
    "/process",
    response_model=ProcessReceiptResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def submit_receipt(
    document: Any = Body(None),
    store: ReceiptStore = Depends(get_store),
) -> ProcessReceiptResponse:
    """Score a receipt and return the identifier its points are stored under.

    Raises InvalidReceiptError (400) when the document fails validation.
    """
    receipt_id = process_receipt(store, document)
    return ProcessReceiptResponse(id=receipt_id)


@router.get(
    "/{receipt_id}/points",
    response_model=PointsResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def get_receipt_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_store),
) -> PointsResponse:
    """Return the points awarded to a previously processed receipt."""
    return PointsResponse(points=get_points(store, receipt_id))


__all__ = ["ErrorResponse", "PointsResponse", "ProcessReceiptResponse", "get_store", "router"]
