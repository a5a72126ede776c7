"""Barcode lookup API endpoints."""
from fastapi import APIRouter, HTTPException, Path

from ..models import LookupRequest, LookupResponse, LookupResult
from ..services import scanner
from ..utils.logger import logger

router = APIRouter(prefix="/api/lookup", tags=["lookup"])


def _to_response(result: LookupResult) -> LookupResponse:
    return LookupResponse(
        outcome=result.outcome,
        barcode=result.barcode,
        want=result.want,
        message=result.describe(),
    )


async def _scan(barcode: str) -> LookupResponse:
    try:
        result = await scanner.scan(barcode)
    except Exception as e:
        logger.error(f"Error looking up {barcode!r}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
    return _to_response(result)


@router.get("/{barcode}", response_model=LookupResponse)
async def lookup_barcode(
    barcode: str = Path(..., description="Scanned or typed barcode")
) -> LookupResponse:
    """Check a barcode against the wants list.

    Match, no-match, invalid input and lookup failures are all reported
    with status 200; the outcome field carries the result.
    """
    return await _scan(barcode)


@router.post("", response_model=LookupResponse)
async def lookup(request: LookupRequest) -> LookupResponse:
    """Check a barcode sent in the request body."""
    return await _scan(request.barcode)
