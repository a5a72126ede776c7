"""Offline want-list API endpoints."""
from fastapi import APIRouter, HTTPException, Request

from ..models import WantListResponse
from ..services import scanner
from ..utils.logger import logger

router = APIRouter(prefix="/api/wants", tags=["wants"])


@router.post("/upload", response_model=WantListResponse)
async def upload_wants(request: Request) -> WantListResponse:
    """Replace the offline want list with the CSV in the request body.

    Lookups switch to the offline list afterwards.

    Returns:
        Number of wants loaded
    """
    body = await request.body()
    if not body:
        raise HTTPException(status_code=400, detail="Empty CSV upload")

    try:
        count = scanner.load_csv_text(body.decode("utf-8-sig"))
    except UnicodeDecodeError as e:
        logger.error(f"Error decoding want list: {str(e)}")
        raise HTTPException(status_code=400, detail="CSV must be UTF-8 encoded")
    except Exception as e:
        logger.error(f"Error loading want list: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    return WantListResponse(loaded=count, message=f"Loaded {count} barcodes!")
