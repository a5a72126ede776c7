"""Session API endpoints."""
from fastapi import APIRouter, HTTPException

from ..config import settings
from ..models import LoginRequest, LoginResult, LoginStatus, SessionStatusResponse
from ..services import scanner
from ..utils.logger import logger

router = APIRouter(prefix="/api/session", tags=["session"])


@router.get("", response_model=SessionStatusResponse)
async def get_session() -> SessionStatusResponse:
    """Report the active lookup source and login state."""
    return SessionStatusResponse(
        source=scanner.source,
        authenticated=scanner.authenticated,
        wants_loaded=len(scanner.want_list),
    )


@router.post("/login", response_model=LoginResult)
async def login(request: LoginRequest) -> LoginResult:
    """Log in to the wants site, replacing any existing session.

    Args:
        request: Credentials; missing fields fall back to configuration

    Returns:
        Login result
    """
    if scanner.client is None:
        raise HTTPException(status_code=503, detail="No wants API configured")

    username = request.username or settings.username
    password = request.password or settings.password
    if not username or not password:
        raise HTTPException(status_code=400, detail="Username and password are required")

    try:
        logger.info(f"Logging in as {username}")
        result = await scanner.login(username, password)
    except Exception as e:
        logger.error(f"Error logging in: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    if result.status == LoginStatus.BAD_CREDENTIALS:
        raise HTTPException(status_code=401, detail=result.error_message)
    if result.status == LoginStatus.FAILED:
        raise HTTPException(status_code=502, detail=result.error_message)
    return result
