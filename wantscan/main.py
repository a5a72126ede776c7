"""FastAPI application entry point."""
from contextlib import AsyncExitStack

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .models import LookupSource
from .routes import lookup, session, wants
from .services import WantsClient, scanner
from .utils.logger import logger

app = FastAPI(
    title="Wantscan API",
    description="Check record barcodes against a buying service's wants list",
    version=__version__,
    debug=settings.debug,
)

# Scanner front-ends run on other origins (handhelds, phones)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(session.router)
app.include_router(lookup.router)
app.include_router(wants.router)

_resources = AsyncExitStack()


@app.get("/health")
async def health_check():
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy", "service": "wantscan"}


@app.get("/")
async def root():
    """Root endpoint.

    Returns:
        Service summary
    """
    return {
        "message": "Wantscan API",
        "version": __version__,
        "source": scanner.source.value,
        "docs": "/docs",
        "health": "/health",
    }


@app.on_event("startup")
async def startup_event():
    """Open the API session and load the offline list if configured."""
    logger.info("Starting Wantscan API")
    logger.info(f"Lookup source: {settings.source.value}")

    if settings.base_url:
        scanner.client = await _resources.enter_async_context(WantsClient())
        if settings.username and settings.password:
            result = await scanner.login(settings.username, settings.password)
            if not result.ok:
                logger.warning(f"Startup login failed: {result.error_message}")
    elif settings.source == LookupSource.ONLINE:
        logger.warning("WANTSCAN_BASE_URL is not set; online lookups will fail")

    if settings.wants_csv is not None:
        try:
            scanner.want_list.load_csv(settings.wants_csv)
        except OSError as e:
            logger.error(f"Could not load want list {settings.wants_csv}: {e}")


@app.on_event("shutdown")
async def shutdown_event():
    """Close the API session."""
    logger.info("Shutting down Wantscan API")
    await _resources.aclose()
    scanner.client = None


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wantscan.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info",
    )
