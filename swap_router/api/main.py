"""FastAPI application for the swap router compiler."""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI

from swap_router import __version__
from swap_router.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("SWAP_ROUTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("SWAP_ROUTER_PORT", "8000"))
DEBUG = os.environ.get("SWAP_ROUTER_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Swap Router Compiler",
    description="Compiles quoted swap trades into router calldata",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - SWAP_ROUTER_HOST: Host to bind to (default: 0.0.0.0)
    - SWAP_ROUTER_PORT: Port to bind to (default: 8000)
    - SWAP_ROUTER_DEBUG: Enable debug logging and reload mode (default: false)
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if DEBUG else logging.INFO
        ),
    )
    uvicorn.run(
        "swap_router.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
