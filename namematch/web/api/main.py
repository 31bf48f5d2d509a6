"""FastAPI application for namematch."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ...config import AppConfig, default_config
from ...errors import InvalidArgumentError, RecordNotFoundError, RecordStoreError
from ...storage import JsonRecordStore, JsonUserStore
from .admin import router as admin_router
from .auth import router as auth_router
from .names import router as names_router

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "detail": message})


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        config: Application config; defaults to the environment-derived config

    Returns:
        FastAPI app with record and user stores attached to app.state
    """
    config = config or default_config

    app = FastAPI(
        title="namematch API",
        description="Fuzzy and phonetic person name search over case records",
        version="0.1.0",
    )

    # Allow the browser UI to call the API from any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.records = JsonRecordStore(config.records_file)
    app.state.users = JsonUserStore(config.users_file)

    app.include_router(auth_router)
    app.include_router(names_router)
    app.include_router(admin_router)

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        return _error(400, str(exc))

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError):
        return _error(404, "Record not found")

    @app.exception_handler(RecordStoreError)
    async def store_error_handler(request: Request, exc: RecordStoreError):
        logger.error(f"Storage error on {request.url.path}: {exc}")
        return _error(500, "Error accessing stored records")

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now().isoformat()}

    logger.info(f"API using data directory {config.data_dir}")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_config.host, port=default_config.port)
