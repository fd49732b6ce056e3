import logging

import psycopg
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tracker.api.routes import positions

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="position-tracker API")

    @app.exception_handler(psycopg.Error)
    async def _database_error(request: Request, exc: psycopg.Error) -> JSONResponse:
        logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(positions.router)
    return app


app = create_app()
