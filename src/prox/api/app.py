"""FastAPI app entrypoint for the projects service."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prox.api.routes.projects import router as projects_router

logger = logging.getLogger(__name__)

INVALID_PAYLOAD_MESSAGE = "Ma'lumotlar noto'g'ri"


async def _http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.info("Rejected project payload: %s", errors)
    fields = sorted({str(error["loc"][-1]) for error in errors if error.get("loc")})
    message = INVALID_PAYLOAD_MESSAGE
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": message},
    )


def create_app() -> FastAPI:
    app = FastAPI(title="proX Projects API", version="0.1.0")
    app.include_router(projects_router)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)

    @app.get("/api/health", tags=["system"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    logging.basicConfig(level=logging.INFO)
    uvicorn.run("prox.api.app:app", host="0.0.0.0", port=8000, reload=False)
