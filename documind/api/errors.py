import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from documind.core.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": exc.code, "message": exc.message}
    )


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    logger.warning(f"{request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": exc.code, "message": exc.message}
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
