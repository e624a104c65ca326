"""FastAPI application exposing the Stock Manager over HTTP.

Domain exceptions are translated to status codes here, in one place:
not-found becomes 404, every other business rule violation becomes 400.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from beerstock.domain.exceptions import DomainException, EntityNotFoundError
from beerstock.infrastructure.http.beers import router as beers_router

logger = logging.getLogger(__name__)


async def _domain_error(request: Request, exc: DomainException) -> JSONResponse:
    if isinstance(exc, EntityNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    else:
        code = status.HTTP_400_BAD_REQUEST
    logger.info("%s %s -> %d: %s", request.method, request.url.path, code, exc)
    return JSONResponse(status_code=code, content={"detail": str(exc)})


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed payloads are a bad request, not FastAPI's default 422.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Beer Stock API",
        description="API for managing a beer stock",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.add_exception_handler(DomainException, _domain_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.include_router(beers_router, prefix="/api/v1/beers", tags=["beers"])
    return app


app = create_app()
