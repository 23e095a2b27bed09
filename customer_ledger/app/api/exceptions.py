from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import (
    CustomerAlreadyExistsError,
    CustomerNotFoundError,
    InsufficientFundsError,
)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CustomerNotFoundError)
    async def customer_not_found_handler(
        request: Request, exc: CustomerNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(CustomerAlreadyExistsError)
    async def customer_exists_handler(
        request: Request, exc: CustomerAlreadyExistsError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(InsufficientFundsError)
    async def insufficient_funds_handler(
        request: Request, exc: InsufficientFundsError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})
