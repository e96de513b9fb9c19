from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import AccountNotFoundError, BankingError, DuplicateAccountError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[BankingError], int] = {
    AccountNotFoundError: 404,
    DuplicateAccountError: 409,
}


def register_exception_handlers(app: FastAPI) -> None:
    # subclasses resolve to this handler through the exception's MRO
    @app.exception_handler(BankingError)
    async def banking_error_handler(request: Request, exc: BankingError) -> JSONResponse:
        status_code = STATUS_BY_ERROR.get(type(exc), 400)
        logger.warning(
            "request.rejected",
            extra={"path": request.url.path, "status_code": status_code},
        )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})
