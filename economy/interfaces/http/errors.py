"""Translate economy errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from economy.modules.common.exceptions import EconomyError, StorageUnavailableError

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    "insufficient_funds": status.HTTP_402_PAYMENT_REQUIRED,
    "already_owned": status.HTTP_409_CONFLICT,
    "not_owned": status.HTTP_409_CONFLICT,
    "account_not_found": status.HTTP_404_NOT_FOUND,
    "item_not_found": status.HTTP_404_NOT_FOUND,
    "gift_not_found": status.HTTP_404_NOT_FOUND,
    "no_channel": status.HTTP_403_FORBIDDEN,
    "not_your_gift": status.HTTP_403_FORBIDDEN,
    "already_resolved": status.HTTP_409_CONFLICT,
    "gift_expired": status.HTTP_410_GONE,
    "invalid_gift": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


async def economy_error_handler(request: Request, exc: EconomyError) -> JSONResponse:
    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content={"code": exc.code, "detail": str(exc)})


async def storage_error_handler(request: Request, exc: StorageUnavailableError) -> JSONResponse:
    logger.error("Storage unavailable while handling %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"code": exc.code, "detail": "Storage temporarily unavailable, retry the request"},
        headers={"Retry-After": "1"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EconomyError, economy_error_handler)
    app.add_exception_handler(StorageUnavailableError, storage_error_handler)
