# aceit/api/exceptions/handlers.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from aceit.exceptions import AceItError
from aceit.schema.base import BaseResponse
from aceit.logging_config import app_logger


async def aceit_error_handler(request: Request, exc: AceItError) -> JSONResponse:
    app_logger.warning(
        f"{request.method} {request.url.path} failed: "
        f"{type(exc).__name__}: {exc.detail}"
    )
    body = BaseResponse.failure(type(exc).__name__, exc.detail)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AceItError, aceit_error_handler)
