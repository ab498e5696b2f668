"""
全局异常处理：统一错误响应体为 {"error": "<message>"}

- TodoNotFoundError        → 404 {"error": "Todo not found"}
- 路径参数校验失败（非 UUID） → 400 {"error": "Invalid todo id"}
- 请求体校验失败            → 422 {"error": "Invalid request body", "detail": [...]}
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.todo.store import TodoNotFoundError

log = structlog.get_logger()

TODO_NOT_FOUND = "Todo not found"
INVALID_TODO_ID = "Invalid todo id"
INVALID_REQUEST_BODY = "Invalid request body"


async def todo_not_found_handler(request: Request, exc: TodoNotFoundError) -> JSONResponse:
    log.info("Todo 不存在", todo_id=str(exc.todo_id), method=request.method)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": TODO_NOT_FOUND},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("loc", ())[:1] == ("path",) for err in errors):
        log.info("路径参数非法", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": INVALID_TODO_ID},
        )

    log.info("请求体校验失败", path=request.url.path, error_count=len(errors))
    return JSONResponse(
        status_code=422,  # 新旧 Starlette 的 422 常量名不同，旧名已弃用，直接写数字
        content={"error": INVALID_REQUEST_BODY, "detail": jsonable_encoder(errors)},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(TodoNotFoundError, todo_not_found_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
