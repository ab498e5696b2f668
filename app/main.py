"""
FastAPI 应用主入口
"""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

# 将项目根目录添加到 python path，以便直接运行 main.py 时能找到 app 模块
sys.path.append(str(Path(__file__).resolve().parent.parent))

import structlog
from fastapi import FastAPI

from app.api.errors import register_exception_handlers
from app.api.todos import router as todos_router
from app.config import get_settings
from app.observability.logging_config import setup_logging
from app.observability.request_logger import RequestLoggerMiddleware
from app.todo.store import TodoStore

settings = get_settings()

# 初始化日志（在 import 时就生效）
setup_logging(env=settings.ENV, level=settings.LOG_LEVEL)
log = structlog.get_logger()


@asynccontextmanager
async def lifespan(application: FastAPI):
    """应用生命周期：只记录启动/关闭，内存数据随进程结束丢弃"""
    log.info(
        "应用启动",
        env=settings.ENV,
        app=settings.APP_NAME,
        listening=f"{settings.HOST}:{settings.APP_PORT}",
    )

    yield

    log.info("应用关闭", todo_count=len(application.state.todo_store))


def create_app(store: TodoStore | None = None) -> FastAPI:
    """
    组装应用：每个应用实例独占一个 TodoStore，
    挂在 app.state 上，由 get_todo_store 依赖注入给路由。
    """
    application = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        lifespan=lifespan,
        # 只暴露 /todos 相关路由
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.state.todo_store = store if store is not None else TodoStore()

    application.add_middleware(RequestLoggerMiddleware)
    register_exception_handlers(application)

    application.include_router(todos_router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.APP_PORT)
