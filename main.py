"""
本文件用于组装并启动 FastAPI 应用：创建缓存与服务实例、注册路由、中间件、异常处理与生命周期任务。
主要函数:
- `lifespan`: 应用生命周期管理（初始化数据库、退出时等待日志任务并释放连接池）
- `create_app`: 应用组装根（缓存/计数器/服务均在此创建并挂载到 `app.state`）
- `store_error_handler`: 将业务异常转换为 HTTP 响应
- `validation_error_handler`: 请求体/参数校验失败统一返回 400
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.api import api_router
from app.api.middleware import VisitTrackingMiddleware
from app.cache import InMemoryCache, ProductCache
from app.core.config import Settings, get_settings
from app.core.database import dispose_engine, init_db
from app.core.exceptions import ERROR_STATUS_CODES, StoreError
from app.core.logger import configure_logging, setup_logger
from app.services import (
    AccountService,
    CategoryService,
    LogService,
    OrderService,
    ProductService,
    VisitCounterService,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    输入:
    - `app`: FastAPI 应用实例

    输出:
    - 生命周期上下文（启动后进入、退出时清理）

    作用:
    - 启动时创建表结构；退出时等待未完成的日志提取任务并释放数据库连接池
    """

    lifespan_logger = setup_logger("lifespan")
    try:
        await init_db()
    except Exception as e:
        lifespan_logger.error(f"初始化数据库失败: {e}")
        raise
    lifespan_logger.info(f"{app.title} {app.version} 已启动")
    yield
    await app.state.log_service.drain()
    await dispose_engine()


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    status_code = ERROR_STATUS_CODES.get(exc.kind, 400)
    if status_code >= 500:
        setup_logger("api").error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    cache = InMemoryCache()
    product_cache = ProductCache()
    visit_counter = VisitCounterService()

    app.state.cache = cache
    app.state.product_cache = product_cache
    app.state.visit_counter = visit_counter
    app.state.account_service = AccountService(cache, product_cache)
    app.state.product_service = ProductService(cache, product_cache)
    app.state.order_service = OrderService(cache)
    app.state.category_service = CategoryService()
    app.state.log_service = LogService(settings.LOG_FILE_PATH, settings.LOG_OUTPUT_DIR)

    app.add_middleware(VisitTrackingMiddleware, counter=visit_counter)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    log_level = (settings.LOG_LEVEL or "info").lower()
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=log_level,
        access_log=log_level in {"debug", "info"},
    )
