"""
本文件用于实现请求访问统计中间件：每个命中 `/api` 路由的请求计入 general，GET/POST 请求另计入对应动词的计数。
主要类:
- `VisitTrackingMiddleware`: 访问统计中间件
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.routing import Match

from app.services.visit_counter_service import VisitCounterService

TRACKED_METHODS = {"GET", "POST"}


class VisitTrackingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, counter: VisitCounterService, prefix: str = "/api") -> None:
        super().__init__(app)
        self.counter = counter
        self.prefix = prefix

    async def dispatch(self, request: Request, call_next):
        if request.url.path.startswith(self.prefix) and self._is_routed(request):
            self.counter.increment("general")
            if request.method in TRACKED_METHODS:
                self.counter.increment(request.method)
        return await call_next(request)

    @staticmethod
    def _is_routed(request: Request) -> bool:
        # 未匹配任何路由（404）或方法不允许（405）的请求不计数
        for route in request.app.router.routes:
            match, _ = route.matches(request.scope)
            if match == Match.FULL:
                return True
        return False
