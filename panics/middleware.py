from typing import Callable, Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from .notifier import PanicNotifier
from .recovery import PASSTHROUGH_EXCEPTIONS, dump_request, recover


class PanicMiddleware(BaseHTTPMiddleware):
    """
    call_next 체인 전체의 패닉을 복구하는 미들웨어

    capture_handler 와 같은 규칙으로 리포트를 발행하고 500 응답을 반환합니다.
    """

    def __init__(self, app: ASGIApp, notifier: Optional[PanicNotifier] = None):
        super().__init__(app)
        self.notifier = notifier

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_dump = await dump_request(request)
        try:
            return await call_next(request)
        except PASSTHROUGH_EXCEPTIONS:
            raise
        except Exception as exc:
            return recover(exc, request_dump, self.notifier)


def add_panic_middleware(app: FastAPI, notifier: Optional[PanicNotifier] = None) -> None:
    """
    FastAPI 애플리케이션에 패닉 복구 미들웨어를 추가합니다.

    Args:
        app: FastAPI 애플리케이션 인스턴스
        notifier: 사용할 알리미 (None이면 요청 시점의 전역 알리미)
    """
    app.add_middleware(PanicMiddleware, notifier=notifier)
