"""
핸들러 패닉 복구 모듈

Starlette/FastAPI 엔드포인트를 감싸서 처리되지 않은 예외를 복구하고,
리포트를 발행한 뒤 500 응답으로 변환합니다.
"""

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from .exceptions import UNKNOWN_ERROR, Panic
from .notifier import PanicNotifier, get_notifier

logger = logging.getLogger(__name__)

Endpoint = Callable[[Request], Union[Response, Awaitable[Response]]]

# 프레임워크가 의도적으로 사용하는 예외는 패닉으로 취급하지 않음
PASSTHROUGH_EXCEPTIONS = (HTTPException,)


def normalize_panic(exc: BaseException) -> str:
    """
    패닉 값을 에러 메시지로 변환

    - 문자열: 그대로 사용
    - 예외: 예외 메시지 사용 (메시지가 비어 있으면 "Unknown error")
    - 그 외: "Unknown error"

    Args:
        exc: 잡힌 예외 (Panic 이면 담긴 값을 기준으로 판단)

    Returns:
        에러 메시지
    """
    value: Any = exc.value if isinstance(exc, Panic) else exc

    if isinstance(value, str):
        return value

    if isinstance(value, BaseException):
        try:
            message = str(value)
        except Exception:
            return UNKNOWN_ERROR
        return message or UNKNOWN_ERROR

    return UNKNOWN_ERROR


async def dump_request(request: Request) -> bytes:
    """
    요청을 HTTP/1.x 텍스트 형식으로 덤프 (요청 라인, 헤더, 본문)

    실패하면 빈 bytes 를 반환합니다.
    """
    try:
        body = await request.body()

        target = request.url.path
        if request.url.query:
            target += "?" + request.url.query
        version = request.scope.get("http_version", "1.1")

        lines = [f"{request.method} {target} HTTP/{version}"]
        lines.extend(f"{name}: {value}" for name, value in request.headers.items())
        head = "\r\n".join(lines) + "\r\n\r\n"

        return head.encode("utf-8", errors="replace") + body
    except Exception as e:
        logger.debug("[panics] cannot dump request: %s", e)
        return b""


def recover(
    exc: Exception,
    request_dump: Optional[bytes] = None,
    notifier: Optional[PanicNotifier] = None,
) -> Response:
    """
    잡힌 예외를 리포트하고 500 응답 생성

    Args:
        exc: 핸들러에서 발생한 예외
        request_dump: dump_request() 결과
        notifier: 사용할 알리미 (None이면 전역 알리미)

    Returns:
        에러 메시지를 본문으로 하는 500 응답
    """
    message = normalize_panic(exc)
    logger.exception("[panics] recovered from panic: %s", message, exc_info=exc)

    try:
        (notifier or get_notifier()).publish_exception(exc, message, request_dump or None)
    except Exception:
        logger.exception("[panics] failed to publish panic report")

    return PlainTextResponse(message, status_code=HTTP_500_INTERNAL_SERVER_ERROR)


def capture_handler(
    endpoint: Optional[Endpoint] = None,
    *,
    notifier: Optional[PanicNotifier] = None,
):
    """
    엔드포인트의 패닉을 복구하는 데코레이터

    동기/비동기 엔드포인트 모두 지원합니다. 동기 함수는 스레드풀에서 실행됩니다.

    Usage:
        @capture_handler
        async def homepage(request): ...

        Route("/", capture_handler(homepage, notifier=my_notifier))

    Args:
        endpoint: request -> response 형태의 엔드포인트
        notifier: 사용할 알리미 (None이면 호출 시점의 전역 알리미)

    Returns:
        감싼 비동기 엔드포인트
    """

    def decorator(func: Endpoint) -> Callable[[Request], Awaitable[Response]]:
        is_async = inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(getattr(func, "__call__", None))

        @functools.wraps(func)
        async def wrapper(request: Request) -> Response:
            request_dump = await dump_request(request)
            try:
                if is_async:
                    return await func(request)
                return await run_in_threadpool(func, request)
            except PASSTHROUGH_EXCEPTIONS:
                raise
            except Exception as exc:
                return recover(exc, request_dump, notifier)

        return wrapper

    if endpoint is None:
        return decorator
    return decorator(endpoint)
