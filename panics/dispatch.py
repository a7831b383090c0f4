"""
백그라운드 전송 헬퍼

핸들러 호출을 데몬 스레드에서 실행하고 결과는 버립니다.
실패는 로그로만 남기며 호출자에게 전달하지 않습니다.
"""

import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)

Dispatch = Callable[..., Any]


def _run_best_effort(func: Callable[..., Any], *args, **kwargs) -> None:
    try:
        func(*args, **kwargs)
    except Exception:
        logger.exception("[panics] error on dispatching %s", getattr(func, "__qualname__", func))


def fire_and_forget(func: Callable[..., Any], *args, **kwargs) -> threading.Thread:
    """
    함수를 백그라운드 스레드에서 실행 (join 하지 않음)

    Args:
        func: 실행할 함수
        *args, **kwargs: 함수 인자

    Returns:
        시작된 스레드 (호출자는 기다리지 않아도 됨)
    """
    thread = threading.Thread(
        target=_run_best_effort,
        args=(func, *args),
        kwargs=kwargs,
        name="panics-dispatch",
        daemon=True,
    )
    thread.start()
    return thread


def run_inline(func: Callable[..., Any], *args, **kwargs) -> None:
    """같은 스레드에서 즉시 실행 (테스트/동기 환경용)"""
    _run_best_effort(func, *args, **kwargs)
