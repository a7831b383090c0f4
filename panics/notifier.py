"""
패닉 알림 모듈의 핵심 클래스

리포트를 포맷팅하고 활성화된 핸들러마다 백그라운드로 전송합니다.
"""

import logging
import traceback
from typing import List, Optional, Union

from .config import Options
from .dispatch import Dispatch, fire_and_forget
from .formatter import FormattedReport, format_for_options
from .handlers import FileHandler, SlackHandler
from .handlers.base import BaseHandler

logger = logging.getLogger(__name__)

MESSAGE_SEPARATOR = "\n\n"


class PanicNotifier:
    """
    패닉/에러 리포트 발행을 위한 클래스
    """

    def __init__(
        self,
        options: Optional[Options] = None,
        handlers: Optional[List[BaseHandler]] = None,
        dispatch: Dispatch = fire_and_forget,
    ):
        """
        알리미 초기화

        Args:
            options: 사용할 설정 (None이면 기본 설정)
            handlers: 사용할 핸들러 목록 (None이면 설정에서 결정)
            dispatch: 핸들러 호출 함수 (기본값: 백그라운드 스레드)
        """
        self.options = options if options is not None else Options()

        # 핸들러가 명시되지 않았다면 설정에서 핸들러 결정
        if handlers is None:
            handlers = self._create_default_handlers()

        self.handlers = handlers
        self.dispatch = dispatch

    def _create_default_handlers(self) -> List[BaseHandler]:
        handlers = []

        # 파일 핸들러
        if self.options.file_enabled:
            handlers.append(FileHandler(self.options.log_file_path))

        # Slack 핸들러
        if self.options.webhook_enabled:
            handlers.append(
                SlackHandler(
                    webhook_url=self.options.webhook_url,
                    channel=self.options.webhook_channel or None,
                    timeout=self.options.webhook_timeout,
                )
            )

        return handlers

    def format(
        self,
        error_message: str,
        context: Union[bytes, str, None] = None,
        with_stack_trace: bool = False,
        stack: Optional[str] = None,
    ) -> FormattedReport:
        return format_for_options(
            self.options,
            error_message,
            request_context=context,
            include_stack_trace=with_stack_trace,
            stack=stack,
        )

    def publish(
        self,
        error_message: str,
        context: Union[bytes, str, None] = None,
        with_stack_trace: bool = False,
        stack: Optional[str] = None,
    ) -> None:
        """
        리포트를 만들어 모든 핸들러로 전송

        리포트는 핸들러에 넘기기 전에 완성되며, 호출자는 전송 완료를 기다리지 않습니다.

        Args:
            error_message: 에러 메시지
            context: 요청 덤프 또는 추가 메시지
            with_stack_trace: 스택 트레이스 포함 여부
            stack: 스택 트레이스 텍스트 (None이면 현재 호출 스택)
        """
        if not self.handlers:
            return

        try:
            report = self.format(error_message, context, with_stack_trace, stack)
        except Exception:
            logger.exception("[panics] failed to format report")
            return

        for handler in self.handlers:
            try:
                self.dispatch(handler.emit, report)
            except Exception as e:
                # 한 핸들러의 실패가 다른 핸들러에 영향을 주지 않도록 함
                logger.error("[panics] failed to dispatch to %r: %s", handler, e)

    def publish_exception(
        self,
        exc: BaseException,
        error_message: str,
        context: Union[bytes, str, None] = None,
    ) -> None:
        """예외의 트레이스백을 포함하여 리포트 발행"""
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        self.publish(error_message, context, with_stack_trace=True, stack=stack)

    def capture(self, label: str, *message_parts: str) -> None:
        """
        핸들러를 거치지 않고 에러를 직접 리포트

        Args:
            label: 에러 라벨 (리포트 제목)
            *message_parts: 빈 줄로 이어 붙일 메시지들
        """
        try:
            context = MESSAGE_SEPARATOR.join(str(part) for part in message_parts)
        except Exception:
            logger.exception("[panics] cannot build capture message for %s", label)
            context = None
        self.publish(label, context, with_stack_trace=False)


# 전역 인스턴스 및 편의 함수

_default_notifier: Optional[PanicNotifier] = None


def set_options(options: Optional[Options] = None, **kwargs) -> PanicNotifier:
    """
    전역 설정 구성

    기존 설정을 통째로 교체합니다 (마지막 호출이 우선).

    Args:
        options: 설정 객체 (없으면 kwargs 로 생성)
        **kwargs: Options 필드 값

    Returns:
        새 설정으로 만든 전역 PanicNotifier
    """
    global _default_notifier
    if options is None:
        options = Options.from_dict(kwargs)
    _default_notifier = PanicNotifier(options)
    return _default_notifier


def get_notifier() -> PanicNotifier:
    """
    전역 알리미 가져오기

    Returns:
        PanicNotifier 인스턴스 (설정 전이면 아무 핸들러도 없는 알리미)
    """
    global _default_notifier
    if _default_notifier is None:
        _default_notifier = PanicNotifier()
    return _default_notifier


def get_options() -> Options:
    return get_notifier().options


def capture(label: str, *message_parts: str) -> None:
    """전역 알리미를 통해 에러 리포트"""
    get_notifier().capture(label, *message_parts)
