"""
리포트 포맷팅 모듈

에러 정보와 컨텍스트를 Slack/파일용 텍스트로 변환합니다.
부수 효과가 없는 순수 함수만 둡니다.
"""

import traceback
from typing import NamedTuple, Optional, Union

from .config import Options


class FormattedReport(NamedTuple):
    """핸들러에 전달되는 완성된 리포트"""

    body_text: str
    trace_snippet: str


def _to_text(value: Union[bytes, str, None]) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def fenced(text: str) -> str:
    """마크다운 코드 블록으로 감싸기"""
    return f" ```{text}```"


def format_report(
    environment: str,
    error_message: str,
    tags: str = "",
    custom_message: Optional[str] = None,
    request_context: Union[bytes, str, None] = None,
    include_stack_trace: bool = False,
    stack: Optional[str] = None,
) -> FormattedReport:
    """
    리포트 본문과 스택 트레이스 블록 생성

    Args:
        environment: 환경 이름
        error_message: 에러 메시지
        tags: render_tags()로 만든 태그 문자열
        custom_message: 본문 다음 줄에 붙는 고정 메시지
        request_context: 요청 덤프 또는 캡처 메시지 (bytes/str)
        include_stack_trace: 스택 트레이스 블록 생성 여부
        stack: 스택 트레이스 텍스트 (None이면 현재 호출 스택 사용)

    Returns:
        (body_text, trace_snippet)
    """
    body = f"[{_to_text(environment)}] *{_to_text(error_message)}*"

    if tags:
        body += " | " + _to_text(tags)

    if custom_message:
        body += "\n" + _to_text(custom_message)

    context = _to_text(request_context)
    if context:
        body += fenced(context)

    trace = ""
    if include_stack_trace:
        if stack is None:
            stack = "".join(traceback.format_stack())
        trace = fenced(_to_text(stack))

    return FormattedReport(body, trace)


def format_for_options(
    options: Options,
    error_message: str,
    request_context: Union[bytes, str, None] = None,
    include_stack_trace: bool = False,
    stack: Optional[str] = None,
) -> FormattedReport:
    return format_report(
        environment=options.environment,
        error_message=error_message,
        tags=options.tag_string,
        custom_message=options.custom_message,
        request_context=request_context,
        include_stack_trace=include_stack_trace,
        stack=stack,
    )
