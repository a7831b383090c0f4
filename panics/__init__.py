"""
panics - HTTP 핸들러 패닉 복구 및 에러 리포트 라이브러리

처리되지 않은 예외를 잡아 Slack 웹훅과 로컬 로그 파일(panics.log)로 리포트합니다.
"""

__version__ = "0.1.0"

# 설정 관련 임포트
from .config import Options, PanicsSettings, render_tags

# 예외 관련 임포트
from .exceptions import Panic, panic

# 포매터
from .formatter import FormattedReport, format_report

# 핸들러 클래스 임포트
from .handlers import BaseHandler, FileHandler, SlackHandler

# 미들웨어
from .middleware import PanicMiddleware, add_panic_middleware

# 알리미
from .notifier import PanicNotifier, capture, get_notifier, get_options, set_options

# 복구
from .recovery import capture_handler, normalize_panic

__all__ = [
    # 설정
    "Options",
    "PanicsSettings",
    "render_tags",
    "set_options",
    "get_options",
    # 알리미
    "PanicNotifier",
    "get_notifier",
    "capture",
    # 포매터
    "FormattedReport",
    "format_report",
    # 복구
    "Panic",
    "panic",
    "normalize_panic",
    "capture_handler",
    "PanicMiddleware",
    "add_panic_middleware",
    # 핸들러
    "BaseHandler",
    "FileHandler",
    "SlackHandler",
]
