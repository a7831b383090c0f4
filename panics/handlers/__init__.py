"""
리포트 전송 핸들러 모듈
"""

from .base import BaseHandler
from .file_handler import FileHandler
from .slack_handler import SlackHandler

__all__ = [
    "BaseHandler",
    "FileHandler",
    "SlackHandler",
]
