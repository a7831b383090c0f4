"""
파일 기반 리포트 핸들러
"""

import logging

from ..formatter import FormattedReport
from .base import BaseHandler

logger = logging.getLogger(__name__)

ENTRY_TERMINATOR = "\r\n"


class FileHandler(BaseHandler):
    """
    panics.log 파일에 리포트를 추가 기록하는 핸들러

    로그 회전을 견딜 수 있도록 기록할 때마다 파일을 열고 닫습니다.
    """

    name = "file"

    def __init__(self, file_path: str):
        """
        파일 핸들러 초기화

        Args:
            file_path: 로그 파일 경로 (디렉토리는 미리 존재해야 함)
        """
        self.file_path = file_path

    def emit(self, report: FormattedReport) -> None:
        entry = report.body_text + report.trace_snippet + ENTRY_TERMINATOR

        try:
            # newline="" : CRLF 를 그대로 기록
            with open(self.file_path, "a", encoding="utf-8", newline="") as f:
                f.write(entry)
        except OSError as e:
            logger.error("[panics] failed to write file %s: %s", self.file_path, e)
