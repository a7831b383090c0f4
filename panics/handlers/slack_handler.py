"""
Slack 웹훅을 통한 리포트 전송 핸들러
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..formatter import FormattedReport
from .base import BaseHandler

logger = logging.getLogger(__name__)


class SlackHandler(BaseHandler):
    """
    Slack 웹훅으로 리포트를 POST 하는 핸들러

    재시도하지 않으며, 실패는 로그로만 남깁니다.
    """

    name = "slack"

    def __init__(
        self,
        webhook_url: str,
        channel: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Slack 핸들러 초기화

        Args:
            webhook_url: Slack 웹훅 URL
            channel: 메시지를 보낼 채널 (없으면 웹훅 기본 채널)
            timeout: 요청 타임아웃 (초, None이면 무제한)
            session: 재사용할 requests 세션 (없으면 requests.post 사용)
        """
        self.webhook_url = webhook_url
        self.channel = channel
        self.timeout = timeout
        self.session = session

    def build_payload(self, report: FormattedReport) -> Dict[str, Any]:
        """
        Slack 메시지 페이로드 생성

        Args:
            report: 포맷팅된 리포트

        Returns:
            Slack API 메시지 페이로드
        """
        payload = {
            "text": report.body_text,
            "attachments": [{"text": report.trace_snippet, "mrkdwn_in": ["text"]}],
        }
        if self.channel:
            payload["channel"] = self.channel
        return payload

    def emit(self, report: FormattedReport) -> None:
        if not self.webhook_url:
            return

        payload = self.build_payload(report)
        post = self.session.post if self.session is not None else requests.post

        try:
            response = post(
                self.webhook_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("[panics] error on capturing error : %s", e)
            return

        if response.status_code >= 300:
            logger.error("[panics] error on capturing error : %s", response.text)
