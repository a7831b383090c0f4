"""
설정 관리 모듈

리포터, 포매터, 핸들러가 공유하는 설정을 관리합니다.
설정은 프로세스 시작 시 한 번 구성하고 이후에는 읽기 전용으로 사용합니다.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import find_my_ip

logger = logging.getLogger(__name__)

LOG_FILE_NAME = "panics.log"

# 기본 설정
_DEFAULT_OPTIONS = {
    "environment": "",
    "log_directory": "",  # 비어 있으면 파일 핸들러 비활성화
    "webhook_url": "",  # 비어 있으면 Slack 핸들러 비활성화
    "webhook_channel": "",
    "tags": {},
    "custom_message": "",
    "show_ip": False,
    "webhook_timeout": None,  # None이면 타임아웃 없음
}


def render_tags(tags: Optional[Dict[str, str]]) -> str:
    """
    태그 딕셔너리를 표시용 문자열로 변환

    키 기준으로 정렬하므로 입력 순서와 관계없이 항상 같은 결과를 반환합니다.

    Args:
        tags: 라벨 -> 값 딕셔너리

    Returns:
        "`key: value` | `key: value`" 형식의 문자열 (태그가 없으면 빈 문자열)
    """
    if not tags:
        return ""
    return " | ".join(f"`{key}: {tags[key]}`" for key in sorted(tags))


@dataclass
class Options:
    """
    패닉 리포터 설정

    Attributes:
        environment: 모든 리포트에 포함되는 환경 이름
        log_directory: panics.log 를 기록할 디렉토리
        webhook_url: Slack 웹훅 URL
        webhook_channel: 메시지를 보낼 채널 (선택)
        tags: 모든 리포트에 붙는 정적 태그
        custom_message: 모든 리포트 끝에 붙는 고정 메시지
        show_ip: 서버 IP를 태그에 추가할지 여부
        webhook_timeout: 웹훅 요청 타임아웃 (초)
    """

    environment: str = ""
    log_directory: str = ""
    webhook_url: str = ""
    webhook_channel: str = ""
    tags: Dict[str, str] = field(default_factory=dict)
    custom_message: str = ""
    show_ip: bool = False
    webhook_timeout: Optional[float] = None
    tag_string: str = field(init=False, default="")

    def __post_init__(self):
        self.tags = dict(self.tags or {})

        if self.show_ip:
            try:
                self.tags["ip"] = find_my_ip()
            except OSError as e:
                logger.warning("[panics] cannot find IP, %s", e)

        # 태그 문자열은 생성 시 한 번만 만든다
        self.tag_string = render_tags(self.tags)

    @property
    def log_file_path(self) -> Optional[str]:
        """파일 핸들러가 기록할 경로 (비활성화 상태면 None)"""
        if not self.log_directory:
            return None
        return os.path.join(self.log_directory, LOG_FILE_NAME)

    @property
    def file_enabled(self) -> bool:
        return bool(self.log_directory)

    @property
    def webhook_enabled(self) -> bool:
        return bool(self.webhook_url)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "Options":
        """
        딕셔너리에서 설정 생성

        알 수 없는 키는 무시하고 빠진 키는 기본값을 사용합니다.

        Args:
            values: 설정 값 딕셔너리

        Returns:
            Options 인스턴스
        """
        merged = _DEFAULT_OPTIONS.copy()
        merged.update({k: v for k, v in values.items() if k in _DEFAULT_OPTIONS})
        return cls(**merged)


class PanicsSettings(BaseSettings):
    """
    환경 변수(PANICS_*)와 .env 파일에서 읽는 설정

    예: PANICS_ENVIRONMENT=stage, PANICS_TAGS='{"region": "us"}'
    """

    model_config = SettingsConfigDict(env_prefix="PANICS_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: str = ""
    log_directory: str = ""
    webhook_url: str = ""
    webhook_channel: str = ""
    tags: Dict[str, str] = {}
    custom_message: str = ""
    show_ip: bool = False
    webhook_timeout: Optional[float] = None

    def to_options(self) -> Options:
        return Options.from_dict(self.model_dump())
