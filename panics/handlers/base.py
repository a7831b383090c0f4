"""
리포트 핸들러 기본 클래스
"""

from ..formatter import FormattedReport


class BaseHandler:
    """
    모든 리포트 핸들러의 기본 클래스

    핸들러는 완성된 리포트만 받으며, emit() 실패는 디스패처가 로그로 남깁니다.
    """

    name = "base"

    def emit(self, report: FormattedReport) -> None:
        """
        리포트 전송 - 하위 클래스에서 구현해야 합니다.

        Args:
            report: 포맷팅이 끝난 리포트
        """
        raise NotImplementedError("Subclasses must implement emit method")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"
