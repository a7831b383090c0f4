"""
Slack / 파일 핸들러 테스트
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from panics.formatter import FormattedReport
from panics.handlers import BaseHandler, FileHandler, SlackHandler

REPORT = FormattedReport("[prod] *boom* ```ctx```", " ```trace```")
WEBHOOK_URL = "https://hooks.example.com/services/T/B/X"


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestSlackHandler:
    def test_payload_shape(self):
        handler = SlackHandler(WEBHOOK_URL)
        assert handler.build_payload(REPORT) == {
            "text": "[prod] *boom* ```ctx```",
            "attachments": [{"text": " ```trace```", "mrkdwn_in": ["text"]}],
        }

    def test_payload_includes_channel_when_set(self):
        handler = SlackHandler(WEBHOOK_URL, channel="#alerts")
        assert handler.build_payload(REPORT)["channel"] == "#alerts"

    def test_emit_posts_json(self):
        with patch("panics.handlers.slack_handler.requests.post", return_value=_response(200)) as post:
            SlackHandler(WEBHOOK_URL, channel="#alerts").emit(REPORT)

        post.assert_called_once()
        args, kwargs = post.call_args
        assert args[0] == WEBHOOK_URL
        assert kwargs["headers"] == {"Content-Type": "application/json"}
        assert kwargs["json"]["text"] == REPORT.body_text
        assert kwargs["json"]["channel"] == "#alerts"
        assert kwargs["timeout"] is None

    def test_emit_uses_session_and_timeout(self):
        session = MagicMock()
        session.post.return_value = _response(200)

        SlackHandler(WEBHOOK_URL, timeout=3.0, session=session).emit(REPORT)

        session.post.assert_called_once()
        assert session.post.call_args.kwargs["timeout"] == 3.0

    def test_non_2xx_is_logged(self, caplog):
        """2xx 가 아닌 응답은 본문과 함께 로그로 남아야 함"""
        with patch(
            "panics.handlers.slack_handler.requests.post", return_value=_response(404, "no_service")
        ):
            SlackHandler(WEBHOOK_URL).emit(REPORT)

        assert "error on capturing error" in caplog.text
        assert "no_service" in caplog.text

    def test_transport_error_is_logged_not_raised(self, caplog):
        with patch(
            "panics.handlers.slack_handler.requests.post",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            SlackHandler(WEBHOOK_URL).emit(REPORT)

        assert "connection refused" in caplog.text

    def test_empty_url_skips_request(self):
        with patch("panics.handlers.slack_handler.requests.post") as post:
            SlackHandler("").emit(REPORT)
        post.assert_not_called()


class TestFileHandler:
    def test_appends_entry_with_crlf(self, tmp_path):
        path = tmp_path / "panics.log"
        handler = FileHandler(str(path))

        handler.emit(REPORT)
        handler.emit(FormattedReport("[prod] *second*", ""))

        assert path.read_bytes().decode("utf-8") == (
            "[prod] *boom* ```ctx``` ```trace```\r\n" "[prod] *second*\r\n"
        )

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "panics.log"
        assert not path.exists()

        FileHandler(str(path)).emit(REPORT)

        assert path.exists()

    def test_missing_directory_is_logged(self, tmp_path, caplog):
        """디렉토리가 없으면 리포트를 버리고 로그만 남김"""
        path = tmp_path / "missing" / "panics.log"

        FileHandler(str(path)).emit(REPORT)

        assert not path.exists()
        assert "failed to write file" in caplog.text


def test_base_handler_requires_emit():
    with pytest.raises(NotImplementedError):
        BaseHandler().emit(REPORT)


def test_handler_repr_includes_name(tmp_path):
    """로그에 찍히는 핸들러 표현에는 핸들러 이름이 포함되어야 함"""
    assert repr(FileHandler(str(tmp_path / "panics.log"))) == "<FileHandler file>"
    assert repr(SlackHandler(WEBHOOK_URL)) == "<SlackHandler slack>"
    assert repr(BaseHandler()) == "<BaseHandler base>"
