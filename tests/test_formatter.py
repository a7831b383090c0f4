"""
리포트 포매터 테스트
"""

from panics.config import Options
from panics.formatter import FormattedReport, format_for_options, format_report


def test_body_starts_with_environment_and_message():
    report = format_report("prod", "db-timeout")
    assert report.body_text == "[prod] *db-timeout*"
    assert report.trace_snippet == ""


def test_body_prefix_with_all_optional_fields():
    """선택 필드가 모두 있어도 본문은 [env] *message* 로 시작"""
    report = format_report(
        "prod",
        "boom",
        tags="`region: us`",
        custom_message="call oncall",
        request_context="GET / HTTP/1.1",
        include_stack_trace=True,
        stack="trace here",
    )
    assert report.body_text.startswith("[prod] *boom*")
    assert report.body_text == "[prod] *boom* | `region: us`\ncall oncall ```GET / HTTP/1.1```"
    assert report.trace_snippet == " ```trace here```"


def test_tags_appended_with_separator():
    report = format_report("dev", "boom", tags="`region: us` | `tier: gold`")
    assert report.body_text == "[dev] *boom* | `region: us` | `tier: gold`"


def test_custom_message_on_new_line():
    report = format_report("dev", "boom", custom_message="see runbook")
    assert report.body_text == "[dev] *boom*\nsee runbook"


def test_request_context_bytes_are_decoded():
    report = format_report("dev", "boom", request_context=b"POST /orders HTTP/1.1\r\n\r\n{}")
    assert report.body_text == "[dev] *boom* ```POST /orders HTTP/1.1\r\n\r\n{}```"


def test_empty_context_is_omitted():
    assert format_report("dev", "boom", request_context=b"").body_text == "[dev] *boom*"
    assert format_report("dev", "boom", request_context=None).body_text == "[dev] *boom*"


def test_stack_trace_only_when_requested():
    without = format_report("dev", "boom", include_stack_trace=False, stack="trace")
    assert without.trace_snippet == ""

    current = format_report("dev", "boom", include_stack_trace=True)
    assert current.trace_snippet.startswith(" ```")
    assert current.trace_snippet.endswith("```")
    assert "test_stack_trace_only_when_requested" in current.trace_snippet


def test_formatter_never_fails_on_odd_input():
    """None 이나 문자열이 아닌 값이 들어와도 예외가 발생하지 않아야 함"""
    report = format_report(None, None, tags=None, custom_message=None, request_context=None)
    assert report.body_text == "[] **"

    report = format_report("dev", 42, custom_message=7, request_context=b"\xff\xfe")
    assert report.body_text.startswith("[dev] *42*\n7 ```")


def test_report_is_a_tuple():
    body, trace = format_report("dev", "boom")
    assert isinstance(format_report("dev", "boom"), FormattedReport)
    assert (body, trace) == ("[dev] *boom*", "")


def test_format_for_options_uses_configured_fields():
    options = Options(environment="stage", tags={"tier": "gold", "region": "us"}, custom_message="ping")
    report = format_for_options(options, "boom", request_context="ctx")
    assert report.body_text == "[stage] *boom* | `region: us` | `tier: gold`\nping ```ctx```"
