import pytest

from panics import notifier as notifier_module
from panics.config import Options
from panics.dispatch import run_inline
from panics.notifier import PanicNotifier


@pytest.fixture(autouse=True)
def reset_default_notifier():
    """테스트마다 전역 알리미 초기화"""
    notifier_module._default_notifier = None
    yield
    notifier_module._default_notifier = None


@pytest.fixture
def make_notifier():
    """핸들러를 같은 스레드에서 실행하는 알리미 생성"""

    def _make(**kwargs) -> PanicNotifier:
        return PanicNotifier(Options(**kwargs), dispatch=run_inline)

    return _make
