"""
패닉 예외 정의
"""

from typing import Any, NoReturn

UNKNOWN_ERROR = "Unknown error"


class Panic(Exception):
    """
    임의의 값을 담아 던지는 예외

    핸들러 코드가 문자열이나 예외가 아닌 값으로도 패닉을 일으킬 수 있도록 합니다.
    """

    def __init__(self, value: Any = None):
        self.value = value
        super().__init__(value)


def panic(value: Any) -> NoReturn:
    """value 를 담은 Panic 을 발생시킨다."""
    raise Panic(value)
