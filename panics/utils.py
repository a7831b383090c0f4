"""
유틸리티 함수 모듈
"""

import ipaddress
import socket

import psutil


def find_my_ip() -> str:
    """
    서버의 IPv4 주소 조회

    활성화된 비-루프백 인터페이스 중 첫 번째 IPv4 주소를 반환합니다.

    Returns:
        IPv4 주소 문자열

    Raises:
        OSError: 사용할 수 있는 네트워크가 없는 경우
    """
    try:
        stats = psutil.net_if_stats()
        addrs = psutil.net_if_addrs()
    except psutil.Error as e:
        raise OSError(str(e)) from e

    for name, iface_addrs in addrs.items():
        iface = stats.get(name)
        if iface is None or not iface.isup:
            continue  # interface down

        for addr in iface_addrs:
            if addr.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.IPv4Address(addr.address)
            except ValueError:
                continue
            if ip.is_loopback:
                continue
            return str(ip)

    raise OSError("not connected to networks")
