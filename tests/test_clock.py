import socket
import struct
import threading
import time
from datetime import datetime, timedelta, timezone

import pytest

from micaview.clock import (
    NTP_EPOCH_DELTA,
    ClockSyncError,
    OnlineClock,
    build_ntp_request,
    parse_ntp_response,
)


def _packet_with_seconds(secs1900):
    packet = bytearray(48)
    struct.pack_into("!I", packet, 40, secs1900)
    return bytes(packet)


def _serve_once(sock, reply):
    def run():
        try:
            data, addr = sock.recvfrom(1024)
            if reply is not None:
                sock.sendto(reply(data), addr)
        except OSError:
            pass

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread


@pytest.fixture
def udp_server():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    yield sock
    sock.close()


def test_request_layout():
    request = build_ntp_request()
    assert len(request) == 48
    assert request[0] == 0x1B
    assert set(request[1:]) == {0}


def test_parse_unix_epoch():
    assert parse_ntp_response(_packet_with_seconds(NTP_EPOCH_DELTA)) == datetime(
        1970, 1, 1, tzinfo=timezone.utc
    )


def test_parse_round_trip():
    moment = datetime(2024, 6, 1, 12, 30, 15, tzinfo=timezone.utc)
    secs = int(moment.timestamp()) + NTP_EPOCH_DELTA
    assert parse_ntp_response(_packet_with_seconds(secs)) == moment


def test_parse_short_packet():
    with pytest.raises(ValueError):
        parse_ntp_response(bytes(20))


def test_initial_state():
    clock = OnlineClock()
    assert clock.offset == timedelta(0)
    assert clock.synchronized is False


def test_synchronize_with_local_server(udp_server):
    received = []

    def reply(data):
        received.append(data)
        return _packet_with_seconds(int(time.time()) + NTP_EPOCH_DELTA + 3600)

    port = udp_server.getsockname()[1]
    thread = _serve_once(udp_server, reply)
    clock = OnlineClock("127.0.0.1", port, timeout=5)
    offset = clock.synchronize()
    thread.join(5)

    assert received == [build_ntp_request()]
    assert abs(offset.total_seconds() - 3600) < 5
    assert clock.synchronized is True
    assert clock.offset == offset
    drift = clock.now() - datetime.now(timezone.utc)
    assert abs(drift.total_seconds() - 3600) < 5


def test_synchronize_timeout(udp_server):
    port = udp_server.getsockname()[1]
    thread = _serve_once(udp_server, None)
    clock = OnlineClock("127.0.0.1", port, timeout=0.2)
    with pytest.raises(ClockSyncError):
        clock.synchronize()
    thread.join(5)
    assert clock.synchronized is False


def test_synchronize_short_reply(udp_server):
    port = udp_server.getsockname()[1]
    thread = _serve_once(udp_server, lambda data: b"\x1c" * 10)
    clock = OnlineClock("127.0.0.1", port, timeout=5)
    with pytest.raises(ClockSyncError):
        clock.synchronize()
    thread.join(5)
    assert clock.offset == timedelta(0)


def test_formatted_now_odd_second_hides_colons():
    clock = OnlineClock()
    assert clock.formatted_now(datetime(2024, 3, 5, 14, 7, 9)) == "05/03/2024 | 14 07 09"


def test_formatted_now_even_second_shows_colons():
    clock = OnlineClock()
    assert clock.formatted_now(datetime(2024, 3, 5, 14, 7, 10)) == "05/03/2024 | 14:07:10"


def test_formatted_now_default_shape():
    text = OnlineClock().formatted_now()
    assert len(text) == 21
    assert text[10:13] == " | "
    assert text[15] == text[18]
    assert text[15] in (":", " ")
    parsed = datetime.strptime(text[:10], "%d/%m/%Y")
    assert 1 <= parsed.day <= 31
    assert text[13:15].isdigit() and text[16:18].isdigit() and text[19:21].isdigit()


def test_formatted_now_ignores_microseconds():
    clock = OnlineClock()
    base = datetime(2024, 3, 5, 14, 7, 10)
    assert clock.formatted_now(base.replace(microsecond=999999)) == clock.formatted_now(base)