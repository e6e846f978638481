"""Wall clock corrected against an NTP server."""

from __future__ import annotations

import logging
import socket
import struct
import threading
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

NTP_PACKET_SIZE = 48
NTP_EPOCH_DELTA = 2208988800  # seconds from 1900-01-01 to 1970-01-01
_TRANSMIT_SECONDS_OFFSET = 40


class ClockSyncError(Exception):
    """Raised when the clock could not be synchronised."""


def build_ntp_request() -> bytes:
    """Return a 48-byte SNTP client request (LI=0, VN=3, mode=3)."""
    return bytes([0x1B]) + bytes(NTP_PACKET_SIZE - 1)


def parse_ntp_response(packet: bytes) -> datetime:
    """Extract the transmit timestamp (whole seconds) as an aware UTC datetime."""
    if len(packet) < NTP_PACKET_SIZE:
        raise ValueError(
            f"NTP packet too short: {len(packet)} bytes, expected {NTP_PACKET_SIZE}"
        )
    (secs1900,) = struct.unpack_from("!I", packet, _TRANSMIT_SECONDS_OFFSET)
    unix_seconds = (secs1900 - NTP_EPOCH_DELTA) % (1 << 32)
    return datetime.fromtimestamp(unix_seconds, tz=timezone.utc)


class OnlineClock:
    """System clock plus an offset learnt from an NTP server."""

    def __init__(
        self,
        server: str = "pool.ntp.org",
        port: int = 123,
        timeout: float = 3.0,
    ) -> None:
        self.server = server
        self.port = port
        self.timeout = timeout
        self._lock = threading.Lock()
        self._offset = timedelta(0)
        self._synchronized = False

    @property
    def offset(self) -> timedelta:
        with self._lock:
            return self._offset

    @property
    def synchronized(self) -> bool:
        with self._lock:
            return self._synchronized

    def synchronize(self) -> timedelta:
        """Query the server, store and return the offset to the system clock."""
        logger.debug("resolving host %s", self.server)
        try:
            infos = socket.getaddrinfo(
                self.server, self.port, socket.AF_INET, socket.SOCK_DGRAM
            )
        except socket.gaierror as exc:
            raise ClockSyncError(f"could not resolve {self.server}: {exc}") from exc
        if not infos:
            raise ClockSyncError(f"no address for {self.server}")
        address = infos[0][4]
        logger.debug("server found: %s port %s", address[0], address[1])

        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.settimeout(self.timeout)
                sock.sendto(build_ntp_request(), address)
                reply = sock.recv(NTP_PACKET_SIZE)
        except socket.timeout as exc:
            raise ClockSyncError("timed out waiting for NTP reply") from exc
        except OSError as exc:
            raise ClockSyncError(f"NTP exchange failed: {exc}") from exc

        if not reply:
            raise ClockSyncError("connection closed by server")
        try:
            server_time = parse_ntp_response(reply)
        except ValueError as exc:
            raise ClockSyncError(str(exc)) from exc

        offset = server_time - datetime.now(timezone.utc)
        with self._lock:
            self._offset = offset
            self._synchronized = True
        logger.info("synchronised, offset %d seconds", int(offset.total_seconds()))
        return offset

    def now(self) -> datetime:
        """Current time (aware, UTC) with the learnt offset applied."""
        return datetime.now(timezone.utc) + self.offset

    def formatted_now(self, now: datetime | None = None) -> str:
        """Format as ``DD/MM/YYYY | HH:MM:SS`` in local time.

        The colons blink: they become spaces on odd seconds. A naive ``now``
        is taken as local wall time.
        """
        moment = (now if now is not None else self.now()).replace(microsecond=0)
        local = moment.astimezone() if moment.tzinfo is not None else moment
        sep = ":" if int(local.timestamp()) % 2 == 0 else " "
        return (
            f"{local:%d/%m/%Y} | "
            f"{local:%H}{sep}{local:%M}{sep}{local:%S}"
        )