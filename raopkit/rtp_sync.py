"""Clock mapping between RTP sample time and local time, and small RTP wire helpers."""

from __future__ import annotations

import ipaddress
import logging
import socket
from dataclasses import dataclass

__all__ = [
    "RtpClockSync",
    "build_resend_request",
    "parse_remote_address",
    "SAMPLE_RATE",
    "SYNC_DATA_COUNT",
    "RESEND_REQUEST_TYPE",
]

logger = logging.getLogger(__name__)

# Samples per microsecond at 44.1 kHz.
SAMPLE_RATE = 44100.0 / 1000000.0
SYNC_DATA_COUNT = 8
RESEND_REQUEST_TYPE = 0x55

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _to_int64(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value >= (1 << 63) else value


def _div_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass
class _SyncSample:
    ntp_time: int = 0
    rtp_time: int = 0


class RtpClockSync:
    """Keeps the last eight (RTP time, local time) pairs and their average offset."""

    def __init__(self, scale: float = SAMPLE_RATE) -> None:
        self.rtp_sync_scale = scale
        self.rtp_sync_offset = 0
        self._samples = [_SyncSample() for _ in range(SYNC_DATA_COUNT)]
        self._index = 0

    def _rtp_to_micro(self, rtp_time: int) -> int:
        return int(float(rtp_time & _MASK32) / self.rtp_sync_scale)

    def sync_clock(self, rtp_time: int, ntp_time: int) -> int:
        """Record that ``rtp_time`` corresponds to local ``ntp_time``; return the offset correction.

        Samples whose local time is zero are ignored; raise ValueError when
        no usable sample remains.
        """
        self._index = (self._index + 1) % SYNC_DATA_COUNT
        sample = self._samples[self._index]
        sample.rtp_time = rtp_time & _MASK32
        sample.ntp_time = ntp_time & _MASK64

        offsets = [
            _to_int64(self._rtp_to_micro(s.rtp_time) - s.ntp_time)
            for s in self._samples
            if s.ntp_time != 0
        ]
        if not offsets:
            raise ValueError("no valid clock sync data")
        avg_offset = _div_trunc(_to_int64(sum(offsets)), len(offsets))
        correction = _to_int64(avg_offset - self.rtp_sync_offset)
        self.rtp_sync_offset = avg_offset
        logger.debug("raop_rtp sync correction=%d", correction)
        return correction

    def convert_rtp_time(self, rtp_time: int) -> int:
        """Local time in microseconds for an RTP timestamp, as an unsigned 64-bit value."""
        return (self._rtp_to_micro(rtp_time) - self.rtp_sync_offset) & _MASK64


def build_resend_request(control_seqnum: int, seqnum: int, count: int) -> bytes:
    """Build the 8-byte control packet asking for ``count`` packets from ``seqnum``."""
    return bytes((
        0x80,
        RESEND_REQUEST_TYPE | 0x80,
        (control_seqnum >> 8) & 0xFF,
        control_seqnum & 0xFF,
        (seqnum >> 8) & 0xFF,
        seqnum & 0xFF,
        (count >> 8) & 0xFF,
        count & 0xFF,
    ))


def parse_remote_address(remote: bytes) -> tuple[int, str]:
    """Return the socket family and host string for a 4- or 16-byte address."""
    remote = bytes(remote)
    if len(remote) == 4:
        host = str(ipaddress.IPv4Address(remote))
        logger.debug("raop_rtp parse remote ip = %s", host)
        return socket.AF_INET, host
    if len(remote) == 16:
        ip = ipaddress.IPv6Address(remote)
        if ip.ipv4_mapped is not None:
            host = str(ip.ipv4_mapped)
            logger.debug("raop_rtp parse remote ip = %s", host)
            return socket.AF_INET, host
        host = str(ip)
        logger.debug("raop_rtp parse remote ip = %s", host)
        return socket.AF_INET6, host
    raise ValueError(f"remote address must be 4 or 16 bytes, got {len(remote)}")