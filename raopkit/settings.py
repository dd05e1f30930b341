"""Server settings: listening ports, the display parameters advertised to clients, and log levels."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

__all__ = ["LogLevel", "RaopSettings", "format_address"]

_MAX_PORT = 0xFFFF


class LogLevel(enum.IntEnum):
    """Verbosity levels, from least to most verbose."""

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3
    VERBOSE = 4


def _check_port(port: int) -> int:
    port = int(port)
    if not 0 <= port <= _MAX_PORT:
        raise ValueError(f"port must be between 0 and {_MAX_PORT}, got {port}")
    return port


def _check_ports(ports: Sequence[int], count: int) -> list[int]:
    ports = list(ports)
    if len(ports) != count:
        raise ValueError(f"expected {count} ports, got {len(ports)}")
    return [_check_port(p) for p in ports]


# plist item name -> (attribute, conversion applied before storing)
_PLIST_ITEMS = {
    "width": ("width", lambda v: v & 0xFFFF),
    "height": ("height", lambda v: v & 0xFFFF),
    "refreshRate": ("refresh_rate", lambda v: v & 0xFF),
    "maxFPS": ("max_fps", lambda v: v & 0xFF),
    "overscanned": ("overscanned", lambda v: 1 if v else 0),
    "clientFPSdata": ("client_fps_data", lambda v: 1 if v else 0),
    "max_ntp_timeouts": ("max_ntp_timeouts", lambda v: v if v > 0 else 0),
}


@dataclass
class RaopSettings:
    """Ports and display parameters of one server instance."""

    port: int = 0
    timing_lport: int = 0
    control_lport: int = 0
    data_lport: int = 0
    mirror_data_lport: int = 0
    width: int = 1920
    height: int = 1080
    refresh_rate: int = 60
    max_fps: int = 30
    overscanned: int = 0
    client_fps_data: int = 0
    max_ntp_timeouts: int = 0
    log_level: LogLevel = LogLevel.INFO

    def set_plist(self, item: str, value: int) -> bool:
        """Set a display parameter by its plist name.

        The value is narrowed to the parameter's range as it is stored.
        Return True when the stored value differs from the one given.
        Raise ValueError for an unknown item.
        """
        try:
            attribute, convert = _PLIST_ITEMS[item]
        except KeyError:
            raise ValueError(f"unknown plist item {item!r}") from None
        value = int(value)
        stored = convert(value)
        setattr(self, attribute, stored)
        return stored != value

    def set_udp_ports(self, ports: Sequence[int]) -> None:
        """Set the timing, control and data UDP ports, in that order."""
        self.timing_lport, self.control_lport, self.data_lport = _check_ports(ports, 3)

    def set_tcp_ports(self, ports: Sequence[int]) -> None:
        """Set the mirror data port and the main RTSP port, in that order."""
        self.mirror_data_lport, self.port = _check_ports(ports, 2)


def format_address(address: bytes) -> str:
    """Render a 4-byte IPv4 or 16-byte IPv6 address in its log form."""
    address = bytes(address)
    if len(address) == 4:
        return ".".join(str(b) for b in address)
    if len(address) == 16:
        return ":".join(address[i:i + 2].hex() for i in range(0, 16, 2))
    raise ValueError(f"address must be 4 or 16 bytes, got {len(address)}")