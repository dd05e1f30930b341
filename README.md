# raopkit

Small, dependency-free building blocks for the receiving side of an
AirPlay (RAOP) audio session.

- **`raopkit.rtp_sync`**
  - `RtpClockSync` keeps the last eight (RTP time, local time) pairs and
    maps the sender's 44.1 kHz RTP clock onto local microseconds.
  - `build_resend_request()` builds the 8-byte control packet that asks
    the sender to retransmit missing packets.
  - `parse_remote_address()` turns a 4- or 16-byte address into a socket
    family and host string.
- **`raopkit.settings`**
  - `RaopSettings` holds the listening ports, the display parameters
    advertised to clients (width, height, refresh rate, maximum frame
    rate, overscan) and the NTP timeout limit.
  - `LogLevel` is an `IntEnum` from `ERROR` to `VERBOSE`.
  - `format_address()` renders an address for log output.
- **`raopkit.garble`** – the byte-rotation helpers `rol8`, `rol8x`,
  `weird_ror8`, `weird_rol8`, `weird_rol32`, and `garble()`, the in-place
  buffer-scrambling step used by the FairPlay SAP hash.

## Installation

```
pip install raopkit
```

Python 3.10 or newer is required. There are no runtime dependencies.

## Usage

### Display settings and ports

```python
from raopkit.settings import RaopSettings

settings = RaopSettings()
settings.width                          # 1920

# Values are narrowed to the parameter's range.
# The return value says whether the stored value differs from the one given.
settings.set_plist("height", 1440)      # False
settings.set_plist("width", 70000)      # True, width is now 4464
settings.set_plist("overscanned", 5)    # True, overscanned is now 1

settings.set_udp_ports([7011, 6001, 6000])   # timing, control, data
settings.set_tcp_ports([7100, 7000])         # mirror data, RTSP
```

An unknown plist item, a port outside 0–65535, or the wrong number of
ports raises `ValueError`.

```python
from raopkit.settings import format_address

format_address(bytes([192, 168, 1, 2]))   # "192.168.1.2"
```

### Mapping RTP time to local time

```python
from raopkit.rtp_sync import RtpClockSync

sync = RtpClockSync()
# A sync packet said that RTP time 44100 happens at local time 5_000_000 µs.
correction = sync.sync_clock(44100, 5_000_000)
local_us = sync.convert_rtp_time(88200)
```

`sync_clock()` averages the offsets of all recorded samples whose local
time is non-zero and returns how far the offset moved; it raises
`ValueError` if no usable sample remains.

### Requesting retransmission

```python
from raopkit.rtp_sync import build_resend_request, parse_remote_address

build_resend_request(1, 100, 3).hex()     # "80d5000100640003"
parse_remote_address(bytes([10, 0, 0, 5]))  # (socket.AF_INET, "10.0.0.5")
```

IPv4-mapped IPv6 addresses are reported as IPv4.

### Byte rotations and garbling

```python
from raopkit.garble import rol8, weird_ror8

rol8(0x81, 1)        # 0x03
weird_ror8(0x5C, 0)  # 0 – a count of 0 yields 0
```

`garble(buffer0, buffer1, buffer2, buffer3, buffer4)` modifies mutable
byte sequences of at least 20, 210, 35, 132 and 21 items in place;
`buffer4` is only read. Shorter buffers raise `ValueError`.

## What this package does not do

raopkit offers helpers only. It does not open sockets, run an RTSP
server, decrypt or reorder audio packets, poll the sender for clock
offsets, or derive a complete FairPlay session key. The calling
application is responsible for the network, the audio pipeline and the
remaining key-derivation steps.

## Running the tests

```
pip install raopkit[test]
pytest
```