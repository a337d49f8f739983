from __future__ import annotations

from typing import Optional

# Probe table: (kind, target). Kind is "ping" or "dns".
DEFAULT_PROBES: list[tuple[str, str]] = [
    # Our own routers
    ("ping", "192.168.1.1"),
    ("ping", "192.168.1.2"),
    # Comcast DNS
    ("ping", "75.75.75.75"),
    ("ping", "75.75.76.76"),
    # Google DNS
    ("ping", "8.8.8.8"),
    ("ping", "8.8.4.4"),
    # Plunk
    ("ping", "209.123.234.146"),
    # DNS lookups against explicit servers
    ("dns", "75.75.75.75"),
    ("dns", "75.75.76.76"),
    ("dns", "8.8.8.8"),
    ("dns", "8.8.4.4"),
    ("dns", "192.168.1.1"),
]

# Cadence
CYCLE_INTERVAL_SECONDS = 1.0
PROBE_TIMEOUT_SECONDS = 5  # ping gives up after this many seconds

# DNS probes ask each server for this one name
DNS_QUERY_HOSTNAME = "plunk.org"

# Utilities and the exit code each uses for "no reply"
LINUX_PING_PATH = "/bin/ping"
LINUX_PING_FAILURE_EXIT_CODE = 1
DARWIN_PING_PATH = "/sbin/ping"
DARWIN_PING_FAILURE_EXIT_CODE = 2
HOST_PATH = "/usr/bin/host"
HOST_FAILURE_EXIT_CODE = 1

# Display
TERMINAL_WIDTH = 75  # assumed width, history is cut to fit
HISTORY_LIMIT: Optional[int] = 1000  # older entries are never visible

# History symbols
SYMBOL_SUCCESS = "*"
SYMBOL_FAIL = "X"
SYMBOL_UNKNOWN = "?"
SYMBOL_PENDING = "."

# Rich styles per symbol
STYLE_SUCCESS = "green"
STYLE_FAIL = "red"
STYLE_UNKNOWN = "red"
STYLE_PENDING = "dim"
