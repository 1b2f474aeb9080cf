# tcping/config.py
import socket
import threading
from dataclasses import dataclass

from tcping.errors import ConfigError

DEFAULT_CONNECT_TIMEOUT_S = 5
DEFAULT_WAIT_S = 1
MIN_DURATION_S = 1
# largest timeout both socket.settimeout and Event.wait accept
MAX_DURATION_S = int(min(threading.TIMEOUT_MAX, 2**31 - 1))


def clamp_duration(seconds: int) -> int:
    # sub-second timeouts/waits are raised to one second, not rejected
    return max(MIN_DURATION_S, seconds)


@dataclass(frozen=True)
class ProbeConfig:
    target_address: tuple
    display_host: str
    display_port: str
    attempt_count: int
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_S
    inter_attempt_wait: float = DEFAULT_WAIT_S
    family: int = socket.AF_INET

    def __post_init__(self):
        if self.attempt_count < 1:
            raise ConfigError("Need at least 1 Interval")
        if not 0 < self.connect_timeout <= MAX_DURATION_S:
            raise ConfigError("Invalid Timeout")
        if not 0 < self.inter_attempt_wait <= MAX_DURATION_S:
            raise ConfigError("Invalid Wait")

    @property
    def label(self) -> str:
        return f"{self.display_host}:{self.display_port}"
