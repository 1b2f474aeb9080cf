# tcping/prober/base.py
from abc import ABC, abstractmethod
from typing import TypedDict, Optional

from tcping.config import ProbeConfig


class ProbeEvent(TypedDict, total=False):
    target: str
    host: str
    port: str
    attempt: int
    status: str                 # "connected" | "failed"
    rtt_ms: Optional[float]
    error: Optional[str]
    timestamp: str


class Prober(ABC):
    @abstractmethod
    def probe_once(self, config: ProbeConfig, attempt: int) -> ProbeEvent:
        """Make exactly one bounded connection attempt and return a ProbeEvent dict."""
        raise NotImplementedError
