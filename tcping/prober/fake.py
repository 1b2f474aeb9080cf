# tcping/prober/fake.py
from collections import deque

from tcping.config import ProbeConfig
from tcping.prober.base import Prober, ProbeEvent


class FakeProber(Prober):
    """
    script: iterable of outcomes returned one per call, in order. An outcome is
    either a float (connected, rtt in ms) or a str (failed, error text).
    Once the script runs dry every attempt fails with "connection refused".
    """
    def __init__(self, script=None):
        self.script = deque(script or [])
        self.calls = []

    def probe_once(self, config: ProbeConfig, attempt: int) -> ProbeEvent:
        self.calls.append(attempt)
        outcome = self.script.popleft() if self.script else "connection refused"
        event: ProbeEvent = {
            "target": str(config.target_address[0]),
            "host": config.display_host,
            "port": config.display_port,
            "attempt": attempt,
            "status": "failed",
            "rtt_ms": None,
            "error": None,
            "timestamp": None,
        }
        if isinstance(outcome, str):
            event["error"] = outcome
        else:
            event["status"] = "connected"
            event["rtt_ms"] = float(outcome)
        return event
