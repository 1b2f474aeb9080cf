# tcping/prober/tcp.py
import logging
import socket
import time
from datetime import datetime, timezone

from tcping.config import ProbeConfig
from tcping.prober.base import Prober, ProbeEvent

log = logging.getLogger(__name__)


def describe_error(exc: OSError) -> str:
    if isinstance(exc, (socket.timeout, TimeoutError)):
        return "connection timed out"
    if exc.strerror:
        if exc.errno is not None:
            return f"{exc.strerror} (os error {exc.errno})"
        return exc.strerror
    return str(exc) or exc.__class__.__name__


class TcpProber(Prober):
    """
    Times a plain TCP handshake to an already-resolved address.
    The socket is shut down in both directions right after connect; no data is sent.
    """

    def __init__(self, clock=time.perf_counter_ns):
        self.clock = clock

    def _connect(self, config: ProbeConfig) -> socket.socket:
        sock = socket.socket(config.family, socket.SOCK_STREAM)
        try:
            sock.settimeout(config.connect_timeout)
            sock.connect(config.target_address)
        except (OSError, OverflowError):
            sock.close()
            raise
        return sock

    def _close(self, sock: socket.socket) -> None:
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError as e:
            # peer may already have reset; the handshake still completed
            log.debug("shutdown after connect failed: %s", e)
        finally:
            sock.close()

    def probe_once(self, config: ProbeConfig, attempt: int) -> ProbeEvent:
        event: ProbeEvent = {
            "target": str(config.target_address[0]),
            "host": config.display_host,
            "port": config.display_port,
            "attempt": attempt,
            "status": "failed",
            "rtt_ms": None,
            "error": None,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        start = self.clock()
        try:
            sock = self._connect(config)
        except OSError as e:
            event["error"] = describe_error(e)
            return event
        elapsed_us = (self.clock() - start) // 1000
        self._close(sock)

        event["status"] = "connected"
        event["rtt_ms"] = elapsed_us / 1000.0
        return event
