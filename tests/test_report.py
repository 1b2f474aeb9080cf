# tests/test_report.py
import socket

from tcping.config import ProbeConfig
from tcping.core.report import format_event, format_summary
from tcping.core.state import ResultCollection


def test_format_connected_event():
    ev = {"host": "example.com", "port": "443", "status": "connected", "rtt_ms": 12.3456}
    assert format_event(ev) == "Connected example.com:443 - 12.346ms"


def test_format_failed_event():
    ev = {"host": "example.com", "port": "443", "status": "failed", "error": "connection timed out"}
    assert format_event(ev) == "Failed example.com:443 - connection timed out"


def test_format_summary_fixed_order():
    cfg = ProbeConfig(("93.184.216.34", 443), "example.com", "443", 3, family=socket.AF_INET)
    r = ResultCollection()
    for v in (10.0, 20.0, 30.0):
        r.record(True, v)
    assert format_summary(r, cfg) == (
        "\nTCPING to example.com:443\n"
        "3 successes / 3 attempts, min/max/avg/dev 10.000/30.000/20.000/8.165"
    )
