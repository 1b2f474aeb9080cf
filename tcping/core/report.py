# tcping/core/report.py
from tcping.config import ProbeConfig
from tcping.core.state import ResultCollection
from tcping.prober.base import ProbeEvent


def format_event(event: ProbeEvent) -> str:
    target = f"{event['host']}:{event['port']}"
    if event.get("status") == "connected":
        return f"Connected {target} - {event['rtt_ms']:.3f}ms"
    return f"Failed {target} - {event.get('error')}"


def format_summary(results: ResultCollection, config: ProbeConfig) -> str:
    """Blank line, header, then successes/attempts and min/max/avg/dev in ms."""
    return (
        f"\nTCPING to {config.label}\n"
        f"{results.successes} successes / {results.iterations} attempts, "
        f"min/max/avg/dev {results.min():.3f}/{results.max():.3f}/"
        f"{results.mean():.3f}/{results.std_dev():.3f}"
    )
