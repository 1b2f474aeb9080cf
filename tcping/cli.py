# tcping/cli.py
# Usage:
#   tcping -h <host> -p <port> -i <count> [-t <timeout_s>] [-w <wait_s>]
#   python3 -m tcping -h example.com -p 443 -i 5
#
# Set TCPING_LOG_LEVEL=DEBUG for diagnostics on stderr.

import argparse
import logging
import os
import sys

from tcping.config import (
    DEFAULT_CONNECT_TIMEOUT_S,
    DEFAULT_WAIT_S,
    MAX_DURATION_S,
    ProbeConfig,
    clamp_duration,
)
from tcping.core.controller import ProbeRunner
from tcping.core.report import format_summary
from tcping.errors import ConfigError
from tcping.prober.tcp import TcpProber
from tcping.resolve import resolve_address

log = logging.getLogger(__name__)

USAGE = (
    "tcping -h -p -i -t -w\n\n"
    "\t-h\t(required) Host name, ipv4, or ipv6 address\n"
    "\t-p\t(required) Port (1-65535)\n"
    "\t-i\t(required) Intervals.  Number of tests to run before exit\n"
    f"\t-t\tConnection Timeout. Wait before failing connection attempt (Default: {DEFAULT_CONNECT_TIMEOUT_S})\n"
    f"\t-w\tWait Interval. Wait between intervals in seconds (Default: {DEFAULT_WAIT_S})\n"
)


class _ArgumentParser(argparse.ArgumentParser):
    """Raises ConfigError on parse errors."""

    def error(self, message):
        raise ConfigError(message)


def _port(value: str) -> str:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Invalid Port")
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError("Port must be 1-65535")
    return value


def _intervals(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Invalid Interval")
    if count < 1:
        raise argparse.ArgumentTypeError("Need at least 1 Interval")
    return count


def _seconds(name: str):
    def parse(value: str) -> int:
        try:
            seconds = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid {name}")
        if not 0 <= seconds <= MAX_DURATION_S:
            raise argparse.ArgumentTypeError(f"Invalid {name}")
        return clamp_duration(seconds)
    return parse


def build_argparser():
    # -h is the host, so argparse's own help flag is disabled
    ap = _ArgumentParser(prog="tcping", add_help=False, allow_abbrev=False)
    ap.add_argument("-h", dest="host", required=True, help="Host name, ipv4, or ipv6 address")
    ap.add_argument("-p", dest="port", required=True, type=_port, help="Port (1-65535)")
    ap.add_argument("-i", dest="intervals", required=True, type=_intervals,
                    help="Number of tests to run before exit")
    ap.add_argument("-t", dest="timeout", type=_seconds("Timeout"), default=DEFAULT_CONNECT_TIMEOUT_S,
                    help="Connection timeout in seconds")
    ap.add_argument("-w", dest="wait", type=_seconds("Wait"), default=DEFAULT_WAIT_S,
                    help="Wait between intervals in seconds")
    return ap


def parse_config(argv) -> ProbeConfig:
    """Parse argv and resolve the target. Raises ConfigError on any problem."""
    args = build_argparser().parse_args(argv)
    family, sockaddr = resolve_address(args.host, args.port)
    return ProbeConfig(
        target_address=sockaddr,
        display_host=args.host,
        display_port=args.port,
        attempt_count=args.intervals,
        connect_timeout=args.timeout,
        inter_attempt_wait=args.wait,
        family=family,
    )


def _configure_logging():
    level = getattr(logging, os.getenv("TCPING_LOG_LEVEL", "WARNING").upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None, prober=None) -> int:
    _configure_logging()
    if argv is None:
        argv = sys.argv[1:]

    try:
        cfg = parse_config(argv)
    except ConfigError as e:
        print(f"\nERROR: {e}\n\nUsage: {USAGE}")
        return 1

    runner = ProbeRunner(prober or TcpProber(), cfg)
    try:
        results = runner.run()
    except KeyboardInterrupt:
        runner.cancel()
        log.info("interrupted, reporting %d completed attempts", runner.state.iterations)
        results = runner.state

    print(format_summary(results, cfg))
    return 0


def main_entry():
    sys.exit(main())
