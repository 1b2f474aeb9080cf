# tcping/core/controller.py

import logging
import threading

from tcping.config import ProbeConfig
from tcping.core.report import format_event
from tcping.core.state import ResultCollection

log = logging.getLogger(__name__)


class ProbeRunner:
    def __init__(self, prober, config: ProbeConfig, emit=print, sleep=None):
        self.prober = prober
        self.cfg = config
        self.emit = emit
        self._cancelled = threading.Event()
        # default wait returns early when cancel() is called
        self.sleep = sleep or self._cancelled.wait
        self.state = ResultCollection()

    def cancel(self) -> None:
        log.debug("cancel requested after %d attempts", self.state.iterations)
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def run(self) -> ResultCollection:
        self._cancelled.clear()
        results = self.state = ResultCollection()

        for attempt in range(1, self.cfg.attempt_count + 1):
            if self.cancelled:
                break

            log.debug("attempt %d/%d to %s", attempt, self.cfg.attempt_count, self.cfg.target_address)
            ev = self.prober.probe_once(self.cfg, attempt)

            if ev.get("status") == "connected":
                results.record(True, ev["rtt_ms"])
            else:
                # failed attempts count, but never touch the timing totals
                results.record(False, 0.0)
            self.emit(format_event(ev))

            # no trailing wait after the final attempt
            if results.iterations == self.cfg.attempt_count:
                break
            self.sleep(self.cfg.inter_attempt_wait)

        return results
