# tests/test_state.py
import math

import pytest

from tcping.core.state import ResultCollection


def test_empty_collection_reports_zero_sentinels():
    """With no successes every statistic is the 0.0 sentinel, not inf or NaN."""
    r = ResultCollection()
    assert r.iterations == 0
    assert r.mean() == r.min() == r.max() == r.std_dev() == 0.0


def test_failures_only_bump_iterations():
    r = ResultCollection()
    for _ in range(4):
        r.record(False, 123.0)
    assert r.iterations == 4
    assert r.successes == 0
    assert r.failures == 4
    assert r.total == 0.0
    assert r.total_squared == 0.0
    assert r.min_observed == math.inf
    assert r.max_observed == -math.inf
    assert r.mean() == r.min() == r.max() == r.std_dev() == 0.0


def test_single_success():
    r = ResultCollection()
    r.record(True, 12.5)
    assert r.mean() == 12.5
    assert r.min() == r.max() == 12.5
    assert r.std_dev() == 0.0


def test_three_samples():
    """10/20/30 ms -> mean 20, population std dev sqrt(200/3)."""
    r = ResultCollection()
    for v in (10.0, 20.0, 30.0):
        r.record(True, v)
    assert r.mean() == 20.0
    assert r.min() == 10.0
    assert r.max() == 30.0
    assert r.std_dev() == pytest.approx(math.sqrt(200.0 / 3.0))
    assert r.std_dev() == pytest.approx(8.165, abs=1e-3)


def test_mixed_outcomes_keep_invariants():
    r = ResultCollection()
    outcomes = [(True, 5.0), (False, 0.0), (True, 1.0), (False, 999.0), (True, 3.0)]
    for i, (ok, ms) in enumerate(outcomes, start=1):
        r.record(ok, ms)
        assert r.iterations == i
        assert r.successes <= r.iterations
    assert r.successes == 3
    assert r.failures == 2
    assert r.min() == 1.0
    assert r.max() == 5.0
    assert r.mean() == pytest.approx(3.0)
    assert r.min() <= r.max()


def test_identical_samples_never_go_negative():
    """Float cancellation on equal samples must not produce sqrt of a negative."""
    r = ResultCollection()
    for _ in range(1000):
        r.record(True, 0.1)
    assert r.std_dev() == pytest.approx(0.0, abs=1e-6)


def test_as_dict_summary():
    r = ResultCollection()
    r.record(True, 2.0)
    r.record(False, 0.0)
    d = r.as_dict()
    assert d["iterations"] == 2
    assert d["successes"] == 1
    assert d["failures"] == 1
    assert d["avg_ms"] == 2.0
