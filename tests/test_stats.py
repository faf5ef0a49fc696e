"""Cross-run statistics and text report regression tests."""

import math

import pytest

from monty_sim.models import RunStatistics, TrialOutcome
from monty_sim.report import format_report
from monty_sim.stats import mean, sample_stddev, summarize


def test_mean_and_sample_stddev():
    samples = [60.0, 65.0, 70.0, 75.0]
    assert mean(samples) == pytest.approx(67.5)
    # n - 1 denominator: sum of squares 125 over 3
    assert sample_stddev(samples) == pytest.approx(math.sqrt(125.0 / 3.0))


def test_stddev_needs_two_samples():
    assert sample_stddev([]) is None
    assert sample_stddev([66.0]) is None
    assert mean([]) == 0.0


def test_summarize_flags_small_samples():
    assert summarize([50.0]).enough_samples is False
    summary = summarize([50.0, 70.0])
    assert summary.enough_samples is True
    assert summary.samples == 2
    assert summary.mean == pytest.approx(60.0)


def test_run_statistics_tally_and_percentages():
    stats = RunStatistics()
    for outcome in (
        TrialOutcome.SWITCH_WIN,
        TrialOutcome.SWITCH_WIN,
        TrialOutcome.SWITCH_LOSE,
        TrialOutcome.STAY_LOSE,
    ):
        stats.record(outcome)

    assert (stats.switch_wins, stats.switch_losses) == (2, 1)
    assert (stats.stay_wins, stats.stay_losses) == (0, 1)
    assert stats.switch_win_pct == pytest.approx(200.0 / 3.0)
    assert stats.stay_win_pct == 0.0


def test_empty_run_has_zero_percentages():
    stats = RunStatistics()
    assert stats.switch_win_pct == 0.0
    assert stats.stay_win_pct == 0.0


def _result(runs, summary=None):
    return {
        "config": {"num_doors": 3, "runs": len(runs), "trials_per_run": 10, "rng": "mcg128"},
        "runs": runs,
        "summary": summary or {},
    }


def test_single_run_report_lists_counts():
    run = RunStatistics(switch_wins=4, switch_losses=2, stay_wins=1, stay_losses=3).to_dict()
    text = format_report(_result([run]))

    assert "Number of wins  : 4" in text
    assert "Number of losses: 3" in text
    assert "Win percentage  : 66.6667%" in text
    assert "Win percentage  : 25.0000%" in text


def test_multi_run_report_prints_mean_and_sigma():
    runs = [RunStatistics().to_dict(), RunStatistics().to_dict()]
    summary = {
        "switch": {"samples": 2, "mean": 66.5, "stddev": 0.25},
        "stay": {"samples": 1, "mean": 33.0, "stddev": None},
    }
    text = format_report(_result(runs, summary))

    assert "Mean of win percentage for switching : 66.5000" in text
    assert "Sigma of win percentage for switching: 0.2500" in text
    assert "for stay win percentage. Try increasing runs." in text
