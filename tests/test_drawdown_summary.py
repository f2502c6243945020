import copy
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from tearsheet.drawdown_summary import DrawdownSummary

BASE = datetime(2022, 1, 1, tzinfo=timezone.utc)


@dataclass
class _Balance:
    time: datetime
    total: float
    available: float = 0.0


def _closed(days, total):
    return SimpleNamespace(
        meta=SimpleNamespace(exit_balance=_Balance(BASE + timedelta(days=days), total))
    )


def _open(days):
    return SimpleNamespace(
        meta=SimpleNamespace(exit_balance=None, update_time=BASE + timedelta(days=days))
    )


def _cycle():
    return [_closed(1, 90.0), _closed(2, 80.0), _closed(3, 110.0)]


def test_from_starting_equity_sets_peak():
    summary = DrawdownSummary.from_starting_equity(100.0)
    assert summary.current_drawdown.equity_range.high == 100.0
    assert summary.current_drawdown.equity_range.low == 100.0
    assert summary.avg_drawdown.count == 0


def test_open_position_is_ignored():
    summary = DrawdownSummary.from_starting_equity(100.0)
    before = copy.deepcopy(summary)
    summary.update(_open(1))
    assert summary == before


def test_finished_drawdown_updates_avg_and_max():
    summary = DrawdownSummary.from_starting_equity(100.0)
    for position in _cycle():
        summary.update(position)
    assert summary.avg_drawdown.count == 1
    assert summary.max_drawdown.drawdown.drawdown == pytest.approx(-0.2)
    assert summary.max_drawdown.drawdown.duration == timedelta(days=1)
    assert summary.avg_drawdown.mean_drawdown == summary.max_drawdown.drawdown.drawdown
    assert summary.current_drawdown.is_waiting_for_peak()
    assert summary.current_drawdown.equity_range.high == 110.0


def test_drawdown_in_progress_not_yet_counted():
    summary = DrawdownSummary.from_starting_equity(100.0)
    summary.update(_closed(1, 90.0))
    assert summary.avg_drawdown.count == 0
    assert summary.max_drawdown.drawdown.drawdown == 0.0
    assert not summary.current_drawdown.is_waiting_for_peak()


def test_generate_summary_matches_successive_updates():
    one = DrawdownSummary.from_starting_equity(100.0)
    two = copy.deepcopy(one)
    positions = _cycle()
    for position in positions:
        one.update(position)
    two.generate_summary(positions)
    assert one == two


def test_titles():
    summary = DrawdownSummary.from_starting_equity(100.0)
    assert summary.titles() == [
        "Max Drawdown",
        "Max Drawdown Days",
        "Avg. Drawdown",
        "Avg. Drawdown Days",
    ]


def test_row_after_single_drawdown():
    summary = DrawdownSummary.from_starting_equity(100.0)
    for position in _cycle():
        summary.update(position)
    row = summary.row()
    assert row[0] == "-0.200"
    assert row[0] == row[2]
    assert row[1] == row[3]
    assert len(row) == len(summary.titles())