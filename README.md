# tearsheet

Incremental performance statistics for a trading session. You feed in
positions one at a time. The package gives back returns, dispersion,
drawdowns and risk-adjusted ratios, and can draw them as a text table.

## Install

```
pip install tearsheet
```

The only runtime dependency is `tabulate`, which draws the tables.

## Modules

- `tearsheet.welford`: single-pass helpers. They are `calculate_mean`,
  `calculate_recurrence_relation_m`, `calculate_sample_variance` and
  `calculate_population_variance`. `calculate_mean` stays an integer when
  every argument is an integer, and then truncates toward zero.
- `tearsheet.dispersion`: `Range` tracks the high and the low, and
  `calculate()` gives high minus low. `Dispersion` tracks the range, the
  recurrence relation M, the population variance and the standard deviation.
- `tearsheet.equity`: `EquityPoint`, the total equity at a point in time.
  It can be built with `EquityPoint.from_balance(balance)`.
- `tearsheet.drawdown`: `Drawdown`, `MaxDrawdown` and `AvgDrawdown`.
- `tearsheet.data_summary`: `DataSummary` holds the count, sum, mean and
  dispersion of a stream of values.
- `tearsheet.pnl`: `PnLReturnSummary`, `ProfitLossSummary` and the `Side`
  enum (`BUY`, `SELL`).
- `tearsheet.drawdown_summary`: `DrawdownSummary`. Only positions that have
  exited change it.
- `tearsheet.ratio`: `SharpeRatio`, `SortinoRatio`, `CalmarRatio`, and the
  scaling functions `calculate_daily` and `calculate_annual`.
- `tearsheet.trading`: `TradingConfig`, `TearSheet`, `TradingSummary` and
  `calculate_trading_duration`.
- `tearsheet.table`: `Table`, `TableBuilder`, `combine` and
  `format_decimal`.
- `tearsheet.summariser`: `PositionSummariser`, the base class with
  `update(position)` and `generate_summary(positions)`.
- `tearsheet.durations`: `duration_to_secs` and `duration_from_secs`, which
  convert between a `timedelta` and whole seconds.
- `tearsheet.strategy`: `Decision`, `SignalStrength` and
  `SignalForceExit`.
- `tearsheet.errors`: `StatisticError` and its subclasses.

## Running statistics

```python
from tearsheet.data_summary import DataSummary

summary = DataSummary()
for value in (1.1, 1.2, 1.3):
    summary.update(value)

summary.count                         # 3
summary.mean                          # about 1.2
summary.dispersion.variance           # population variance, about 1/150
summary.dispersion.range.calculate()  # highest minus lowest
```

## Ratios

```python
from tearsheet.ratio import calculate_daily, calculate_annual

calculate_daily(1.0, 0.1)        # 0.31622776601683794
calculate_annual(1.0, 1.0, 365)  # 19.1049731745428
```

`calculate_annual` raises `ValueError` when `trading_days` is negative.

`SharpeRatio` and `SortinoRatio` are updated with `update(pnl_returns)`.
`CalmarRatio` takes `update(pnl_returns, max_drawdown)`. Each ratio has these
methods:

- `ratio()` gives the ratio per trade.
- `daily()` scales it to one day.
- `annual(trading_days)` scales it to a year.

A ratio is 0.0 when its denominator is zero. That denominator is the standard
deviation for Sharpe, the standard deviation of the losses for Sortino, and
the maximum drawdown for Calmar.

## Positions

No position type comes with the package. The summaries read these attributes
from any object you pass to `update`:

- `meta.exit_balance` is `None` while the position is open. Once it has
  exited, it is an object with `time` and `total`.
- `meta.update_time` and `meta.enter_time` are datetimes.
- `realised_profit_loss` and `unrealised_profit_loss`.
- `calculate_profit_loss_return()`, used by `PnLReturnSummary`.
- `side` and `quantity`, used by `ProfitLossSummary`. `side` is a `Side`,
  `"buy"` or `"sell"`.

When a denominator is zero, `PnLReturnSummary.trades_per_day` and the
per-contract figures of `ProfitLossSummary` become `inf` or `NaN`.

## A full tear sheet

```python
from tearsheet.trading import TradingConfig, TradingSummary

config = TradingConfig(
    starting_equity=1000.0,
    trading_days_per_year=252,
    risk_free_return=0.0,
)
summary = TradingSummary.from_config(config)
summary.generate_summary(positions)   # or summary.update(position) each time
print(summary.table("Session").render())
```

`from_config` uses `starting_equity` and `risk_free_return`.
`trading_days_per_year` is stored in the config, but the summary does not
read it.

`TableBuilder.table(id_cell)` returns a `Table` with one row.
`table_with(id_cell, another, another_id)` adds a second builder's row.
`combine([(id, builder), ...])` makes one table with a row for each builder,
titled by the first builder. `Table.render()` draws a grid and leaves every
cell as text.

## Signals

`Decision` has the members `LONG`, `CLOSE_LONG`, `SHORT` and `CLOSE_SHORT`.
It provides `is_long()`, `is_short()`, `is_entry()` and `is_exit()`.
`SignalStrength(value)` is an ordered, immutable strength.
`SignalForceExit.from_market(market)` copies `exchange` and `instrument` from
the market and stamps the current UTC time.

## Errors

Every error class derives from `tearsheet.errors.StatisticError`. The
subclasses are:

- `BuilderIncompleteError(missing)`
- `BuilderNoMetricsProvidedError()`

The statistics modules do not raise these classes themselves. They are there
for code that builds on the package.

## What it does not do

- It has no portfolio, position, order or market-data model. You supply
  positions that have the attributes listed above.
- It does not generate strategy signals. `tearsheet.strategy` holds only the
  decision and signal types.
- It has no command-line program and stores nothing. Results live in memory
  until you read them or render a table.