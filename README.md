# aether-progress

Progress feedback for long-running operations. It provides a text progress
bar for work of known size, a status-line spinner for work of unknown
duration, and calculators for ETA and throughput. It uses only the standard
library.

## Installation

```
pip install .
```

## Modules

### `aether_progress.progress`

- `ProgressBar(total, description, stream=None, *, render_blank_state=None, clock=time.monotonic)`
  draws a single line on a text stream. The line shows the description, the
  percentage, a 40-character bar, the count `shown/total` and items per
  second. The stream is standard error unless another one is given. Without
  an explicit stream the empty bar is drawn as soon as the bar is created.
  Pass `render_blank_state` to choose this yourself.
  - `add(amount)` and `set(value)` move the bar. Redraws happen at most every
    half second. A `ValueError` is raised when the count goes past `total`.
  - `finish()` draws the completed bar.
  - `clear()` blanks the line.
  - `percentage()` returns the completion percentage. It is `0.0` when
    `total` is zero.
  - `elapsed_time()` returns a `timedelta` measured from creation.
  - The `total` and `description` properties are read-only.
- `Spinner(description, stream=None, *, clock=time.monotonic)` writes status
  lines to standard output, or to the given stream.
  - `start()` prints `"<description>..."`.
  - `update_message(message)` changes the description. While the spinner is
    running, it also redraws the line with the elapsed time.
  - `stop(success)` prints `"✓ <description> (completed in …)"` or
    `"✗ <description> (failed after …)"`.
  - `is_active()` tells whether the spinner is running.

### `aether_progress.eta`

- `ETACalculator(max_samples=10, max_time_window=timedelta(seconds=30), clock=time.monotonic)`
  keeps recent progress samples. It holds at most `max_samples` of them, and
  only those taken within `max_time_window` of the newest one.
  - `record_progress(items_processed)` adds a sample.
  - `calculate_eta(total_items, current_items)` returns the remaining time as
    a `timedelta`: `(total_items - current_items) * average time per item`.
    It returns `timedelta(0)` once `current_items >= total_items`. It returns
    `None` when there are fewer than two samples or no forward progress.
  - `throughput()` returns items per second, or `None`.
  - `reset()` drops all samples.
- `TimestampedProgress(timestamp, items)` is the frozen dataclass used for a
  sample.
- `format_eta(eta)` formats a `timedelta` as `"< 1s"`, `"45s"`, `"2m30s"` or
  `"2h15m"`.
- `format_duration(duration)` rounds to milliseconds below one second and to
  seconds otherwise. Examples are `"500ms"`, `"30s"` and `"5m0s"`.

### `aether_progress.throughput`

- `ThroughputCalculator(clock=time.monotonic)` tracks cumulative counts.
  - `update(items, bytes_)` records the totals and recomputes the
    instantaneous rates.
  - `average_items_per_second()` and `average_bytes_per_second()` return
    rates since creation or the last `reset()`.
  - `instant_items_per_second()` and `instant_bytes_per_second()` return the
    rates between the last two updates.
  - `elapsed_time()` returns the time since creation or the last reset.
  - `summary()` returns one line with the totals, the elapsed time and the
    average rates.
- `format_items_per_second`, `format_bytes_per_second` and `format_bytes`
  format rates and sizes with binary units (KB, MB, GB, TB). Examples are
  `"2.30 items/sec"`, `"5.20 MB/sec"` and `"1.00 KB"`.

Every class takes a `clock` callable that returns seconds. Tests can use it
to control time.

## Example

```python
from aether_progress.progress import ProgressBar
from aether_progress.eta import ETACalculator, format_eta

bar = ProgressBar(500, "Downloading FHIR files")
eta = ETACalculator()
for done in range(1, 501):
    bar.add(1)
    if done % 10 == 0:
        eta.record_progress(done)
        remaining = eta.calculate_eta(500, done)
bar.finish()
print(bar.percentage())  # 100.0
```

## What it does not do

This is a library only. It has no command-line program. The spinner does not
animate in a background thread. It prints a line when started, redrawn on
message updates, and a final line when stopped. The progress bar does not
detect terminal width or use colours.

## Running the tests

```
pip install .[test]
pytest
```