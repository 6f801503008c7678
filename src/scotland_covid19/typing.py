"""
Type hints that are used throughout
"""

from __future__ import annotations

import pandas as pd
from typing_extensions import TypeAlias

TimeseriesDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for the [pandas.DataFrame][pd.DataFrame] shape we use throughout

For typing purposes, this is just a direct alias of [pandas.DataFrame][pd.DataFrame].
However, the point of defining this
is to provide greater clarity of the kind of data we expect.

Each row is the record for one date.
The index is a [pandas.DatetimeIndex][pd.DatetimeIndex] of dates
(sorted, unique, named `"date"`).
The columns are the health boards (sorted) followed by `"Grand Total"`.
Missing data is NaN, which is not the same as zero.

```python
            Borders  Fife  Grand Total
date
2020-03-01      1.0   NaN          0.4
2020-03-02      2.5   3.0          1.7
```
"""

DateIndexedSeries: TypeAlias = pd.Series
"""
Type alias for a single timeseries with the same index as a [TimeseriesDataFrame][(m).]

Used for data with no health board breakdown
(e.g. the cumulative number of deceased).
"""
