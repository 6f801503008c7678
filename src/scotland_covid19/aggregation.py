"""
Aggregation helpers
"""

from __future__ import annotations

from functools import partial

import pandas as pd

from scotland_covid19.constants import GRAND_TOTAL
from scotland_covid19.sentinels import scale_count


def reconcile_grand_total(
    counts: pd.DataFrame,
    components: list[str] | None = None,
    name: str = GRAND_TOTAL,
) -> pd.Series[float]:  # type: ignore # pandas-stubs not up to date
    """
    Calculate the aggregate of each row from its components

    Missing values (NaN) contribute nothing to the sum.
    As a result, a row in which every component is missing
    has an aggregate of zero, not NaN.

    Parameters
    ----------
    counts
        Raw (i.e. unscaled) counts, one row per date

    components
        Columns to sum

        If not supplied, all columns of `counts` are summed.

    name
        Name of the output

    Returns
    -------
    :
        Sum of `components` for each row of `counts`

    Examples
    --------
    >>> counts = pd.DataFrame(
    ...     [[1.0, 2.0], [float("nan"), 3.0], [float("nan"), float("nan")]],
    ...     columns=["Borders", "Fife"],
    ... )
    >>> reconcile_grand_total(counts)
    0    3.0
    1    3.0
    2    0.0
    Name: Grand Total, dtype: float64
    """
    if components is None:
        components = list(counts.columns)

    res = counts[components].sum(axis="columns", min_count=0).astype(float)
    res.name = name

    return res


def scale_counts(counts: pd.DataFrame, scale: dict[str, float]) -> pd.DataFrame:
    """
    Scale counts by population scale factors

    Parameters
    ----------
    counts
        Raw counts, one column per health board (and/or the aggregate)

    scale
        Scale factor for each column of `counts`

    Returns
    -------
    :
        `counts` with each value scaled by
        [scale_count][scotland_covid19.sentinels.scale_count]
        using its column's scale factor

    Raises
    ------
    KeyError
        There is no scale factor for one of the columns of `counts`
    """
    res = counts.copy()
    for column in counts.columns:
        res[column] = (
            counts[column].map(partial(scale_count, scale=scale[column])).astype(float)
        )

    return res
