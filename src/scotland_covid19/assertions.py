"""
Useful assertions
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from scotland_covid19.constants import GRAND_TOTAL


def assert_scale_is_complete(
    scale: dict[str, float], health_boards: Sequence[str], rtol: float = 1e-10
) -> None:
    """
    Assert that there is a scale factor for every health board and the aggregate

    Parameters
    ----------
    scale
        Scale factors to check

    health_boards
        Canonical health boards

    rtol
        Relative tolerance used when comparing the aggregate's scale factor
        to the sum of the health boards' scale factors

    Raises
    ------
    AssertionError
        A scale factor is missing, not positive
        or the aggregate is not the sum of the health boards
    """
    missing = [b for b in [*health_boards, GRAND_TOTAL] if b not in scale]
    if missing:
        raise AssertionError(f"No scale factor for {missing}")

    not_positive = {k: v for k, v in scale.items() if not v > 0}
    if not_positive:
        raise AssertionError(f"{not_positive=}")

    board_sum = sum(scale[b] for b in health_boards)
    if not np.isclose(scale[GRAND_TOTAL], board_sum, rtol=rtol, atol=0.0):
        msg = (
            f"The {GRAND_TOTAL} scale factor ({scale[GRAND_TOTAL]}) "
            f"is not the sum of the health boards' scale factors ({board_sum})"
        )
        raise AssertionError(msg)


def assert_is_timeseries(
    indata: pd.DataFrame | pd.Series, columns: Sequence[str] | None = None
) -> None:
    """
    Assert that data has the shape of a timeseries

    Parameters
    ----------
    indata
        Data to check

    columns
        Expected columns (only checked if `indata` is a [pd.DataFrame][pandas.DataFrame])

    Raises
    ------
    AssertionError
        The index is not a sorted, unique [pd.DatetimeIndex][pandas.DatetimeIndex]
        or the columns are not `columns`
    """
    if not isinstance(indata.index, pd.DatetimeIndex):
        raise AssertionError(f"Index should be a DatetimeIndex, {type(indata.index)=}")

    if not indata.index.is_unique:
        duplicates = indata.index[indata.index.duplicated()].unique().tolist()
        raise AssertionError(f"Dates are not unique, {duplicates=}")

    if not indata.index.is_monotonic_increasing:
        raise AssertionError("Dates are not sorted")

    if columns is not None and isinstance(indata, pd.DataFrame):
        if list(indata.columns) != list(columns):
            raise AssertionError(
                f"Unexpected columns. {list(indata.columns)=} {list(columns)=}"
            )
