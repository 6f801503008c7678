"""
Tests of `scotland_covid19.assertions`
"""

from __future__ import annotations

import re

import pandas as pd
import pytest

from scotland_covid19.assertions import assert_is_timeseries, assert_scale_is_complete
from scotland_covid19.constants import GRAND_TOTAL

HEALTH_BOARDS = ("Borders", "Fife")


def test_assert_scale_is_complete_passes():
    assert_scale_is_complete(
        {"Borders": 1.15, "Fife": 3.71, GRAND_TOTAL: 4.86}, HEALTH_BOARDS
    )


@pytest.mark.parametrize(
    "scale, exp_msg",
    (
        pytest.param(
            {"Borders": 1.0, GRAND_TOTAL: 1.0},
            "No scale factor for ['Fife']",
            id="missing-board",
        ),
        pytest.param(
            {"Borders": 1.0, "Fife": 2.0},
            "No scale factor for ['Grand Total']",
            id="missing-aggregate",
        ),
        pytest.param(
            {"Borders": 0.0, "Fife": 2.0, GRAND_TOTAL: 2.0},
            "not_positive={'Borders': 0.0}",
            id="not-positive",
        ),
        pytest.param(
            {"Borders": 1.0, "Fife": 2.0, GRAND_TOTAL: 9.99},
            "The Grand Total scale factor (9.99) is not the sum",
            id="aggregate-not-sum",
        ),
    ),
)
def test_assert_scale_is_complete_fails(scale, exp_msg):
    with pytest.raises(AssertionError, match=re.escape(exp_msg)):
        assert_scale_is_complete(scale, HEALTH_BOARDS)


def test_assert_is_timeseries_passes():
    assert_is_timeseries(
        pd.DataFrame(
            [[1.0, 2.0, 3.0]],
            columns=[*HEALTH_BOARDS, GRAND_TOTAL],
            index=pd.DatetimeIndex(["2020-03-01"], name="date"),
        ),
        columns=[*HEALTH_BOARDS, GRAND_TOTAL],
    )


@pytest.mark.parametrize(
    "index, columns, exp_msg",
    (
        pytest.param(
            pd.Index(["2020-03-01", "2020-03-02"]),
            None,
            "Index should be a DatetimeIndex",
            id="not-datetime",
        ),
        pytest.param(
            pd.DatetimeIndex(["2020-03-01", "2020-03-01"]),
            None,
            "Dates are not unique",
            id="duplicates",
        ),
        pytest.param(
            pd.DatetimeIndex(["2020-03-02", "2020-03-01"]),
            None,
            "Dates are not sorted",
            id="unsorted",
        ),
        pytest.param(
            pd.DatetimeIndex(["2020-03-01", "2020-03-02"]),
            ["Fife", "Borders", GRAND_TOTAL],
            "Unexpected columns",
            id="column-order",
        ),
    ),
)
def test_assert_is_timeseries_fails(index, columns, exp_msg):
    indata = pd.DataFrame(
        [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
        columns=[*HEALTH_BOARDS, GRAND_TOTAL],
        index=index,
    )

    with pytest.raises(AssertionError, match=re.escape(exp_msg)):
        assert_is_timeseries(indata, columns=columns)
