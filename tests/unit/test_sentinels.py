"""
Tests of `scotland_covid19.sentinels`
"""

from __future__ import annotations

import datetime as dt
import re

import pytest

from scotland_covid19.exceptions import MalformedRecordError
from scotland_covid19.sentinels import (
    normalise_sentinel,
    parse_count,
    parse_date,
    scale_count,
)


@pytest.mark.parametrize(
    "value",
    (
        pytest.param("X", id="legacy-sentinel"),
        pytest.param("*", id="star"),
        pytest.param("NA", id="na"),
        pytest.param("", id="empty"),
        pytest.param("   ", id="blank"),
        pytest.param(" X ", id="padded-sentinel"),
        pytest.param(None, id="none"),
    ),
)
def test_normalise_sentinel_no_data(value):
    assert normalise_sentinel(value) is None


@pytest.mark.parametrize(
    "value, exp",
    (
        ("12", "12"),
        (" 12 ", "12"),
        ("0", "0"),
        # Sentinels are case-sensitive
        ("x", "x"),
        ("na", "na"),
        ("2020-03-01", "2020-03-01"),
    ),
)
def test_normalise_sentinel_data(value, exp):
    assert normalise_sentinel(value) == exp


def test_normalise_sentinel_header_is_no_data():
    assert normalise_sentinel("Fife", header="Fife") is None
    assert normalise_sentinel("Date", header="Date") is None
    assert normalise_sentinel("Fife", header="Borders") == "Fife"


def test_normalise_sentinel_custom_sentinels():
    assert normalise_sentinel("-", sentinels={"-"}) is None
    assert normalise_sentinel("X", sentinels={"-"}) == "X"


@pytest.mark.parametrize(
    "value, exp",
    (
        (None, None),
        ("0", 0),
        ("12", 12),
        ("-3", -3),
        ("1,234", 1234),
    ),
)
def test_parse_count(value, exp):
    assert parse_count(value) == exp


@pytest.mark.parametrize("value", ("abc", "1.5", "x", "12a"))
def test_parse_count_malformed(value):
    with pytest.raises(
        MalformedRecordError, match=re.escape(f"{value!r} is not an integer")
    ):
        parse_count(value)


def test_parse_date():
    assert parse_date("2020-03-01") == dt.date(2020, 3, 1)
    assert parse_date(None) is None


@pytest.mark.parametrize("value", ("01/03/2020", "2020-13-01", "yesterday"))
def test_parse_date_malformed(value):
    with pytest.raises(
        MalformedRecordError, match=re.escape(f"{value!r} is not a date")
    ):
        parse_date(value)


def test_scale_count():
    assert scale_count(20, 2.0) == 10.0
    assert scale_count(0, 2.0) == 0.0
    assert scale_count(None, 2.0) is None


@pytest.mark.parametrize(
    "raw, exp",
    (
        ("X", None),
        ("*", None),
        ("NA", None),
        ("", None),
        ("20", 10.0),
        ("3", 1.5),
    ),
)
def test_normalise_parse_and_scale(raw, exp):
    assert scale_count(parse_count(normalise_sentinel(raw)), 2.0) == exp
