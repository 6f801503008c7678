"""
Normalisation of raw cell values

Parsing is split into two stages, each a pure function:

1. [normalise_sentinel][(m).] maps a raw cell to either a string or `None`
   (i.e. "no data")
1. the typed parsers ([parse_date][(m).], [parse_count][(m).])
   turn the optional string into the value the column holds

The two generations of data files use different sentinels for "no data",
so all files go through the same first stage.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Collection

from scotland_covid19.constants import DATE_FORMAT, SENTINELS
from scotland_covid19.exceptions import MalformedRecordError


def normalise_sentinel(
    value: str | None,
    header: str | None = None,
    sentinels: Collection[str] = SENTINELS,
) -> str | None:
    """
    Normalise a raw cell value

    Parameters
    ----------
    value
        Raw value

    header
        Header of the column from which `value` was read

        If `value` is equal to this, it is treated as "no data".
        This happens when a file carrying its own header row
        has been appended to another file.

    sentinels
        Values which mean "no data" (comparison is case-sensitive)

    Returns
    -------
    :
        `None` if `value` means "no data", otherwise `value` with whitespace stripped
    """
    if value is None:
        return None

    stripped = value.strip()
    if not stripped or stripped in sentinels:
        return None

    if header is not None and stripped == header.strip():
        return None

    return stripped


def parse_date(value: str | None) -> dt.date | None:
    """
    Parse a normalised value into a date

    Parameters
    ----------
    value
        Output of [normalise_sentinel][(m).]

    Returns
    -------
    :
        Parsed date, `None` if `value` is `None`

    Raises
    ------
    MalformedRecordError
        `value` is not a date in the expected format
    """
    if value is None:
        return None

    try:
        return dt.datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise MalformedRecordError(value, expected=f"a date ({DATE_FORMAT})") from exc


def parse_count(value: str | None) -> int | None:
    """
    Parse a normalised value into an integer count

    Thousands separators (",") are allowed.

    Parameters
    ----------
    value
        Output of [normalise_sentinel][(m).]

    Returns
    -------
    :
        Parsed count, `None` if `value` is `None`

    Raises
    ------
    MalformedRecordError
        `value` is not an integer
    """
    if value is None:
        return None

    try:
        return int(value.replace(",", ""))
    except ValueError as exc:
        raise MalformedRecordError(value, expected="an integer") from exc


def scale_count(count: float | None, scale: float) -> float | None:
    """
    Scale a count by a population scale factor

    Parameters
    ----------
    count
        Count to scale

    scale
        Scale factor (population / numbers per)

    Returns
    -------
    :
        `count / scale`, `None` if `count` is `None`
        (NaN stays NaN)
    """
    if count is None:
        return None

    return count / scale
