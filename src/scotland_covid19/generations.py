"""
Reading and merging the two generations of data files

The upstream source changed the layout of its exports part way through the pandemic.
The older ("legacy") files report an aggregate column
and use "X" for missing data.
The newer ("current") files leave the aggregate out,
sometimes report facilities which are not health boards
and use "*" or "NA" for missing data.

Each generation is read into the same shape
(a [TimeseriesDataFrame][scotland_covid19.typing.TimeseriesDataFrame]),
then the two are merged.
Where both generations have data for a date,
the current generation's row replaces the legacy row in full.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Callable, TypeVar

import pandas as pd
from attrs import define

from scotland_covid19.aggregation import reconcile_grand_total, scale_counts
from scotland_covid19.constants import GRAND_TOTAL
from scotland_covid19.exceptions import MalformedRecordError
from scotland_covid19.io import read_raw_csv
from scotland_covid19.sentinels import normalise_sentinel, parse_count, parse_date
from scotland_covid19.typing import TimeseriesDataFrame

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

FrameOrSeries = TypeVar("FrameOrSeries", pd.DataFrame, pd.Series)


@define(frozen=True)
class SchemaLayout:
    """
    Layout of the columns in one generation of a data file
    """

    aggregate_column: str | None
    """
    Column holding the aggregate

    If `None`, the file has no aggregate column
    and the aggregate is calculated by summing the health boards and facilities.
    """

    scaled: bool
    """
    Should counts be divided by the population scale factors?
    """

    date_column: str = "Date"
    """
    Column holding the date
    """

    facility_columns: tuple[str, ...] = ()
    """
    Columns for facilities which are not health boards

    These are included in a calculated aggregate,
    but are not part of the output.
    """

    has_health_boards: bool = True
    """
    Does the file have a column for each health board?
    """


def parse_column(
    values: Sequence[str],
    parser: Callable[[str | None], T | None],
    header: str,
    path: Path,
) -> list[T | None]:
    """
    Normalise and parse each value in a column

    Parameters
    ----------
    values
        Raw values

    parser
        Parser to apply to each normalised value

    header
        Header of the column

    path
        File from which `values` was read (used in error messages)

    Returns
    -------
    :
        Parsed values, `None` for "no data"

    Raises
    ------
    MalformedRecordError
        One of the values could not be parsed
    """
    res = []
    for i, value in enumerate(values, start=1):
        try:
            res.append(parser(normalise_sentinel(value, header=header)))
        except MalformedRecordError as exc:
            raise exc.with_location(path=path, row=i, column=header) from exc

    return res


def read_generation(
    path: Path,
    layout: SchemaLayout,
    health_boards: Sequence[str],
    scale: dict[str, float],
) -> TimeseriesDataFrame:
    """
    Read one generation of a data file

    Parameters
    ----------
    path
        File to read

    layout
        Layout of `path`

    health_boards
        Canonical health boards

        Health boards which aren't in `path` have no data in the output.
        Columns in `path` which are neither health boards nor part of `layout`
        are ignored.

    scale
        Scale factors for each health board and the aggregate

        Only used if `layout.scaled` is `True`.

    Returns
    -------
    :
        Data for each date in `path`.
        Rows without a date and rows without any data are dropped.
        If a date appears more than once, the last row wins.

    Raises
    ------
    MissingDataFileError
        `path` does not exist

    MalformedRecordError
        A date or count in `path` could not be parsed
    """
    required = [layout.date_column]
    if layout.aggregate_column is not None:
        required.append(layout.aggregate_column)

    raw = read_raw_csv(path, required_columns=tuple(required))

    boards = list(health_boards) if layout.has_health_boards else []
    boards_in_file = [b for b in boards if b in raw.columns]
    facilities_in_file = [f for f in layout.facility_columns if f in raw.columns]
    value_columns = [*boards_in_file, *facilities_in_file]
    if layout.aggregate_column is not None:
        value_columns.append(layout.aggregate_column)

    ignored = sorted(set(raw.columns) - {layout.date_column, *value_columns})
    if ignored:
        LOGGER.debug("Ignoring columns in %s: %s", path.name, ignored)

    if len(boards_in_file) < len(boards):
        LOGGER.debug(
            "Health boards not in %s: %s",
            path.name,
            sorted(set(boards) - set(boards_in_file)),
        )

    dates = pd.Series(
        parse_column(raw[layout.date_column], parse_date, layout.date_column, path),
        dtype=object,
    )
    counts = pd.DataFrame(
        {
            column: pd.Series(
                parse_column(raw[column], parse_count, column, path), dtype=float
            )
            for column in value_columns
        },
        index=raw.index,
        columns=value_columns,
        dtype=float,
    )

    keep = dates.notna() & counts.notna().any(axis="columns")
    dates = dates[keep]
    counts = counts.loc[keep]
    counts.index = pd.DatetimeIndex([d.isoformat() for d in dates], name="date")
    counts = counts[~counts.index.duplicated(keep="last")].sort_index()

    if layout.aggregate_column is None:
        aggregate = reconcile_grand_total(counts, components=value_columns)
    else:
        aggregate = counts[layout.aggregate_column].rename(GRAND_TOTAL)

    res = counts.assign(**{GRAND_TOTAL: aggregate}).reindex(
        columns=[*boards, GRAND_TOTAL]
    )
    if layout.scaled:
        res = scale_counts(res, scale)

    LOGGER.debug("Read %d dates from %s.", res.shape[0], path.name)

    return res


def merge_generations(
    legacy: FrameOrSeries | None, current: FrameOrSeries | None
) -> FrameOrSeries:
    """
    Merge the two generations of data

    Parameters
    ----------
    legacy
        Data from the legacy generation

    current
        Data from the current generation

    Returns
    -------
    :
        Data for every date in either `legacy` or `current`, sorted by date.
        For dates in `current`, the row comes from `current`
        (no matter what `legacy` has for that date).
        For all other dates, the row comes from `legacy`.

    Raises
    ------
    ValueError
        Both `legacy` and `current` are `None`
    """
    if legacy is None and current is None:
        msg = "At least one of legacy and current must be supplied"
        raise ValueError(msg)

    if current is None:
        return legacy.sort_index()  # type: ignore # checked above

    if legacy is None:
        return current.sort_index()

    legacy_only = legacy.loc[~legacy.index.isin(current.index)]
    to_combine = [v for v in (legacy_only, current) if not v.empty]
    if not to_combine:
        return current.copy()

    res = pd.concat(to_combine).sort_index()
    if isinstance(res, pd.DataFrame):
        res = res[list(legacy.columns)]

    return res
