"""
Loaders for each metric

Each loader combines the relevant [SchemaLayout][scotland_covid19.generations.SchemaLayout]s
with [read_generation][scotland_covid19.generations.read_generation]
and [merge_generations][scotland_covid19.generations.merge_generations].
Cases and deaths are scaled per head of population.
Intensive care and deceased counts are left as raw counts.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from scotland_covid19.constants import (
    CURRENT_DECEASED_COLUMN,
    GOLDEN_JUBILEE,
    GRAND_TOTAL,
    LEGACY_DECEASED_COLUMN,
)
from scotland_covid19.generations import (
    SchemaLayout,
    merge_generations,
    read_generation,
)
from scotland_covid19.typing import DateIndexedSeries, TimeseriesDataFrame

LOGGER = logging.getLogger(__name__)

LEGACY_CASES_LAYOUT = SchemaLayout(aggregate_column=GRAND_TOTAL, scaled=True)
CURRENT_CASES_LAYOUT = SchemaLayout(aggregate_column=None, scaled=True)
LEGACY_DEATHS_LAYOUT = SchemaLayout(aggregate_column=GRAND_TOTAL, scaled=True)
LEGACY_INTENSIVE_CARE_LAYOUT = SchemaLayout(aggregate_column=GRAND_TOTAL, scaled=False)
CURRENT_INTENSIVE_CARE_LAYOUT = SchemaLayout(
    aggregate_column=None, scaled=False, facility_columns=(GOLDEN_JUBILEE,)
)
LEGACY_DECEASED_LAYOUT = SchemaLayout(
    aggregate_column=LEGACY_DECEASED_COLUMN, scaled=False, has_health_boards=False
)
CURRENT_DECEASED_LAYOUT = SchemaLayout(
    aggregate_column=CURRENT_DECEASED_COLUMN, scaled=False, has_health_boards=False
)


def _log_date_range(what: str, res: pd.DataFrame | pd.Series) -> None:
    if res.empty:
        LOGGER.debug("Read no %s data.", what)
    else:
        LOGGER.debug(
            "Read %s data for %s to %s.",
            what,
            res.index.min().date(),
            res.index.max().date(),
        )


def load_cases(
    legacy_path: Path,
    current_path: Path,
    health_boards: Sequence[str],
    scale: dict[str, float],
) -> TimeseriesDataFrame:
    """
    Load cases per head of population

    Parameters
    ----------
    legacy_path
        Legacy generation cases file

    current_path
        Current generation cases file

    health_boards
        Canonical health boards

    scale
        Scale factors for each health board and the aggregate

    Returns
    -------
    :
        Cases for each date in either file
    """
    LOGGER.info("Reading cases data (%s, %s).", legacy_path.name, current_path.name)
    res = merge_generations(
        read_generation(legacy_path, LEGACY_CASES_LAYOUT, health_boards, scale),
        read_generation(current_path, CURRENT_CASES_LAYOUT, health_boards, scale),
    )
    _log_date_range("cases", res)

    return res


def load_deaths(
    path: Path, health_boards: Sequence[str], scale: dict[str, float]
) -> TimeseriesDataFrame:
    """
    Load deaths per head of population

    Deaths are only published in the legacy generation's layout.

    Parameters
    ----------
    path
        Deaths file

    health_boards
        Canonical health boards

    scale
        Scale factors for each health board and the aggregate

    Returns
    -------
    :
        Deaths for each date in `path`
    """
    LOGGER.info("Reading deaths data (%s).", path.name)
    res = merge_generations(
        read_generation(path, LEGACY_DEATHS_LAYOUT, health_boards, scale), None
    )
    _log_date_range("deaths", res)

    return res


def load_intensive_care_by_board(
    path: Path, health_boards: Sequence[str]
) -> TimeseriesDataFrame:
    """
    Load the number of patients in intensive care in each health board

    Only the current generation reports this in a usable form.
    Patients in the Golden Jubilee National Hospital
    are included in the aggregate only.

    Parameters
    ----------
    path
        Current generation intensive care file

    health_boards
        Canonical health boards

    Returns
    -------
    :
        Patients in intensive care for each date in `path`
    """
    LOGGER.info("Reading intensive care data (%s).", path.name)
    res = read_generation(
        path, CURRENT_INTENSIVE_CARE_LAYOUT, health_boards, scale={}
    )
    _log_date_range("intensive care", res)

    return res


def load_intensive_care_total(
    legacy_path: Path,
    current_path: Path,
    health_boards: Sequence[str],
) -> DateIndexedSeries:
    """
    Load the total number of patients in intensive care

    Parameters
    ----------
    legacy_path
        Legacy generation intensive care file

    current_path
        Current generation intensive care file

    health_boards
        Canonical health boards

    Returns
    -------
    :
        Total patients in intensive care for each date in either file
    """
    LOGGER.info(
        "Reading intensive care totals (%s, %s).", legacy_path.name, current_path.name
    )
    res = merge_generations(
        read_generation(
            legacy_path, LEGACY_INTENSIVE_CARE_LAYOUT, health_boards, scale={}
        )[GRAND_TOTAL],
        read_generation(
            current_path, CURRENT_INTENSIVE_CARE_LAYOUT, health_boards, scale={}
        )[GRAND_TOTAL],
    ).rename("intensive_care")
    _log_date_range("intensive care totals", res)

    return res


def load_deceased(legacy_path: Path, current_path: Path) -> DateIndexedSeries:
    """
    Load the cumulative number of deceased

    Parameters
    ----------
    legacy_path
        Legacy generation deceased file

    current_path
        Current generation deceased file

    Returns
    -------
    :
        Cumulative deceased for each date in either file
    """
    LOGGER.info("Reading deceased data (%s, %s).", legacy_path.name, current_path.name)
    res = merge_generations(
        read_generation(legacy_path, LEGACY_DECEASED_LAYOUT, (), scale={})[
            GRAND_TOTAL
        ],
        read_generation(current_path, CURRENT_DECEASED_LAYOUT, (), scale={})[
            GRAND_TOTAL
        ],
    ).rename("deceased")
    _log_date_range("deceased", res)

    return res
