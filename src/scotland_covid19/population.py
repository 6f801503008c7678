"""
Health board populations and the scale factors derived from them
"""

from __future__ import annotations

import logging
from pathlib import Path

from attrs import define

from scotland_covid19.constants import GRAND_TOTAL, NUMBERS_PER
from scotland_covid19.exceptions import MalformedRecordError
from scotland_covid19.io import read_raw_csv
from scotland_covid19.sentinels import normalise_sentinel

LOGGER = logging.getLogger(__name__)

NAME_COLUMN: str = "Name"
POPULATION_COLUMN: str = "Population"


@define(frozen=True)
class HealthBoardPopulations:
    """
    Health boards and their scale factors
    """

    health_boards: tuple[str, ...]
    """
    Canonical health boards, sorted, excluding the aggregate
    """

    scale: dict[str, float]
    """
    Scale factor (population / numbers per) for each health board and the aggregate
    """


def parse_population(value: str | None) -> float:
    """
    Parse a normalised population value

    Parameters
    ----------
    value
        Output of [normalise_sentinel][scotland_covid19.sentinels.normalise_sentinel]

    Returns
    -------
    :
        Population

    Raises
    ------
    MalformedRecordError
        `value` is missing, not a number or not positive
    """
    if value is None:
        raise MalformedRecordError("", expected="a population")

    try:
        res = float(value.replace(",", ""))
    except ValueError as exc:
        raise MalformedRecordError(value, expected="a population") from exc

    if res <= 0:
        raise MalformedRecordError(value, expected="a positive population")

    return res


def load_health_board_populations(
    path: Path, numbers_per: float = NUMBERS_PER
) -> HealthBoardPopulations:
    """
    Load the health boards and their scale factors

    The aggregate's scale factor is the sum of the health boards' scale factors.
    Any aggregate row in the file is ignored.

    Parameters
    ----------
    path
        Population file, with columns "Name" and "Population"

    numbers_per
        Population represented by one unit of scale factor

    Returns
    -------
    :
        Health boards and scale factors

    Raises
    ------
    MissingDataFileError
        `path` does not exist

    MalformedRecordError
        A population is not a positive number or the file holds no health boards
    """
    LOGGER.info("Reading health board data (%s).", path.name)
    raw = read_raw_csv(path, required_columns=(NAME_COLUMN, POPULATION_COLUMN))

    scale: dict[str, float] = {}
    for i, (name_raw, population_raw) in enumerate(
        zip(raw[NAME_COLUMN], raw[POPULATION_COLUMN]), start=1
    ):
        name = normalise_sentinel(name_raw, header=NAME_COLUMN)
        if name is None or name == GRAND_TOTAL or name in scale:
            continue

        try:
            population = parse_population(
                normalise_sentinel(population_raw, header=POPULATION_COLUMN)
            )
        except MalformedRecordError as exc:
            raise exc.with_location(path=path, row=i, column=POPULATION_COLUMN) from exc

        scale[name] = population / numbers_per

    if not scale:
        raise MalformedRecordError(
            "", expected="a file containing at least one health board", path=path
        )

    scale[GRAND_TOTAL] = sum(scale.values())
    health_boards = tuple(sorted(b for b in scale if b != GRAND_TOTAL))
    LOGGER.debug("Read %d health boards.", len(health_boards))

    return HealthBoardPopulations(health_boards=health_boards, scale=scale)
