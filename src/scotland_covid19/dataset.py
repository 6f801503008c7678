"""
The Scottish COVID-19 dataset

[ScotlandCovid19Data][(m).] is the entry point for users.
It loads each part of the data the first time it is asked for
and then keeps it until the data is refreshed.
The health boards and their scale factors are always loaded first,
because every other part of the data depends on them.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable, TypeVar

from attrs import astuple, define, field

from scotland_covid19.assertions import assert_is_timeseries, assert_scale_is_complete
from scotland_covid19.constants import (
    CURRENT_CASES_FILE,
    CURRENT_DECEASED_FILE,
    CURRENT_INTENSIVE_CARE_FILE,
    DATA_DIR,
    GRAND_TOTAL,
    HEALTH_BOARD_POPULATIONS_FILE,
    LEGACY_CASES_FILE,
    LEGACY_DEATHS_FILE,
    LEGACY_DECEASED_FILE,
    LEGACY_INTENSIVE_CARE_FILE,
    NUMBERS_PER,
    REVISION_FILE_NAME,
)
from scotland_covid19.exceptions import MissingDataFileError, ScotlandCovid19DataError
from scotland_covid19.fetching import Fetcher, GitHubSource
from scotland_covid19.freshness import FreshnessTracker, RevisionStore
from scotland_covid19.metrics import (
    load_cases,
    load_deaths,
    load_deceased,
    load_intensive_care_by_board,
    load_intensive_care_total,
)
from scotland_covid19.population import (
    HealthBoardPopulations,
    load_health_board_populations,
)
from scotland_covid19.typing import DateIndexedSeries, TimeseriesDataFrame

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@define(frozen=True)
class DataFiles:
    """
    Names of the data files
    """

    populations: str = HEALTH_BOARD_POPULATIONS_FILE
    legacy_cases: str = LEGACY_CASES_FILE
    current_cases: str = CURRENT_CASES_FILE
    deaths: str = LEGACY_DEATHS_FILE
    legacy_intensive_care: str = LEGACY_INTENSIVE_CARE_FILE
    current_intensive_care: str = CURRENT_INTENSIVE_CARE_FILE
    legacy_deceased: str = LEGACY_DECEASED_FILE
    current_deceased: str = CURRENT_DECEASED_FILE

    def all(self) -> tuple[str, ...]:
        """
        Get the names of all the files

        Returns
        -------
        :
            All file names, in field order
        """
        return tuple(astuple(self))


@define
class ScotlandCovid19Data:
    """
    Scottish COVID-19 data, loaded on demand and cached

    Each accessor returns the same object every time it is called
    until a refresh downloads new files.
    Cached objects are shared, so should not be modified in place.
    """

    data_dir: Path = field(default=DATA_DIR, converter=Path)
    """
    Directory in which the data files are kept
    """

    fetcher: Fetcher | None = field(factory=GitHubSource)
    """
    Retrieves data files and the upstream revision

    If `None`, the data can only be read from files
    which are already in `data_dir`.
    """

    files: DataFiles = field(factory=DataFiles)
    """
    Names of the data files
    """

    numbers_per: float = NUMBERS_PER
    """
    Population represented by one unit of scale factor
    """

    run_checks: bool = True
    """
    If `True`, check the loaded data's internal consistency
    """

    revision_file: Path | None = field(default=None)
    """
    File in which the revision of the local data is recorded

    Defaults to `.revision` in `data_dir`.
    """

    _cache: dict[str, Any] = field(factory=dict, init=False, repr=False)
    _lock: threading.RLock = field(factory=threading.RLock, init=False, repr=False)

    @property
    def freshness_tracker(self) -> FreshnessTracker:
        """
        Tracker of whether the local data is up to date

        Raises
        ------
        ScotlandCovid19DataError
            There is no fetcher so freshness can't be checked
        """
        if self.fetcher is None:
            msg = "No fetcher is configured, so the upstream data can't be checked"
            raise ScotlandCovid19DataError(msg)

        revision_file = self.revision_file
        if revision_file is None:
            revision_file = self.data_dir / REVISION_FILE_NAME

        return FreshnessTracker(
            store=RevisionStore(revision_file),
            fetcher=self.fetcher,
            data_dir=self.data_dir,
            files=self.files.all(),
        )

    def _get_path(self, name: str) -> Path:
        path = self.data_dir / name
        if path.exists():
            return path

        if self.fetcher is None:
            raise MissingDataFileError(path, reason="no fetcher is configured")

        LOGGER.info("%s is missing, downloading it.", name)
        path = self.fetcher.fetch_file(name, self.data_dir)
        if not path.exists():
            raise MissingDataFileError(path, reason="fetching did not supply the file")

        return path

    def _cached(self, key: str, loader: Callable[[], T]) -> T:
        with self._lock:
            if key not in self._cache:
                # If the loader raises, nothing is cached
                self._cache[key] = loader()

            return self._cache[key]  # type: ignore # type of loader's output

    def _populations(self) -> HealthBoardPopulations:
        def load() -> HealthBoardPopulations:
            res = load_health_board_populations(
                self._get_path(self.files.populations), numbers_per=self.numbers_per
            )
            if self.run_checks:
                assert_scale_is_complete(res.scale, res.health_boards)

            return res

        return self._cached("populations", load)

    def _check_timeseries(self, res: T, per_board: bool) -> T:
        if self.run_checks:
            columns = [*self.health_boards(), GRAND_TOTAL] if per_board else None
            assert_is_timeseries(res, columns=columns)  # type: ignore # always pandas

        return res

    def health_boards(self) -> tuple[str, ...]:
        """
        Get the health boards

        Returns
        -------
        :
            Health boards, sorted, excluding the aggregate
        """
        return self._populations().health_boards

    def scale_factors(self) -> dict[str, float]:
        """
        Get the scale factor for each health board and the aggregate

        Returns
        -------
        :
            Scale factors, i.e. population / `self.numbers_per`
        """
        return self._populations().scale

    def cases(self) -> TimeseriesDataFrame:
        """
        Get cases per `self.numbers_per` people

        Returns
        -------
        :
            Cases in each health board and in total
        """

        def load() -> TimeseriesDataFrame:
            populations = self._populations()
            res = load_cases(
                legacy_path=self._get_path(self.files.legacy_cases),
                current_path=self._get_path(self.files.current_cases),
                health_boards=populations.health_boards,
                scale=populations.scale,
            )

            return self._check_timeseries(res, per_board=True)

        return self._cached("cases", load)

    def deaths(self) -> TimeseriesDataFrame:
        """
        Get deaths per `self.numbers_per` people

        Returns
        -------
        :
            Deaths in each health board and in total
        """

        def load() -> TimeseriesDataFrame:
            populations = self._populations()
            res = load_deaths(
                path=self._get_path(self.files.deaths),
                health_boards=populations.health_boards,
                scale=populations.scale,
            )

            return self._check_timeseries(res, per_board=True)

        return self._cached("deaths", load)

    def intensive_care_by_board(self) -> TimeseriesDataFrame:
        """
        Get the number of patients in intensive care in each health board

        Returns
        -------
        :
            Patients in intensive care in each health board and in total
        """

        def load() -> TimeseriesDataFrame:
            populations = self._populations()
            res = load_intensive_care_by_board(
                path=self._get_path(self.files.current_intensive_care),
                health_boards=populations.health_boards,
            )

            return self._check_timeseries(res, per_board=True)

        return self._cached("intensive_care_by_board", load)

    def intensive_care_total(self) -> DateIndexedSeries:
        """
        Get the total number of patients in intensive care

        Returns
        -------
        :
            Patients in intensive care in Scotland
        """

        def load() -> DateIndexedSeries:
            populations = self._populations()
            res = load_intensive_care_total(
                legacy_path=self._get_path(self.files.legacy_intensive_care),
                current_path=self._get_path(self.files.current_intensive_care),
                health_boards=populations.health_boards,
            )

            return self._check_timeseries(res, per_board=False)

        return self._cached("intensive_care_total", load)

    def deceased(self) -> DateIndexedSeries:
        """
        Get the cumulative number of deceased

        Returns
        -------
        :
            Cumulative deceased in Scotland
        """

        def load() -> DateIndexedSeries:
            # Populations always load first
            self._populations()
            res = load_deceased(
                legacy_path=self._get_path(self.files.legacy_deceased),
                current_path=self._get_path(self.files.current_deceased),
            )

            return self._check_timeseries(res, per_board=False)

        return self._cached("deceased", load)

    def load(self) -> None:
        """
        Load every part of the data (if not already loaded)
        """
        self.health_boards()
        self.cases()
        self.deaths()
        self.intensive_care_by_board()
        self.intensive_care_total()
        self.deceased()

    def is_stale(self) -> bool:
        """
        Check whether the upstream data has changed since it was last downloaded

        Returns
        -------
        :
            `True` if the local data is out of date (or its revision is unknown)
        """
        return self.freshness_tracker.is_stale()

    def refresh(
        self, force: bool = False, only: str | Iterable[str] | None = None
    ) -> bool:
        """
        Download the data files if they are out of date

        If anything is downloaded, everything cached is dropped
        and will be reloaded on next access.

        Parameters
        ----------
        force
            Download even if the local data is up to date

        only
            Only download these files (default: all files)

        Returns
        -------
        :
            `True` if files were downloaded
        """
        with self._lock:
            downloaded = self.freshness_tracker.refresh(force=force, only=only)
            if downloaded:
                self._cache = {}

        return downloaded

    def update(self) -> None:
        """
        Download any new data then load everything
        """
        self.refresh()
        self.load()
