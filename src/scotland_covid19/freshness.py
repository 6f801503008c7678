"""
Tracking whether the locally cached data is behind the upstream data
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from attrs import define

from scotland_covid19.fetching import Fetcher

LOGGER = logging.getLogger(__name__)


@define
class RevisionStore:
    """
    Local record of the upstream revision that the cached data came from
    """

    path: Path
    """
    File in which the revision token is kept
    """

    def read(self) -> str | None:
        """
        Read the recorded revision token

        Returns
        -------
        :
            Recorded token, `None` if no token has been recorded
        """
        if not self.path.exists():
            return None

        token = self.path.read_text().strip()

        return token or None

    def write(self, token: str) -> None:
        """
        Record a revision token

        Parameters
        ----------
        token
            Token to record
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(f"{token}\n")


@define
class FreshnessTracker:
    """
    Decides when the local data files need to be downloaded again
    """

    store: RevisionStore
    """
    Local record of the revision token
    """

    fetcher: Fetcher
    """
    Retrieves files and the latest revision token
    """

    data_dir: Path
    """
    Directory in which the data files are kept
    """

    files: tuple[str, ...]
    """
    Files which make up a full refresh
    """

    def is_stale(self) -> bool:
        """
        Check whether the upstream data has changed since it was last downloaded

        Returns
        -------
        :
            `True` if no revision has been recorded
            or the upstream revision differs from the recorded one

        Raises
        ------
        NetworkFailureError
            The upstream revision could not be retrieved
        """
        return self._check(self.fetcher.fetch_latest_revision())

    def _check(self, remote: str) -> bool:
        LOGGER.info("Checking for updated data")
        local = self.store.read()
        stale = local != remote
        LOGGER.debug(
            "Current data: %s, upstream data: %s, data is %s.",
            local,
            remote,
            "stale" if stale else "current",
        )

        return stale

    def refresh(
        self, force: bool = False, only: str | Iterable[str] | None = None
    ) -> bool:
        """
        Download the data files if they are out of date

        Parameters
        ----------
        force
            Download even if the recorded revision matches the upstream revision

        only
            Only consider these files (default: all of `self.files`)

            A restricted refresh does not update the recorded revision,
            because the other files may still be from an older revision.

        Returns
        -------
        :
            `True` if files were downloaded (i.e. `force` or the data was stale)

        Raises
        ------
        NetworkFailureError
            A file or the upstream revision could not be retrieved
        """
        if isinstance(only, str):
            only = (only,)

        files = self.files if only is None else tuple(only)
        LOGGER.info(
            "Downloading %s data (%s).",
            "all" if force else "new",
            "all files" if only is None else ", ".join(files),
        )

        remote = None
        if not force or only is None:
            remote = self.fetcher.fetch_latest_revision()

        stale = force or self._check(remote)  # type: ignore # only None if forced

        for name in files:
            self.fetcher.fetch_file(name, self.data_dir, force=stale)

        if stale and only is None:
            self.store.write(remote)  # type: ignore # always fetched for a full refresh
            LOGGER.debug("Recorded revision %s.", remote)

        return stale
