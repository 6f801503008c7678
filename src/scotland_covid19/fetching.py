"""
Retrieval of data files and revision tokens from the upstream repository
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import requests
from attrs import define

from scotland_covid19.constants import LATEST_COMMIT_URL, RAW_FILES_URL
from scotland_covid19.exceptions import NetworkFailureError

LOGGER = logging.getLogger(__name__)


class Fetcher(Protocol):
    """
    Object which can retrieve data files and the upstream revision
    """

    def fetch_file(self, name: str, data_dir: Path, force: bool = False) -> Path:
        """
        Retrieve a file into `data_dir` (if it isn't there already or `force`)
        """

    def fetch_latest_revision(self) -> str:
        """
        Get the token identifying the upstream data's current revision
        """


@define
class GitHubSource:
    """
    Data hosted in a GitHub repository
    """

    files_url: str = RAW_FILES_URL
    """
    URL of the directory holding the data files
    """

    latest_commit_url: str = LATEST_COMMIT_URL
    """
    GitHub API URL for the latest commit on the branch holding the data
    """

    timeout: float = 60.0
    """
    Timeout for each request, in seconds
    """

    def fetch_file(self, name: str, data_dir: Path, force: bool = False) -> Path:
        """
        Download a file

        Parameters
        ----------
        name
            Name of the file in the upstream repository

        data_dir
            Directory into which to download the file

        force
            Download the file even if it already exists locally

        Returns
        -------
        :
            Path of the local copy

        Raises
        ------
        NetworkFailureError
            The file could not be downloaded
        """
        path = data_dir / name
        if path.exists() and not force:
            return path

        url = f"{self.files_url}/{name}"
        LOGGER.debug("%s => %s", url, path)
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkFailureError(url, str(exc)) from exc

        data_dir.mkdir(parents=True, exist_ok=True)
        # Never leave a partially written file at `path`
        tmp_path = path.with_name(f"{path.name}.part")
        tmp_path.write_bytes(response.content)
        tmp_path.replace(path)

        return path

    def fetch_latest_revision(self) -> str:
        """
        Get the SHA of the latest commit

        Returns
        -------
        :
            Commit SHA

        Raises
        ------
        NetworkFailureError
            The commit could not be retrieved
            or the response did not contain a SHA
        """
        try:
            response = requests.get(self.latest_commit_url, timeout=self.timeout)
            response.raise_for_status()
            sha = response.json()["sha"]
        except requests.RequestException as exc:
            raise NetworkFailureError(self.latest_commit_url, str(exc)) from exc
        except (ValueError, KeyError, TypeError) as exc:
            raise NetworkFailureError(
                self.latest_commit_url, f"unexpected response ({exc!r})"
            ) from exc

        return str(sha)
