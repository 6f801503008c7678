"""
Reading of raw data files
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from scotland_covid19.exceptions import MalformedRecordError, MissingDataFileError

LOGGER = logging.getLogger(__name__)


def read_raw_csv(path: Path, required_columns: tuple[str, ...] = ()) -> pd.DataFrame:
    """
    Read a CSV file without interpreting any of its values

    Every cell is returned as a string, blank cells as empty strings,
    so that sentinel handling is left entirely to
    [normalise_sentinel][scotland_covid19.sentinels.normalise_sentinel].

    Parameters
    ----------
    path
        File to read

    required_columns
        Columns which must be in the file's header

    Returns
    -------
    :
        Raw contents of `path`

    Raises
    ------
    MissingDataFileError
        `path` does not exist

    MalformedRecordError
        `path` is empty, can't be parsed as CSV
        or is missing one of `required_columns`
    """
    if not path.exists():
        raise MissingDataFileError(path)

    LOGGER.debug("Reading %s", path)
    try:
        # Surplus fields are dropped rather than shifting the columns
        res = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            index_col=False,
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise MalformedRecordError(
            "", expected="a CSV file with a header", path=path
        ) from exc

    # Strip whitespace and byte order marks from the headers
    res.columns = [str(c).replace("\ufeff", "").strip() for c in res.columns]

    missing = [c for c in required_columns if c not in res.columns]
    if missing:
        raise MalformedRecordError(
            ", ".join(res.columns),
            expected=f"a header including {missing}",
            path=path,
        )

    return res
