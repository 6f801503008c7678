"""
Code to support our tests

This is here, rather than in our `tests` directory
because of the issues that come
when you turn your tests into a package using `__init__.py` files
(for details, see https://docs.pytest.org/en/7.1.x/explanation/goodpractices.html#choosing-an-import-mode).
"""

from __future__ import annotations

from pathlib import Path

from attrs import define, field

from scotland_covid19.constants import (
    CURRENT_CASES_FILE,
    CURRENT_DECEASED_FILE,
    CURRENT_INTENSIVE_CARE_FILE,
    HEALTH_BOARD_POPULATIONS_FILE,
    LEGACY_CASES_FILE,
    LEGACY_DEATHS_FILE,
    LEGACY_DECEASED_FILE,
    LEGACY_INTENSIVE_CARE_FILE,
)

EXAMPLE_FILES: dict[str, str] = {
    # Populations give scale factors of Borders: 1.0, Fife: 2.0, Grand Total: 3.0.
    # The Grand Total row's value is deliberately wrong, it should be ignored.
    HEALTH_BOARD_POPULATIONS_FILE: (
        "Name,Population,Code\n"
        "Fife,200000,S08000029\n"
        "Borders,100000,S08000016\n"
        "Grand Total,999999,S92000003\n"
    ),
    LEGACY_CASES_FILE: (
        "Date,Borders,Fife,Grand Total\n"
        "2020-03-01,1,2,3\n"
        "2020-03-02,X,4,5\n"
        "2020-03-03,3,6,9\n"
        ",,,\n"
    ),
    CURRENT_CASES_FILE: (
        "Date,Borders,Fife\n"
        "2020-03-03,10,20\n"
        "2020-03-04,*,NA\n"
        "2020-03-05,5,NA\n"
        "Date,Borders,Fife\n"
    ),
    LEGACY_DEATHS_FILE: (
        "Date,Borders,Fife,Grand Total\n"
        "2020-03-10,0,2,2\n"
        "2020-03-11,1,X,1\n"
    ),
    LEGACY_INTENSIVE_CARE_FILE: (
        "Date,Borders,Fife,Grand Total\n"
        "2020-03-20,1,2,3\n"
        "2020-03-21,2,2,4\n"
    ),
    CURRENT_INTENSIVE_CARE_FILE: (
        "Date,Borders,Fife,Golden Jubilee National Hospital\n"
        "2020-03-21,1,1,1\n"
        "2020-03-22,*,2,*\n"
    ),
    LEGACY_DECEASED_FILE: (
        "Date,Deceased\n"
        "2020-03-25,1\n"
        "2020-03-26,X\n"
        "2020-03-27,3\n"
    ),
    CURRENT_DECEASED_FILE: (
        "Date,Number of COVID-19 confirmed deaths registered to date\n"
        "2020-03-27,4\n"
        '2020-03-28,"1,234"\n'
    ),
}
"""
Small, complete set of data files with known contents
"""


def write_example_files(
    data_dir: Path, files: dict[str, str] | None = None
) -> dict[str, Path]:
    """
    Write example data files

    Parameters
    ----------
    data_dir
        Directory in which to write the files

    files
        Map from file name to contents

        Defaults to [EXAMPLE_FILES][(m).].

    Returns
    -------
    :
        Map from file name to the path it was written to
    """
    if files is None:
        files = EXAMPLE_FILES

    data_dir.mkdir(parents=True, exist_ok=True)
    res = {}
    for name, contents in files.items():
        path = data_dir / name
        path.write_text(contents)
        res[name] = path

    return res


@define
class StubFetcher:
    """
    Fetcher which serves files from memory, for use in tests

    Every call is recorded so tests can check what was fetched.
    """

    files: dict[str, str] = field(factory=lambda: dict(EXAMPLE_FILES))
    """
    Map from file name to the contents served for it
    """

    revision: str = "abc123"
    """
    Revision token reported as the latest upstream revision
    """

    fetched: list[tuple[str, bool]] = field(factory=list)
    """
    Name and `force` of each call to `fetch_file`
    """

    revision_lookups: int = 0
    """
    Number of calls to `fetch_latest_revision`
    """

    def fetch_file(self, name: str, data_dir: Path, force: bool = False) -> Path:
        """
        Write a file from `self.files` (unless it is already there and not `force`)
        """
        self.fetched.append((name, force))
        path = data_dir / name
        if name in self.files and (force or not path.exists()):
            data_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(self.files[name])

        return path

    def fetch_latest_revision(self) -> str:
        """
        Get `self.revision`
        """
        self.revision_lookups += 1

        return self.revision
