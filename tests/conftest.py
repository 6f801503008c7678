"""
Re-useable fixtures etc. for tests

See https://docs.pytest.org/en/7.1.x/reference/fixtures.html#conftest-py-sharing-fixtures-across-multiple-files
"""

from __future__ import annotations

import pandas as pd
import pytest

from scotland_covid19.testing import StubFetcher, write_example_files


@pytest.fixture(scope="session", autouse=True)
def pandas_terminal_width():
    # Set pandas terminal width so that doctests don't depend on terminal width.

    # We set the display width to 120 because examples should be short,
    # anything more than this is too wide to read in the source.
    pd.set_option("display.width", 120)

    # Display as many columns as you want (i.e. let the display width do the
    # truncation)
    pd.set_option("display.max_columns", 1000)


@pytest.fixture
def example_data_dir(tmp_path):
    data_dir = tmp_path / "data"
    write_example_files(data_dir)

    return data_dir


@pytest.fixture
def stub_fetcher():
    return StubFetcher()
