"""
Constants used throughout
"""

from __future__ import annotations

from pathlib import Path

GRAND_TOTAL: str = "Grand Total"
"""
Key of the synthetic whole-of-Scotland aggregate
"""

NUMBERS_PER: int = 100_000
"""
Population per unit of scale factor (i.e. values are per 100,000 people)
"""

SENTINELS: frozenset[str] = frozenset({"X", "*", "NA"})
"""
Raw cell values which mean "no data" (blank cells also mean "no data")
"""

DATE_FORMAT: str = "%Y-%m-%d"
"""
Format of dates in every data file
"""

DATA_DIR: Path = Path("data")
"""
Default directory in which the data files are cached
"""

REVISION_FILE_NAME: str = ".revision"
"""
Name of the file, inside the data directory, holding the local revision token
"""

HEALTH_BOARD_POPULATIONS_FILE: str = "HB_Populations.csv"
LEGACY_CASES_FILE: str = "regional_cases.csv"
LEGACY_DEATHS_FILE: str = "regional_deaths.csv"
LEGACY_INTENSIVE_CARE_FILE: str = "regional_icu.csv"
LEGACY_DECEASED_FILE: str = "scot_deceased.csv"
CURRENT_CASES_FILE: str = "trends_cases.csv"
CURRENT_INTENSIVE_CARE_FILE: str = "trends_icu.csv"
CURRENT_DECEASED_FILE: str = "trends_deceased.csv"

GOLDEN_JUBILEE: str = "Golden Jubilee National Hospital"
"""
Facility reported alongside health boards in intensive care data
"""

LEGACY_DECEASED_COLUMN: str = "Deceased"
CURRENT_DECEASED_COLUMN: str = "Number of COVID-19 confirmed deaths registered to date"

GITHUB_REPOSITORY: str = "watty62/Scot_covid19"
GITHUB_BRANCH: str = "master"
RAW_FILES_URL: str = (
    f"https://raw.githubusercontent.com/{GITHUB_REPOSITORY}/{GITHUB_BRANCH}"
    "/data/processed"
)
LATEST_COMMIT_URL: str = (
    f"https://api.github.com/repos/{GITHUB_REPOSITORY}/commits/{GITHUB_BRANCH}"
)
