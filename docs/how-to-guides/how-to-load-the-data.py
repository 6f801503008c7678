# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.16.6
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %% [markdown]
# # How to load the data
#
# Here we demonstrate how to load the data,
# what shape it comes back in
# and how to keep it up to date.
#
# To keep this demo runnable without a network connection,
# we use the small example files shipped in `scotland_covid19.testing`
# and no fetcher.
# In normal use, you would leave out `fetcher=None`
# and the files would be downloaded the first time they are needed.

# %% [markdown]
# ## Imports

# %%
import logging
import tempfile
from pathlib import Path

from scotland_covid19 import ScotlandCovid19Data
from scotland_covid19.testing import StubFetcher, write_example_files

# %%
# Show what the package is doing
logging.basicConfig(level=logging.INFO)

# %% [markdown]
# ## Reading local files

# %%
data_dir = Path(tempfile.mkdtemp()) / "data"
write_example_files(data_dir)

data = ScotlandCovid19Data(data_dir=data_dir, fetcher=None)

# %% [markdown]
# The health boards and their scale factors come from the population file.
# Scale factors are population per 100,000 people.
# The "Grand Total" factor is always the sum of the health boards' factors.

# %%
data.health_boards()

# %%
data.scale_factors()

# %% [markdown]
# Cases and deaths are returned per 100,000 people,
# one column per health board plus "Grand Total".
# "No data" is `NaN`, which is not the same as zero.
# Where both generations of the files report a date,
# the newer generation's row is used.

# %%
data.cases()

# %%
data.deaths()

# %% [markdown]
# Intensive care and deceased numbers are not scaled.
# Patients in the Golden Jubilee National Hospital
# are only included in the "Grand Total".

# %%
data.intensive_care_by_board()

# %%
data.intensive_care_total()

# %%
data.deceased()

# %% [markdown]
# Each result is loaded once, then the same object is returned.
# Don't modify the results in place.

# %%
data.cases() is data.cases()

# %% [markdown]
# ## Keeping the data up to date
#
# With a fetcher, we can check whether the upstream data has changed
# since we last downloaded it and, if so, download it again.
# Here we use a stub fetcher rather than the default,
# which talks to GitHub.

# %%
fetcher = StubFetcher(revision="new-revision")
data = ScotlandCovid19Data(data_dir=data_dir, fetcher=fetcher)
data.is_stale()

# %%
data.refresh()

# %%
data.is_stale()

# %% [markdown]
# `update` refreshes and then loads everything.

# %%
data.update()
