"""
Normalised Scottish COVID-19 surveillance data, keyed by health board
"""

import importlib.metadata

from scotland_covid19.dataset import ScotlandCovid19Data

__version__ = importlib.metadata.version("scotland-covid19-data")

__all__ = ["ScotlandCovid19Data"]
