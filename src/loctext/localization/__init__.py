"""Collections and loaders for localization text tables.

Python 3.13+.
"""

from .loading import PathTextLoader, TextLoader, load_table
from .table import TextTable

__all__ = [
    "PathTextLoader",
    "TextLoader",
    "TextTable",
    "load_table",
]
