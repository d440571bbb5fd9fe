"""Returns Tracker: browse, search and create return records."""

__version__ = "0.1.0"
