"""timeman: report, diff, shift and reformat dates from the command line."""

__version__ = "0.3.0"
