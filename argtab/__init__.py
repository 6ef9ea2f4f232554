"""Command-line option building blocks: typed options, getopt scanning and error reporting."""

__version__ = "0.1.0"
__all__ = ["dstr", "end", "options", "strptime", "date", "getopt"]