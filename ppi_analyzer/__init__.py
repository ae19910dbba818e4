"""Producer price index analyzer: fetch a FRED series and query it in memory."""

__version__ = "0.1.0"
