"""Configuration."""

from ppi_analyzer.config.settings import Settings, PPI_SERIES, SERIES_TITLES

__all__ = ["Settings", "PPI_SERIES", "SERIES_TITLES"]
