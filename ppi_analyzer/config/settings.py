"""Configuration settings for the analyzer."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv


load_dotenv()


# Menu choice -> FRED series ID
PPI_SERIES: dict[int, str] = {
    1: "PCU325325",
    2: "WPU061",
    3: "WPU06",
}

SERIES_TITLES: dict[str, str] = {
    "PCU325325": "PPI by Industry: Chemical Manufacturing",
    "WPU061": "PPI by Commodity: Industrial Chemicals",
    "WPU06": "PPI by Commodity: Chemicals and Allied Products",
}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


@dataclass
class Settings:
    """Application settings."""

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    request_timeout: float = field(
        default_factory=lambda: _env_float("FRED_TIMEOUT", 30.0)
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("PPI_LOG_LEVEL", "INFO").upper()
    )

    def validate(self) -> None:
        """Validate required settings."""
        if not self.fred_api_key:
            raise ValueError(
                "FRED_API_KEY not set. Get one at: "
                "https://fred.stlouisfed.org/docs/api/api_key.html"
            )
        if self.request_timeout <= 0:
            raise ValueError(f"FRED_TIMEOUT must be positive, got {self.request_timeout}")
