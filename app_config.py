"""
Application configuration
Display settings with environment-variable overrides
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class PreviewConfig:
    """Configuration for the data preview table"""
    PAGE_SIZE: int
    SUPPORTED_FILE_FORMATS: tuple


@dataclass
class StatisticsConfig:
    """Display settings for the statistics views"""
    MODE_DISPLAY_LIMIT: int
    DECIMALS: int


@dataclass
class PlotConfig:
    """Figure sizes used by the studio tabs"""
    CHART_HEIGHT: int
    BOX_HEIGHT: int
    SKEWNESS_HEIGHT: int
    HEATMAP_HEIGHT: int


class Config:
    """Central configuration for the GetInsights app"""

    def __init__(self):
        self._load_default_config()
        self._load_environment_variables()

    def _load_default_config(self):
        """Load default configuration values"""
        self.preview = PreviewConfig(
            PAGE_SIZE=50,
            SUPPORTED_FILE_FORMATS=('.csv', '.xlsx', '.xls'),
        )

        self.statistics = StatisticsConfig(
            MODE_DISPLAY_LIMIT=3,
            DECIMALS=3,
        )

        self.plots = PlotConfig(
            CHART_HEIGHT=500,
            BOX_HEIGHT=300,
            SKEWNESS_HEIGHT=400,
            HEATMAP_HEIGHT=600,
        )

        self.logging_level = "INFO"

    def _load_environment_variables(self):
        """Load configuration from environment variables"""
        if os.getenv("GETINSIGHTS_PAGE_SIZE"):
            self.preview.PAGE_SIZE = _positive_int("GETINSIGHTS_PAGE_SIZE", self.preview.PAGE_SIZE)

        if os.getenv("GETINSIGHTS_PLOT_HEIGHT"):
            self.plots.CHART_HEIGHT = _positive_int("GETINSIGHTS_PLOT_HEIGHT", self.plots.CHART_HEIGHT)

        if os.getenv("GETINSIGHTS_LOG_LEVEL"):
            self.logging_level = os.getenv("GETINSIGHTS_LOG_LEVEL").upper()

    def __str__(self) -> str:
        return f"Config(page_size={self.preview.PAGE_SIZE}, log_level={self.logging_level})"


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance (singleton pattern)"""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Reload configuration (useful for testing)"""
    global _config
    _config = Config()
    return _config
