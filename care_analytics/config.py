# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to the CLI, the records API
#   client and the report builders.
#
# CLASSES:
# --------
# - AnalyticsConfig (dataclass)
#     geographic_top_n: int        (default 15)
#     patient_problem_top_n: int   (default 10)
#     top_zip_codes: int           (default 5)
#
# - SourceConfig (dataclass)
#     api_url: str | None          (default None)
#     timeout_seconds: float       (default 10.0)
#     default_location: str        (default "baltimore")
#
# - LoggingConfig (dataclass)
#     level: str                   (default "INFO")
#     log_file: str | None         (default None)
#
# - AppConfig (dataclass)
#     analytics: AnalyticsConfig
#     source: SourceConfig
#     logging: LoggingConfig
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton (tests, reloading .env).
#
# USAGE:
# ------
#   from care_analytics.config import get_config
#   config = get_config()
#   print(config.source.api_url)
#   print(config.analytics.geographic_top_n)
#
# ==============================================

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class AnalyticsConfig:
    """Limits applied to ranked analytics views."""
    geographic_top_n: int = 15
    patient_problem_top_n: int = 10
    top_zip_codes: int = 5


@dataclass
class SourceConfig:
    """Records API configuration."""
    api_url: Optional[str] = None
    timeout_seconds: float = 10.0
    default_location: str = "baltimore"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class AppConfig:
    """Main application configuration."""
    analytics: AnalyticsConfig
    source: SourceConfig
    logging: LoggingConfig


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    analytics_config = AnalyticsConfig(
        geographic_top_n=int(os.getenv("GEOGRAPHIC_TOP_N", "15")),
        patient_problem_top_n=int(os.getenv("PATIENT_PROBLEM_TOP_N", "10")),
        top_zip_codes=int(os.getenv("TOP_ZIP_CODES", "5")),
    )

    source_config = SourceConfig(
        api_url=os.getenv("RECORDS_API_URL") or None,
        timeout_seconds=float(os.getenv("RECORDS_API_TIMEOUT", "10.0")),
        default_location=os.getenv("DEFAULT_LOCATION", "baltimore"),
    )

    logging_config = LoggingConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )

    _config_instance = AppConfig(
        analytics=analytics_config,
        source=source_config,
        logging=logging_config,
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
