# ==============================================
# Tests for Configuration and Logging Setup
# ==============================================

import logging

from care_analytics.config import get_config
from care_analytics.log import setup_logging


class TestConfig:
    def test_defaults(self, clean_config):
        config = get_config()

        assert config.analytics.geographic_top_n == 15
        assert config.analytics.patient_problem_top_n == 10
        assert config.analytics.top_zip_codes == 5
        assert config.source.api_url is None
        assert config.source.default_location == "baltimore"
        assert config.logging.level == "INFO"

    def test_environment_overrides(self, clean_config):
        clean_config.setenv("GEOGRAPHIC_TOP_N", "3")
        clean_config.setenv("RECORDS_API_URL", "https://records.example.invalid")
        clean_config.setenv("RECORDS_API_TIMEOUT", "2.5")
        clean_config.setenv("LOG_LEVEL", "debug")

        config = get_config()

        assert config.analytics.geographic_top_n == 3
        assert config.source.api_url == "https://records.example.invalid"
        assert config.source.timeout_seconds == 2.5
        assert config.logging.level == "DEBUG"

    def test_singleton(self, clean_config):
        assert get_config() is get_config()


class TestLogging:
    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "care.log"
        root_logger = logging.getLogger()
        saved_handlers, saved_level = root_logger.handlers[:], root_logger.level

        try:
            setup_logging("WARNING", str(log_file))
            logging.getLogger("care_analytics.test").warning("hello")
            for handler in root_logger.handlers:
                handler.flush()

            assert root_logger.level == logging.WARNING
            assert "hello" in log_file.read_text()
        finally:
            for handler in root_logger.handlers:
                handler.close()
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)
