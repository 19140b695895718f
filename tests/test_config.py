# =============================================================================
# test_config.py - ScanConfig Tests
# =============================================================================

from loxscan.config import ScanConfig


class TestScanConfig:

    def test_defaults(self):
        config = ScanConfig()
        assert config.max_errors == 0
        assert config.log_level == "WARNING"
        assert config.output_format == "text"
        assert config.prompt == "> "

    def test_empty_environment(self):
        assert ScanConfig.from_env({}) == ScanConfig()

    def test_overrides(self):
        config = ScanConfig.from_env({
            "LOXSCAN_MAX_ERRORS": "10",
            "LOXSCAN_LOG_LEVEL": "debug",
            "LOXSCAN_FORMAT": "JSON",
            "LOXSCAN_PROMPT": "lox> ",
        })
        assert config.max_errors == 10
        assert config.log_level == "DEBUG"
        assert config.output_format == "json"
        assert config.prompt == "lox> "

    def test_invalid_values_ignored(self):
        config = ScanConfig.from_env({
            "LOXSCAN_MAX_ERRORS": "lots",
            "LOXSCAN_LOG_LEVEL": "LOUD",
            "LOXSCAN_FORMAT": "xml",
        })
        assert config == ScanConfig()

    def test_negative_max_errors_ignored(self):
        assert ScanConfig.from_env({"LOXSCAN_MAX_ERRORS": "-1"}).max_errors == 0

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("LOXSCAN_FORMAT", "json")
        assert ScanConfig.from_env().output_format == "json"
