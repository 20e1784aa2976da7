import pytest

from awsclients import config


class TestParseEnv:
    @pytest.mark.parametrize(
        "value, expected", [("1", True), ("true", True), ("0", False), ("", False)]
    )
    def test_is_env_true(self, monkeypatch, value, expected):
        monkeypatch.setenv("TEST_FLAG", value)
        assert config.is_env_true("TEST_FLAG") == expected

    @pytest.mark.parametrize(
        "value, expected", [("1", True), ("", True), ("0", False), ("false", False)]
    )
    def test_is_env_not_false(self, monkeypatch, value, expected):
        monkeypatch.setenv("TEST_FLAG", value)
        assert config.is_env_not_false("TEST_FLAG") == expected

    @pytest.mark.parametrize(
        "value, expected", [("true", True), ("0", False), ("", None), ("maybe", None)]
    )
    def test_parse_boolean_env(self, monkeypatch, value, expected):
        monkeypatch.setenv("TEST_FLAG", value)
        assert config.parse_boolean_env("TEST_FLAG") is expected

    def test_parse_number_env(self, monkeypatch):
        monkeypatch.setenv("TEST_NUMBER", "5")
        assert config.parse_number_env("TEST_NUMBER", 3, int) == 5

        monkeypatch.setenv("TEST_NUMBER", "2.5")
        assert config.parse_number_env("TEST_NUMBER", 1.0) == 2.5

        monkeypatch.setenv("TEST_NUMBER", "")
        assert config.parse_number_env("TEST_NUMBER", 3, int) == 3

    def test_parse_invalid_number_env(self, monkeypatch, caplog):
        monkeypatch.setenv("TEST_NUMBER", "lots")

        assert config.parse_number_env("TEST_NUMBER", 3, int) == 3
        assert "Ignoring invalid value 'lots' of TEST_NUMBER" in caplog.text


class TestLogType:
    @pytest.mark.parametrize("value", ["trace", "debug", "WARN", " info "])
    def test_valid_log_types(self, monkeypatch, value):
        monkeypatch.setenv("TEST_LOG", value)
        assert config.eval_log_type("TEST_LOG") == value.strip().lower()

    def test_invalid_log_type(self, monkeypatch):
        monkeypatch.setenv("TEST_LOG", "verbose")
        assert config.eval_log_type("TEST_LOG") is False

    def test_trace_logging(self, monkeypatch):
        monkeypatch.setattr(config, "AWSCLIENTS_LOG", "trace")
        assert config.is_trace_logging_enabled()

        monkeypatch.setattr(config, "AWSCLIENTS_LOG", "debug")
        assert not config.is_trace_logging_enabled()

        monkeypatch.setattr(config, "AWSCLIENTS_LOG", False)
        assert not config.is_trace_logging_enabled()
