"""
Tests for configuration loading.
"""
import pytest

from hotelres.adapters import JsonSnapshotAdapter, SQLiteSnapshotAdapter
from hotelres.config import (
    CONFIG_ENV_KEY,
    DEFAULT_DATABASE_URL,
    EnvironmentHotelResConfig,
    get_config,
    set_config,
)
from hotelres.exceptions import ConfigurationError
from hotelres.services.payment_service import RandomPaymentSimulator


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "HOTELRES_DATABASE_URL",
        "HOTELRES_PAYMENT_SUCCESS_RATE",
        "HOTELRES_PAYMENT_DELAY",
        "HOTELRES_LOG_LEVEL",
        CONFIG_ENV_KEY,
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestEnvironmentConfig:

    def test_defaults(self, clean_env):
        config = EnvironmentHotelResConfig()
        assert config.get_database_url() == DEFAULT_DATABASE_URL
        assert config.get_payment_success_rate() == 0.90
        assert config.get_payment_delay_seconds() == 0.5
        assert config.get_log_level() == "INFO"
        assert isinstance(config.create_adapter(), JsonSnapshotAdapter)

    def test_reads_environment(self, clean_env, tmp_path):
        clean_env.setenv("HOTELRES_DATABASE_URL", f"sqlite:///{tmp_path / 'h.db'}")
        clean_env.setenv("HOTELRES_PAYMENT_SUCCESS_RATE", "0.5")
        clean_env.setenv("HOTELRES_PAYMENT_DELAY", "0")
        clean_env.setenv("HOTELRES_LOG_LEVEL", "debug")

        config = EnvironmentHotelResConfig()
        payment = config.create_payment_decider()

        assert isinstance(config.create_adapter(), SQLiteSnapshotAdapter)
        assert isinstance(payment, RandomPaymentSimulator)
        assert payment.success_rate == 0.5
        assert payment.delay_seconds == 0.0
        assert config.get_log_level() == "DEBUG"

    def test_invalid_number_falls_back(self, clean_env, caplog):
        clean_env.setenv("HOTELRES_PAYMENT_DELAY", "soon")
        assert EnvironmentHotelResConfig().get_payment_delay_seconds() == 0.5
        assert "HOTELRES_PAYMENT_DELAY" in caplog.text

    def test_invalid_log_level_falls_back(self, clean_env, caplog):
        clean_env.setenv("HOTELRES_LOG_LEVEL", "verbose")
        assert EnvironmentHotelResConfig().get_log_level() == "INFO"
        assert "HOTELRES_LOG_LEVEL" in caplog.text

    def test_out_of_range_rate_is_a_configuration_error(self, clean_env):
        clean_env.setenv("HOTELRES_PAYMENT_SUCCESS_RATE", "2")
        with pytest.raises(ConfigurationError):
            EnvironmentHotelResConfig().create_payment_decider()


class TestGetConfig:

    def test_default_class(self, clean_env):
        set_config(None)
        assert isinstance(get_config(), EnvironmentHotelResConfig)
        assert get_config() is get_config()

    @pytest.mark.parametrize("path", [
        "nodots",
        "hotelres.no_such_module.Config",
        "hotelres.config.NoSuchConfig",
        "hotelres.hotel.Hotel",
    ])
    def test_bad_config_paths(self, clean_env, path):
        clean_env.setenv(CONFIG_ENV_KEY, path)
        set_config(None)
        with pytest.raises(ConfigurationError):
            get_config()
