from __future__ import annotations

import importlib
import logging
import os
from typing import Optional, Type

from dotenv import load_dotenv

from hotelres.base_config import HotelResConfig
from hotelres.exceptions import ConfigurationError
from hotelres.services.payment_service import DEFAULT_DELAY_SECONDS, DEFAULT_SUCCESS_RATE

load_dotenv()

DEFAULT_CONFIG_CLASS = "hotelres.config.EnvironmentHotelResConfig"
CONFIG_ENV_KEY = "HOTELRES_CONFIG"
DEFAULT_DATABASE_URL = "json:///hotel.json"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def _import_config_class(path: str) -> Type[HotelResConfig]:
    try:
        module_path, class_name = path.rsplit(".", 1)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid config path '{path}'") from exc

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(f"Could not import module '{module_path}'") from exc

    try:
        cls = getattr(module, class_name)
    except AttributeError as exc:
        raise ConfigurationError(f"Config class '{class_name}' not found in '{module_path}'") from exc

    if not isinstance(cls, type) or not issubclass(cls, HotelResConfig):
        raise ConfigurationError(f"{path} is not a subclass of HotelResConfig")

    return cls


class EnvironmentHotelResConfig(HotelResConfig):
    """Default configuration that reads from environment variables."""

    def __init__(self) -> None:
        self._env = os.environ

    def _get_float(self, key: str, default: float) -> float:
        raw = self._env.get(key)
        if raw is None or raw == "":
            return default
        try:
            return float(raw)
        except ValueError:
            logger.warning(f"Invalid value for {key}: {raw!r}, using {default}")
            return default

    def get_database_url(self) -> str:
        return self._env.get("HOTELRES_DATABASE_URL", DEFAULT_DATABASE_URL)

    def get_payment_success_rate(self) -> float:
        return self._get_float("HOTELRES_PAYMENT_SUCCESS_RATE", DEFAULT_SUCCESS_RATE)

    def get_payment_delay_seconds(self) -> float:
        return self._get_float("HOTELRES_PAYMENT_DELAY", DEFAULT_DELAY_SECONDS)

    def get_log_level(self) -> str:
        raw = self._env.get("HOTELRES_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if raw not in LOG_LEVELS:
            logger.warning(f"Invalid value for HOTELRES_LOG_LEVEL: {raw!r}, using {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return raw


_CONFIG: Optional[HotelResConfig] = None


def get_config() -> HotelResConfig:
    global _CONFIG
    if _CONFIG is None:
        class_path = os.getenv(CONFIG_ENV_KEY, DEFAULT_CONFIG_CLASS)
        cls = _import_config_class(class_path)
        _CONFIG = cls()
    return _CONFIG


def set_config(config: Optional[HotelResConfig]) -> None:
    global _CONFIG
    _CONFIG = config
