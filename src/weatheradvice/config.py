# settings loaded once from the environment (or a local .env) plus logging setup

from __future__ import annotations
import logging
import os
from dotenv import load_dotenv

load_dotenv()  # real deployments inject these through the environment

GEOCODING_URL = os.getenv("OPEN_METEO_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.getenv("OPEN_METEO_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
HTTP_TIMEOUT = float(os.getenv("WEATHER_HTTP_TIMEOUT", "10"))
LANGUAGE = os.getenv("WEATHER_LANGUAGE", "hi")
LOG_LEVEL = os.getenv("WEATHER_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=(level or LOG_LEVEL).upper())
