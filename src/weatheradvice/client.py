# OOP boundary for external i/o
# all http, urls and response-shape checks live here, so the rest of the code stays pure
# one thread-local session per ThreadPoolExecutor worker

from __future__ import annotations
import logging
import threading
from typing import Any, Dict, List
import requests
from . import config

log = logging.getLogger(__name__)


class WeatherAPIError(RuntimeError):
    # base error for this layer, carries a human readable message for the logs
    pass


class TransportError(WeatherAPIError):
    # non-success status, network failure or a payload we cannot read
    pass


class NotFoundError(WeatherAPIError):
    # geocoding answered fine but had no match for the query
    pass


class OpenMeteoClient:
    # provider details (urls, params, timeout, headers) are encapsulated here
    # no retry policy on purpose: a failed call is reported right away

    def __init__(
        self,
        geocoding_url: str | None = None,
        forecast_url: str | None = None,
        timeout: float | None = None,
        user_agent: str = "weather-advice/0.1",
    ):
        self.geocoding_url = geocoding_url or config.GEOCODING_URL
        self.forecast_url = forecast_url or config.FORECAST_URL
        self.timeout = config.HTTP_TIMEOUT if timeout is None else timeout
        self.user_agent = user_agent

        # each worker thread lazily obtains its own session through _session()
        self._local = threading.local()

    def _build_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update({"User-Agent": self.user_agent})
        return s

    def _session(self) -> requests.Session:
        sess = getattr(self._local, "session", None)
        if sess is None:
            sess = self._build_session()
            self._local.session = sess
        return sess

    def _get_json(self, url: str, params: Dict[str, Any], what: str) -> Dict[str, Any]:
        try:
            resp = self._session().get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Request error for {what}: {exc}") from exc

        if resp.status_code >= 400:
            # a short body snippet speeds up triage
            snippet = (resp.text or "")[:300]
            raise TransportError(f"HTTP {resp.status_code} for {what}. Body: {snippet}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise TransportError(f"Invalid JSON for {what}: {exc}") from exc

        if not isinstance(data, dict):
            raise TransportError(f"Unexpected API shape for {what}: top level is not an object")
        log.debug("GET %s ok (%s)", url, what)
        return data

    def search_city(self, name: str, count: int = 1) -> List[Dict[str, Any]]:
        # returns raw ranked matches, best first; raises NotFoundError when there are none
        params = {"count": count, "language": "en", "name": name}
        data = self._get_json(self.geocoding_url, params, f"city {name!r}")
        results = data.get("results") or []
        if not isinstance(results, list):
            raise TransportError("Unexpected API shape: results is not a list")
        if not results:
            raise NotFoundError(f"No geocoding match for {name!r}")
        return results

    def get_forecast(self, latitude: float, longitude: float) -> Dict[str, Any]:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": "temperature_2m,relative_humidity_2m,precipitation",
            "daily": "precipitation_probability_max",
            "timezone": "auto",
        }
        return self._get_json(self.forecast_url, params, f"forecast at {latitude},{longitude}")
