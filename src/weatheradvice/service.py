# orchestration and business rules
# pure parse functions turn provider payloads into value objects,
# WeatherLookup chains geocode -> forecast -> advice and classifies failures

from __future__ import annotations
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Sequence
from .advice import advise
from .client import NotFoundError, OpenMeteoClient, TransportError, WeatherAPIError
from .models import (
    Coordinates,
    ErrorKind,
    LookupFailure,
    LookupResult,
    LookupSuccess,
    WeatherSnapshot,
)

log = logging.getLogger(__name__)


class ValidationError(ValueError):
    pass


# a disambiguation strategy picks one match out of the provider's ranked list
Strategy = Callable[[Sequence[Coordinates]], Coordinates]
CANDIDATE_COUNT = 10


def first_match(candidates: Sequence[Coordinates]) -> Coordinates:
    # the provider's top-ranked candidate is trusted as is
    return candidates[0]


def clean_city(city_text: str) -> str:
    city = (city_text or "").strip()
    if not city:
        raise ValidationError("city name is blank")
    return city


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def parse_coordinates(result: Dict[str, Any]) -> Coordinates:
    # geocoding shape: results[i] = {latitude, longitude, name, country?}
    try:
        if result["name"] is None:
            raise TransportError("Unexpected geocoding result shape: null name")
        return Coordinates(
            latitude=float(result["latitude"]),
            longitude=float(result["longitude"]),
            name=str(result["name"]),
            country=result.get("country") or None,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise TransportError(f"Unexpected geocoding result shape: {exc}") from exc


def rain_chance(current: Dict[str, Any], daily: Dict[str, Any]) -> float:
    # daily max of the first day, then the instantaneous field, then 0
    # anything but a non-empty list counts as no daily value
    daily_max = daily.get("precipitation_probability_max")
    if isinstance(daily_max, list) and daily_max and daily_max[0] is not None:
        return float(daily_max[0])
    if current.get("precipitation_probability") is not None:
        return float(current["precipitation_probability"])
    return 0.0


def parse_snapshot(data: Dict[str, Any]) -> WeatherSnapshot:
    # forecast shape: current.{temperature_2m, relative_humidity_2m, precipitation}
    # and daily.precipitation_probability_max[day]
    current = data.get("current") or {}
    daily = data.get("daily") or {}
    try:
        return WeatherSnapshot(
            temperature_c=_optional_float(current.get("temperature_2m")),
            humidity_pct=_optional_float(current.get("relative_humidity_2m")),
            precipitation_mm=_optional_float(current.get("precipitation")),
            rain_chance_pct=rain_chance(current, daily),
        )
    except (AttributeError, KeyError, OverflowError, TypeError, ValueError) as exc:
        raise TransportError(f"Unexpected forecast shape: {exc}") from exc


def candidates(client: OpenMeteoClient, city: str, count: int = CANDIDATE_COUNT) -> List[Coordinates]:
    # for callers that let the user choose among several matches
    return [parse_coordinates(r) for r in client.search_city(clean_city(city), count=count)]


def resolve(client: OpenMeteoClient, city: str, strategy: Strategy = first_match) -> Coordinates:
    # first_match only ever needs the top hit; other strategies get the full candidate list
    count = 1 if strategy is first_match else CANDIDATE_COUNT
    results = client.search_city(city, count=count)
    return strategy([parse_coordinates(r) for r in results])


def fetch(client: OpenMeteoClient, coords: Coordinates) -> WeatherSnapshot:
    return parse_snapshot(client.get_forecast(coords.latitude, coords.longitude))


class WeatherLookup:
    # holds no per-lookup state, so concurrent lookups never interfere

    def __init__(
        self,
        client: OpenMeteoClient | None = None,
        strategy: Strategy = first_match,
        max_workers: int = 4,
    ):
        self.client = client or OpenMeteoClient()
        self.strategy = strategy
        self._pool = ThreadPoolExecutor(max_workers=max_workers)

    def lookup(self, city_text: str) -> LookupResult:
        try:
            city = clean_city(city_text)
        except ValidationError:
            return LookupFailure(ErrorKind.VALIDATION)

        try:
            coords = resolve(self.client, city, self.strategy)
        except NotFoundError as exc:
            log.info("%s", exc)
            return LookupFailure(ErrorKind.NOT_FOUND)
        except WeatherAPIError as exc:
            log.warning("geocoding failed: %s", exc)
            return LookupFailure(ErrorKind.TRANSPORT)

        # fetch needs the resolved coordinates, so the two hops never overlap
        try:
            snapshot = fetch(self.client, coords)
        except WeatherAPIError as exc:
            log.warning("forecast failed for %s: %s", coords.display_name, exc)
            return LookupFailure(ErrorKind.TRANSPORT)

        advice = None
        if snapshot.temperature_c is not None:
            advice = advise(snapshot.temperature_c, snapshot.rain_chance_pct)
        log.info("lookup %r -> %s", city, coords.display_name)
        return LookupSuccess(coordinates=coords, snapshot=snapshot, advice=advice)

    def submit(self, city_text: str) -> "Future[LookupResult]":
        # run lookup on a worker thread so the caller is never blocked
        return self._pool.submit(self.lookup, city_text)

    def close(self) -> None:
        self._pool.shutdown(wait=True)

    def __enter__(self) -> "WeatherLookup":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
