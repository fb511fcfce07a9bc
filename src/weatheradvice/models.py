# immutable value objects shared by the resolver, fetcher, orchestrator and view

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from .advice import Advice


@dataclass(frozen=True)
class Coordinates:
    # one geocoding match, produced by the resolver and consumed once by the fetcher
    latitude: float
    longitude: float
    name: str
    country: Optional[str] = None

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name


@dataclass(frozen=True)
class WeatherSnapshot:
    # None means the provider sent no value, which is not the same as zero
    temperature_c: Optional[float]
    humidity_pct: Optional[float]
    precipitation_mm: Optional[float]
    rain_chance_pct: float


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class LookupSuccess:
    coordinates: Coordinates
    snapshot: WeatherSnapshot
    advice: Optional[Advice]  # None exactly when the temperature is unknown

    @property
    def display_name(self) -> str:
        return self.coordinates.display_name


@dataclass(frozen=True)
class LookupFailure:
    kind: ErrorKind


LookupResult = Union[LookupSuccess, LookupFailure]
