# view-side state for a single weather widget
# the core stays stateless: loading flag, error text and the last result all live here

from __future__ import annotations
import logging
import math
import threading
from concurrent.futures import Future
from typing import Optional
from . import config
from .models import ErrorKind, LookupFailure, LookupResult, LookupSuccess
from .service import WeatherLookup

log = logging.getLogger(__name__)

UNKNOWN = "--"

ERROR_MESSAGES = {
    "hi": {
        ErrorKind.VALIDATION: "कृपया शहर का नाम दर्ज करें।",
        ErrorKind.NOT_FOUND: "क्षमा करें, शहर नहीं मिला। कृपया सही नाम दर्ज करें।",
        ErrorKind.TRANSPORT: "मौसम जानकारी प्राप्त करने में समस्या हुई। पुनः प्रयास करें।",
    },
    "en": {
        ErrorKind.VALIDATION: "Please enter a city name.",
        ErrorKind.NOT_FOUND: "Sorry, city not found. Please check the spelling.",
        ErrorKind.TRANSPORT: "Could not fetch the weather. Please try again.",
    },
}

STATUS_MESSAGES = {
    "hi": {"loading": "मौसम जानकारी ला रहे हैं...", "idle": "कृपया शहर चुनें और मौसम देखें।"},
    "en": {"loading": "Fetching the weather...", "idle": "Pick a city to see the weather."},
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_temperature(value: Optional[float]) -> str:
    return UNKNOWN if value is None else f"{value:.1f}°C"


def format_percent(value: Optional[float]) -> str:
    return UNKNOWN if value is None else f"{_round_half_up(value)}%"


class WeatherPanel:
    # display state for one widget backed by a WeatherLookup
    # every search bumps a generation counter and results for older generations are dropped,
    # so a slow lookup for a previous city never overwrites the answer for the current one

    def __init__(self, lookup: WeatherLookup | None = None, language: str | None = None):
        # a lookup we build ourselves is ours to close
        self._owns_lookup = lookup is None
        self.lookup = lookup or WeatherLookup()
        self.language = language or config.LANGUAGE
        self.loading = False
        self.error_kind: Optional[ErrorKind] = None
        self.result: Optional[LookupSuccess] = None
        self._generation = 0
        self._lock = threading.Lock()

    def _start(self) -> int:
        with self._lock:
            self._generation += 1
            self.loading = True
            self.error_kind = None
            return self._generation

    def apply(self, generation: int, outcome: LookupResult) -> bool:
        # returns False when the outcome was stale and dropped
        with self._lock:
            if generation != self._generation:
                log.debug("dropping stale result for generation %d", generation)
                return False
            self.loading = False
            if isinstance(outcome, LookupFailure):
                self.error_kind = outcome.kind
                self.result = None
            else:
                self.error_kind = None
                self.result = outcome
            return True

    def search(self, city_text: str) -> LookupResult:
        generation = self._start()
        outcome = self.lookup.lookup(city_text)
        self.apply(generation, outcome)
        return outcome

    def search_in_background(self, city_text: str) -> "Future[LookupResult]":
        generation = self._start()
        future = self.lookup.submit(city_text)
        future.add_done_callback(lambda f: self._finish(generation, f))
        return future

    def _finish(self, generation: int, future: "Future[LookupResult]") -> None:
        exc = None if future.cancelled() else future.exception()
        if future.cancelled() or exc is not None:
            # an unexpected crash still ends the loading state as a generic failure
            log.error("lookup crashed: %r", exc)
            self.apply(generation, LookupFailure(ErrorKind.TRANSPORT))
            return
        self.apply(generation, future.result())

    def close(self) -> None:
        if self._owns_lookup:
            self.lookup.close()

    @property
    def error_text(self) -> str:
        if self.error_kind is None:
            return ""
        return ERROR_MESSAGES.get(self.language, ERROR_MESSAGES["hi"])[self.error_kind]

    @property
    def status_text(self) -> str:
        messages = STATUS_MESSAGES.get(self.language, STATUS_MESSAGES["hi"])
        if self.error_kind is not None:
            return ""
        if self.loading:
            return messages["loading"]
        if self.result is None:
            return messages["idle"]
        return ""

    def render(self) -> dict:
        # the fields a page template needs, already formatted
        if self.result is None:
            return {}
        snap = self.result.snapshot
        advice = self.result.advice
        return {
            "display_name": self.result.display_name,
            "temperature": format_temperature(snap.temperature_c),
            "humidity": format_percent(snap.humidity_pct),
            "precipitation": UNKNOWN if snap.precipitation_mm is None else f"{snap.precipitation_mm:.1f} mm",
            "rain_chance": format_percent(snap.rain_chance_pct),
            "advice": advice.text(self.language) if advice is not None else "",
        }
