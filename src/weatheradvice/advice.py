# the five advisories and the threshold rule that picks one
# rules are evaluated in order and the first match wins, so rain beats any temperature

from __future__ import annotations
from enum import Enum

UMBRELLA_RAIN_PCT = 70.0
SEVERE_HEAT_C = 34.0
PLEASANT_C = 24.0
MILD_COLD_C = 16.0


class Advice(str, Enum):
    UMBRELLA = "umbrella"
    SEVERE_HEAT = "severe_heat"
    PLEASANT = "pleasant"
    MILD_COLD = "mild_cold"
    COLD_WIND = "cold_wind"

    def text(self, language: str = "hi") -> str:
        # unknown languages fall back to Hindi, the widget's primary audience
        return MESSAGES.get(language, MESSAGES["hi"])[self]


MESSAGES = {
    "hi": {
        Advice.UMBRELLA: "🌧️ कृपया छाता साथ रखें, बारिश की अच्छी संभावना है।",
        Advice.SEVERE_HEAT: "🔥 तेज़ गर्मी है, हल्के कपड़े पहनें और पर्याप्त जल पीते रहें।",
        Advice.PLEASANT: "☀️ मौसम सुहावना है, खुले में घूमने का आनंद लें।",
        Advice.MILD_COLD: "🍂 हल्की ठंड है, शायद हल्की जैकेट काम आएगी।",
        Advice.COLD_WIND: "❄️ ठंडी हवा चल रही है, गरम कपड़े पहनना बेहतर रहेगा।",
    },
    "en": {
        Advice.UMBRELLA: "🌧️ Please carry an umbrella, rain is quite likely.",
        Advice.SEVERE_HEAT: "🔥 Severe heat, wear light clothes and keep drinking water.",
        Advice.PLEASANT: "☀️ Pleasant weather, enjoy some time outdoors.",
        Advice.MILD_COLD: "🍂 Mildly cold, a light jacket may help.",
        Advice.COLD_WIND: "❄️ A cold wind is blowing, warm clothes are a better idea.",
    },
}


def advise(temperature_c: float, rain_chance_pct: float) -> Advice:
    if rain_chance_pct >= UMBRELLA_RAIN_PCT:
        return Advice.UMBRELLA
    if temperature_c >= SEVERE_HEAT_C:
        return Advice.SEVERE_HEAT
    if temperature_c >= PLEASANT_C:
        return Advice.PLEASANT
    if temperature_c >= MILD_COLD_C:
        return Advice.MILD_COLD
    return Advice.COLD_WIND
