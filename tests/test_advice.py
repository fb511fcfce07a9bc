# the advisory rule is pure, so these run without any fixtures

import pytest
from weatheradvice.advice import MESSAGES, Advice, advise


def test_rain_is_checked_before_temperature():
    # a warm day that would otherwise be "pleasant"
    assert advise(30, 80) is Advice.UMBRELLA
    assert advise(40, 70) is Advice.UMBRELLA
    assert advise(30, 69.9) is Advice.PLEASANT


@pytest.mark.parametrize(
    "temp, expected",
    [
        (34, Advice.SEVERE_HEAT),
        (33.9, Advice.PLEASANT),
        (24, Advice.PLEASANT),
        (23.9, Advice.MILD_COLD),
        (16, Advice.MILD_COLD),
        (15.9, Advice.COLD_WIND),
        (-12, Advice.COLD_WIND),
    ],
)
def test_temperature_boundaries(temp, expected):
    assert advise(temp, 0) is expected


def test_every_advice_has_text_in_each_language():
    for language, table in MESSAGES.items():
        assert set(table) == set(Advice), language


def test_text_defaults_to_hindi():
    assert Advice.UMBRELLA.text() == MESSAGES["hi"][Advice.UMBRELLA]
    assert Advice.COLD_WIND.text("en").startswith("❄️")
    # unknown language falls back instead of raising
    assert Advice.PLEASANT.text("fr") == MESSAGES["hi"][Advice.PLEASANT]
