from decimal import Decimal

import pytest

from smart_garden.domain.irrigation import apply_rain, base_volume


@pytest.mark.parametrize(
    "humidity, expected",
    [
        ("34", "0.8"),
        ("40", "0.5"),
        ("50", "0.3"),
        ("60", "0"),
        # first match wins at each boundary
        ("35", "0.5"),
        ("45", "0.3"),
        ("55", "0"),
    ],
)
def test_humidity_maps_to_volume(humidity, expected):
    assert base_volume(Decimal(humidity)) == Decimal(expected)


def test_rain_scales_volume():
    assert apply_rain(Decimal("0.8")) == Decimal("0.32")
    assert apply_rain(Decimal("0")) == Decimal("0")
