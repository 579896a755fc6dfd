import pytest

from bodyheight.utils.enums.enums import MeasurementSystem
from bodyheight.utils.metric_helpers import (
    convert_meters,
    feet_to_meters,
    meters_to_centimeters,
    meters_to_feet,
    meters_to_feet_inches,
)


def test_meters_to_feet():
    assert meters_to_feet(1.0) == pytest.approx(3.28084)
    assert meters_to_feet(1.6) == pytest.approx(5.249, abs=1e-3)


def test_feet_to_meters_inverts():
    assert feet_to_meters(meters_to_feet(1.83)) == pytest.approx(1.83)


def test_meters_to_centimeters():
    assert meters_to_centimeters(1.75) == pytest.approx(175.0)


def test_feet_inches_split():
    feet, inches = meters_to_feet_inches(1.8)
    assert feet == 5
    assert inches == pytest.approx(10.866, abs=1e-2)


def test_feet_inches_rejects_sentinel():
    with pytest.raises(ValueError):
        meters_to_feet_inches(-1.0)


def test_convert_meters():
    assert convert_meters(2.0, MeasurementSystem.meters) == 2.0
    assert convert_meters(2.0, MeasurementSystem.imperial) == pytest.approx(6.56168)
    assert convert_meters(2.0, "imperial") == pytest.approx(6.56168)
