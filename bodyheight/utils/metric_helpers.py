from __future__ import annotations
from typing import Tuple

from bodyheight.constants import CENTIMETERS_PER_METER, INCHES_PER_FOOT, METERS_TO_FEET
from bodyheight.utils.enums.enums import MeasurementSystem


def meters_to_feet(meters: float) -> float:
    return meters * METERS_TO_FEET


def feet_to_meters(feet: float) -> float:
    return feet / METERS_TO_FEET


def meters_to_centimeters(meters: float) -> float:
    return meters * CENTIMETERS_PER_METER


def meters_to_feet_inches(meters: float) -> Tuple[int, float]:
    """
    표시용: 1.80m → (5, 10.87)
    음수(sentinel)는 변환하지 않는다.
    """
    if meters < 0:
        raise ValueError(f"cannot split a negative length: {meters}")
    total_feet = meters_to_feet(meters)
    feet = int(total_feet)
    inches = (total_feet - feet) * INCHES_PER_FOOT
    # 반올림 오차로 12인치가 되는 경우 보정
    if inches >= INCHES_PER_FOOT - 1e-9:
        feet += 1
        inches = 0.0
    return feet, inches


def convert_meters(value: float, measurement_system: MeasurementSystem) -> float:
    """meters 값을 measurement_system 단위로 변환"""
    if MeasurementSystem(measurement_system) == MeasurementSystem.imperial:
        return meters_to_feet(value)
    return value
