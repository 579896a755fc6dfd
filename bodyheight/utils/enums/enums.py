from __future__ import annotations
from enum import Enum, IntEnum


# 센서가 관절마다 부여하는 신뢰도
class TrackingState(IntEnum):
    not_tracked = 0
    inferred = 1
    tracked = 2


# 반환 단위 (기본 meters)
class MeasurementSystem(str, Enum):
    meters = "meters"
    imperial = "imperial"


# 다리 선택 결과
class SideEnum(str, Enum):
    right = "right"
    left = "left"


# Height 계산 결과 상태
class HeightStatus(str, Enum):
    ok = "ok"
    no_body = "no_body"
    not_tracked = "not_tracked"
