# 머리 관절 ~ 정수리 보정값 (m), 경험적 상수
HEAD_DIVERGENCE = 0.1

# 단위 변환
METERS_TO_FEET = 3.28084
INCHES_PER_FOOT = 12
CENTIMETERS_PER_METER = 100.0

# Legacy Height() sentinel 값 (키는 항상 >= 0 이므로 음수 예약)
NO_BODY_SENTINEL = -1.0
NOT_TRACKED_SENTINEL = -2.0

# ScaleTo 기본 body-space 경계 (±1.0)
DEFAULT_MAX_BODY_EXTENT = 1.0
