# re-exports: 다른 모듈에서 짧게 import 하도록

from .joint_types import (
    JointType, JOINT_COUNT,
    TORSO_CHAIN, UPPER_BODY_CHAIN, LEFT_LEG, RIGHT_LEG, HEIGHT_JOINTS,
)

from .model_params import (
    HEAD_DIVERGENCE,
    METERS_TO_FEET,
    INCHES_PER_FOOT,
    CENTIMETERS_PER_METER,
    NO_BODY_SENTINEL,
    NOT_TRACKED_SENTINEL,
    DEFAULT_MAX_BODY_EXTENT,
)
