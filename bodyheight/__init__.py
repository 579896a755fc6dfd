"""
bodyheight - 센서 스켈레톤 관절로 키 추정
"""

__version__ = "0.1.0"

from bodyheight.constants import JointType
from bodyheight.schemas.joint_dto import Body, CameraSpacePoint, Joint
from bodyheight.schemas.height_dto import HeightResult
from bodyheight.utils.enums.enums import HeightStatus, MeasurementSystem, SideEnum, TrackingState
from bodyheight.domain.segment.length import chain_length, count_tracked_joints, segment_length
from bodyheight.domain.height.calculator import (
    HeightCalculator,
    estimate_height,
    height,
    upper_height,
)
from bodyheight.domain.display.scaler import scale, scale_to

__all__ = [
    "JointType",
    "TrackingState",
    "MeasurementSystem",
    "HeightStatus",
    "SideEnum",
    "CameraSpacePoint",
    "Joint",
    "Body",
    "HeightResult",
    "HeightCalculator",
    "estimate_height",
    "height",
    "upper_height",
    "segment_length",
    "chain_length",
    "count_tracked_joints",
    "scale",
    "scale_to",
    "__version__",
]
