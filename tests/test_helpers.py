"""
Test Helper Utilities

재사용 가능한 테스트 헬퍼 함수들을 모아놓은 모듈입니다.
"""
from typing import Dict, Iterable, Optional, Tuple

import numpy as np

from bodyheight.constants import JointType
from bodyheight.schemas.joint_dto import Body, CameraSpacePoint, Joint
from bodyheight.utils.enums.enums import TrackingState


# ========================================
# Joint / Body Generators
# ========================================

# 서 있는 사람 (z=2m). torso=0.6, right leg=0.9, left leg=1.1
STANDING_POSITIONS: Dict[JointType, Tuple[float, float, float]] = {
    JointType.Head: (0.0, 0.0, 2.0),
    JointType.Neck: (0.0, -0.2, 2.0),
    JointType.SpineShoulder: (0.0, -0.4, 2.0),
    JointType.SpineMid: (0.0, -0.5, 2.0),
    JointType.SpineBase: (0.0, -0.6, 2.0),
    JointType.HipRight: (0.1, -0.6, 2.0),
    JointType.KneeRight: (0.1, -1.0, 2.0),
    JointType.AnkleRight: (0.1, -1.4, 2.0),
    JointType.FootRight: (0.1, -1.4, 1.9),
    JointType.HipLeft: (-0.1, -0.6, 2.0),
    JointType.KneeLeft: (-0.1, -1.1, 2.0),
    JointType.AnkleLeft: (-0.1, -1.5, 2.0),
    JointType.FootLeft: (-0.1, -1.5, 1.8),
}

TORSO_LENGTH = 0.6
UPPER_BODY_LENGTH = 0.8  # head→spine mid 0.5 + mid→shoulder 0.1 + shoulder→base 0.2
RIGHT_LEG_LENGTH = 0.9
LEFT_LEG_LENGTH = 1.1


def make_joint(
    joint_type: JointType,
    x: float = 0.0,
    y: float = 0.0,
    z: float = 0.0,
    state: TrackingState = TrackingState.tracked,
) -> Joint:
    """단일 관절 생성"""
    return Joint(
        joint_type=joint_type,
        position=CameraSpacePoint(x=x, y=y, z=z),
        tracking_state=state,
    )


def make_body(
    positions: Optional[Dict[JointType, Tuple[float, float, float]]] = None,
    states: Optional[Dict[JointType, TrackingState]] = None,
    is_tracked: bool = True,
    tracking_id: Optional[int] = 1,
    omit: Iterable[JointType] = (),
) -> Body:
    """
    테스트용 Body 생성

    Args:
        positions: 관절별 좌표 (기본 STANDING_POSITIONS)
        states: 관절별 트래킹 상태 (지정하지 않은 관절은 tracked)
        is_tracked: 바디 트래킹 여부
        omit: 생략할 관절 (부분 검출 재현)
    """
    positions = positions or STANDING_POSITIONS
    states = states or {}
    omit = set(omit)
    joints = [
        make_joint(t, *xyz, state=states.get(t, TrackingState.tracked))
        for t, xyz in positions.items()
        if t not in omit
    ]
    return Body.from_joints(joints, is_tracked=is_tracked, tracking_id=tracking_id)


def make_line(points: Iterable[Tuple[float, float, float]]) -> list:
    """좌표 리스트 → 관절 리스트 (타입은 순서대로 부여)"""
    return [make_joint(JointType(i), *xyz) for i, xyz in enumerate(points)]


# ========================================
# Assertion Helpers
# ========================================

def assert_in_pixel_range(value: float, max_pixel: int):
    """
    픽셀 좌표 범위 검증

    Args:
        value: 변환된 좌표
        max_pixel: width 또는 height
    """
    assert not np.isnan(value), "Pixel value should not be NaN"
    assert 0.0 <= value <= max_pixel, f"Pixel {value} out of range [0, {max_pixel}]"
