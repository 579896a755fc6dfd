"""
세그먼트 길이 / 트래킹 관절 수 Domain Logic
관절 위치 → 거리(m)
"""
from typing import Sequence

import numpy as np

from bodyheight.schemas.joint_dto import Joint
from bodyheight.utils.enums.enums import TrackingState


def _position(joint: Joint) -> np.ndarray:
    p = joint.position
    return np.array([p.x, p.y, p.z], dtype=float)


def segment_length(p1: Joint, p2: Joint) -> float:
    """두 관절 사이 3D 유클리드 거리 (m)"""
    return float(np.linalg.norm(_position(p1) - _position(p2)))


def chain_length(joints: Sequence[Joint]) -> float:
    """
    연속된 관절 사이 거리의 합 (m)

    Args:
        joints: 순서 있는 관절 시퀀스 (2개 이상이어야 0이 아닌 값)

    Returns:
        모든 세그먼트 길이의 합. 0개/1개면 0.0
    """
    joints = list(joints)
    length = 0.0
    for index in range(len(joints) - 1):
        length += segment_length(joints[index], joints[index + 1])
    return length


def count_tracked_joints(joints: Sequence[Joint]) -> int:
    """tracked 상태인 관절 수 (inferred / not_tracked 제외)"""
    return sum(1 for joint in joints if joint.tracking_state == TrackingState.tracked)
