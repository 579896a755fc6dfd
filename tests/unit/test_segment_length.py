import math

import pytest

from bodyheight.constants import JointType
from bodyheight.domain.segment.length import chain_length, count_tracked_joints, segment_length
from bodyheight.utils.enums.enums import TrackingState
from tests.test_helpers import make_joint, make_line


def test_segment_length_3d():
    a = make_joint(JointType.Head, 0.0, 0.0, 0.0)
    b = make_joint(JointType.Neck, 1.0, 2.0, 2.0)
    assert segment_length(a, b) == pytest.approx(3.0)
    assert segment_length(b, a) == pytest.approx(3.0)


def test_segment_length_same_point_is_zero():
    a = make_joint(JointType.Head, 0.3, -0.2, 1.7)
    assert segment_length(a, a) == 0.0


def test_chain_length_is_sum_of_pairs():
    joints = make_line([(0, 0, 0), (3, 4, 0), (3, 4, 12), (0, 0, 12)])
    expected = sum(segment_length(joints[i], joints[i + 1]) for i in range(len(joints) - 1))

    assert chain_length(joints) == pytest.approx(expected)
    assert chain_length(joints) == pytest.approx(5 + 12 + 5)


def test_chain_length_two_joints_equals_segment():
    joints = make_line([(0, 0, 0), (1, 1, 1)])
    assert chain_length(joints) == pytest.approx(math.sqrt(3))


def test_chain_length_degenerate_inputs():
    """0개 / 1개 관절 → 0.0"""
    assert chain_length([]) == 0.0
    assert chain_length(make_line([(1, 2, 3)])) == 0.0


def test_chain_length_accepts_tuple():
    joints = tuple(make_line([(0, 0, 0), (0, 2, 0)]))
    assert chain_length(joints) == pytest.approx(2.0)


def test_count_tracked_joints():
    joints = [
        make_joint(JointType.HipLeft, state=TrackingState.tracked),
        make_joint(JointType.KneeLeft, state=TrackingState.inferred),
        make_joint(JointType.AnkleLeft, state=TrackingState.not_tracked),
        make_joint(JointType.FootLeft, state=TrackingState.tracked),
    ]
    assert count_tracked_joints(joints) == 2
    assert count_tracked_joints([]) == 0
