from enum import IntEnum


# Kinect v2 body joint indices (25개)
class JointType(IntEnum):
    SpineBase = 0
    SpineMid = 1
    Neck = 2
    Head = 3
    ShoulderLeft = 4
    ElbowLeft = 5
    WristLeft = 6
    HandLeft = 7
    ShoulderRight = 8
    ElbowRight = 9
    WristRight = 10
    HandRight = 11
    HipLeft = 12
    KneeLeft = 13
    AnkleLeft = 14
    FootLeft = 15
    HipRight = 16
    KneeRight = 17
    AnkleRight = 18
    FootRight = 19
    SpineShoulder = 20
    HandTipLeft = 21
    ThumbLeft = 22
    HandTipRight = 23
    ThumbRight = 24


JOINT_COUNT = len(JointType)

# Chains for segment lengths (순서 중요)
# 키 계산용 상체: head → neck → spine shoulder → spine base(waist)
TORSO_CHAIN = (JointType.Head, JointType.Neck, JointType.SpineShoulder, JointType.SpineBase)
# 앉은 자세용 상체: neck 대신 spine mid
UPPER_BODY_CHAIN = (JointType.Head, JointType.SpineMid, JointType.SpineShoulder, JointType.SpineBase)

LEFT_LEG = (JointType.HipLeft, JointType.KneeLeft, JointType.AnkleLeft, JointType.FootLeft)
RIGHT_LEG = (JointType.HipRight, JointType.KneeRight, JointType.AnkleRight, JointType.FootRight)

# Height() 가 읽는 관절 10+2개
HEIGHT_JOINTS = TORSO_CHAIN + LEFT_LEG + RIGHT_LEG
