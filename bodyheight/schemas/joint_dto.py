"""
관절/바디 DTO
센서(외부)가 프레임마다 채워서 넘겨주는 입력 구조
"""
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bodyheight.common.exceptions import MissingJointError
from bodyheight.constants import JointType
from bodyheight.utils.enums.enums import TrackingState


class CameraSpacePoint(BaseModel):
    """카메라 좌표계 3D 위치 (m)"""
    model_config = ConfigDict(frozen=True)

    x: float = Field(0.0, description="X (m), 오른쪽이 +")
    y: float = Field(0.0, description="Y (m), 위쪽이 +")
    z: float = Field(0.0, description="Z (m), 센서로부터의 깊이")

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


class Joint(BaseModel):
    """관절 1개 (위치 + 트래킹 상태)"""
    model_config = ConfigDict(frozen=True)

    joint_type: JointType
    position: CameraSpacePoint = Field(default_factory=CameraSpacePoint)
    tracking_state: TrackingState = TrackingState.tracked

    @property
    def is_tracked(self) -> bool:
        return self.tracking_state == TrackingState.tracked


class Body(BaseModel):
    """한 프레임, 한 사람의 관절 집합"""
    is_tracked: bool = Field(True, description="바디 전체 트래킹 여부")
    tracking_id: Optional[int] = Field(None, description="센서가 부여한 바디 ID")
    joints: Dict[JointType, Joint] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_joint_keys(self):
        for key, joint in self.joints.items():
            if joint.joint_type != key:
                raise ValueError(
                    f"joint stored under {key.name} has type {joint.joint_type.name}"
                )
        return self

    @classmethod
    def from_joints(
        cls,
        joints: Iterable[Joint],
        is_tracked: bool = True,
        tracking_id: Optional[int] = None,
    ) -> "Body":
        return cls(
            is_tracked=is_tracked,
            tracking_id=tracking_id,
            joints={j.joint_type: j for j in joints},
        )

    def get_joint(self, joint_type: JointType) -> Joint:
        """관절 조회. 없으면 MissingJointError (0 좌표로 대체하지 않는다)"""
        try:
            return self.joints[JointType(joint_type)]
        except KeyError:
            raise MissingJointError(JointType(joint_type), self.tracking_id) from None

    def __getitem__(self, joint_type: JointType) -> Joint:
        return self.get_joint(joint_type)

    def has_joints(self, joint_types: Iterable[JointType]) -> bool:
        return all(JointType(t) in self.joints for t in joint_types)
