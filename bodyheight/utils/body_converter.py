# body_converter.py
from typing import Any, Dict, Optional, Union

import numpy as np

from bodyheight.constants import JOINT_COUNT, JointType
from bodyheight.schemas.joint_dto import Body, CameraSpacePoint, Joint
from bodyheight.utils.enums.enums import TrackingState


class BodyConverter:
    """
    센서 raw 배열 ↔ Body
    배열 형식: (25, 4) = [x, y, z, tracking_state], 행 인덱스 = JointType
    """

    def __init__(self, joints: Union[np.ndarray, list]):
        data = np.asarray(joints, dtype=float)
        if data.ndim != 2 or data.shape[1] != 4 or data.shape[0] > JOINT_COUNT:
            raise ValueError(
                f"joints shape expected (N<={JOINT_COUNT}, 4), got {data.shape}"
            )
        self._data = data

    def to_numpy(self) -> np.ndarray:
        return self._data

    def to_body(self, is_tracked: bool = True, tracking_id: Optional[int] = None) -> Body:
        joints = []
        for index, (x, y, z, state) in enumerate(self._data):
            joints.append(
                Joint(
                    joint_type=JointType(index),
                    position=CameraSpacePoint(x=x, y=y, z=z),
                    tracking_state=TrackingState(int(state)),
                )
            )
        return Body.from_joints(joints, is_tracked=is_tracked, tracking_id=tracking_id)

    @classmethod
    def from_body(cls, body: Body) -> "BodyConverter":
        """Body → 배열. 없는 관절은 (0, 0, 0, not_tracked)"""
        data = np.zeros((JOINT_COUNT, 4), dtype=float)
        for joint_type, joint in body.joints.items():
            data[int(joint_type)] = [
                joint.position.x,
                joint.position.y,
                joint.position.z,
                int(joint.tracking_state),
            ]
        return cls(data)

    @staticmethod
    def body_from_dict(payload: Dict[str, Any]) -> Body:
        """
        {"is_tracked": true, "tracking_id": 1,
         "joints": {"Head": {"x":..,"y":..,"z":..,"tracking_state": "tracked"}, ...}}
        """
        raw_joints = payload.get("joints") or {}
        joints = []
        for name, values in raw_joints.items():
            state = values.get("tracking_state", TrackingState.tracked)
            if isinstance(state, str):
                state = TrackingState[state]
            joints.append(
                Joint(
                    joint_type=JointType[name],
                    position=CameraSpacePoint(
                        x=values.get("x", 0.0),
                        y=values.get("y", 0.0),
                        z=values.get("z", 0.0),
                    ),
                    tracking_state=TrackingState(state),
                )
            )
        return Body.from_joints(
            joints,
            is_tracked=bool(payload.get("is_tracked", True)),
            tracking_id=payload.get("tracking_id"),
        )
