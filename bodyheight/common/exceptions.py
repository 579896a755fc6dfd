"""
bodyheight 예외 정의

no body / not tracked 는 예외가 아니라 HeightResult 상태로 표현한다.
여기 있는 예외는 계약 위반(관절 누락, 잘못된 설정)에만 사용.
"""


class BodyHeightError(Exception):
    """bodyheight 기본 예외"""
    pass


class MissingJointError(BodyHeightError, KeyError):
    """Body 에 필요한 관절이 없음 (부분 검출)"""

    def __init__(self, joint_type, tracking_id=None):
        self.joint_type = joint_type
        self.tracking_id = tracking_id
        super().__init__(joint_type)

    def __str__(self) -> str:
        name = getattr(self.joint_type, "name", self.joint_type)
        if self.tracking_id is None:
            return f"joint {name} is missing from body"
        return f"joint {name} is missing from body {self.tracking_id}"


class ConfigurationError(BodyHeightError):
    """설정 값 오류"""
    pass
