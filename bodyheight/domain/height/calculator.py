"""
키 계산 Domain Logic
관절 위치 → 키 (meters / feet)
"""
import logging
from typing import Optional, Sequence

from bodyheight.config.settings import settings
from bodyheight.constants import (
    JointType,
    LEFT_LEG,
    RIGHT_LEG,
    TORSO_CHAIN,
    UPPER_BODY_CHAIN,
)
from bodyheight.domain.segment.length import chain_length, count_tracked_joints
from bodyheight.schemas.height_dto import HeightResult
from bodyheight.schemas.joint_dto import Body, Joint
from bodyheight.utils.enums.enums import HeightStatus, MeasurementSystem, SideEnum
from bodyheight.utils.metric_helpers import convert_meters

logger = logging.getLogger(__name__)
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


class HeightCalculator:
    """바디 키 계산기"""

    def __init__(
        self,
        measurement_system: Optional[MeasurementSystem] = None,
        head_divergence: Optional[float] = None,
    ):
        self.measurement_system = MeasurementSystem(
            measurement_system or settings.MEASUREMENT_SYSTEM
        )
        self.head_divergence = (
            settings.HEAD_DIVERGENCE if head_divergence is None else float(head_divergence)
        )
        if self.head_divergence < 0:
            raise ValueError(f"head_divergence must be >= 0, got {self.head_divergence}")

    def calculate(self, bodies: Sequence[Optional[Body]]) -> list[HeightResult]:
        """
        한 프레임의 모든 바디에 대해 키 계산

        Args:
            bodies: 센서가 넘겨준 바디 리스트 (None 포함 가능)

        Returns:
            바디별 HeightResult (입력 순서 유지)
        """
        results = [self.estimate(body) for body in bodies]
        logger.debug(
            "frame heights: %d bodies, %d measured",
            len(results),
            sum(1 for r in results if r.ok),
        )
        return results

    def estimate(self, body: Optional[Body]) -> HeightResult:
        """
        단일 바디 키 계산

        Returns:
            HeightResult
            - ok: torso + leg + head_divergence (imperial 이면 feet)
            - no_body: body 가 None
            - not_tracked: body 는 있지만 트래킹되지 않음
        """
        # sentinel 판정은 관절 조회/거리 계산 전에
        if body is None:
            logger.info("height requested without a body")
            return HeightResult.no_body(self.measurement_system)
        if not body.is_tracked:
            logger.info("body %s is not tracked, no height available", body.tracking_id)
            return HeightResult.not_tracked(self.measurement_system, body.tracking_id)

        torso = self._calc_torso_length(body)
        side, leg = self._calc_leg_length(body)

        meters = torso + leg + self.head_divergence
        value = convert_meters(meters, self.measurement_system)

        return HeightResult(
            status=HeightStatus.ok,
            unit=self.measurement_system,
            value=value,
            torso_length=torso,
            leg_length=leg,
            leg=side,
            tracking_id=body.tracking_id,
        )

    def upper_height(self, body: Body) -> float:
        """
        상체 높이 (head → waist, m)
        앉은 자세 측정용. 트래킹 여부 / 단위 변환 없음
        """
        if body is None:
            raise ValueError("upper_height requires a body")
        return chain_length(self._joints(body, UPPER_BODY_CHAIN))

    def _calc_torso_length(self, body: Body) -> float:
        """head → neck → spine shoulder → spine base"""
        return chain_length(self._joints(body, TORSO_CHAIN))

    def _calc_leg_length(self, body: Body) -> tuple[SideEnum, float]:
        """트래킹이 더 잘 된 다리 길이 (동점이면 오른쪽)"""
        left = self._joints(body, LEFT_LEG)
        right = self._joints(body, RIGHT_LEG)

        left_tracked = count_tracked_joints(left)
        right_tracked = count_tracked_joints(right)

        if left_tracked > right_tracked:
            side, chain = SideEnum.left, left
        else:
            side, chain = SideEnum.right, right

        logger.debug(
            "leg selection: left=%d right=%d tracked joints -> %s",
            left_tracked, right_tracked, side.value,
        )
        return side, chain_length(chain)

    @staticmethod
    def _joints(body: Body, joint_types: Sequence[JointType]) -> list[Joint]:
        return [body.get_joint(t) for t in joint_types]


def estimate_height(
    body: Optional[Body],
    measurement_system: Optional[MeasurementSystem] = None,
) -> HeightResult:
    """HeightCalculator().estimate 단축 함수"""
    return HeightCalculator(measurement_system).estimate(body)


def height(
    body: Optional[Body],
    measurement_system: Optional[MeasurementSystem] = None,
) -> float:
    """
    Legacy API: 키를 float 로 반환
    - 양수: 키 (meters, imperial 이면 feet)
    - -1.0: body 없음
    - -2.0: body 트래킹 안 됨
    """
    return estimate_height(body, measurement_system).sentinel()


def upper_height(body: Body) -> float:
    return HeightCalculator().upper_height(body)
