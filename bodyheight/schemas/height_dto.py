"""
키 계산 결과 DTO
HeightCalculator 출력용
"""
from typing import Optional

from pydantic import BaseModel, Field

from bodyheight.constants import NO_BODY_SENTINEL, NOT_TRACKED_SENTINEL
from bodyheight.utils.enums.enums import HeightStatus, MeasurementSystem, SideEnum


class HeightResult(BaseModel):
    """
    키 계산 결과 (tagged result)
    - ok: value 에 키 (meters 또는 feet)
    - no_body / not_tracked: value 없음
    """
    status: HeightStatus
    unit: MeasurementSystem = MeasurementSystem.meters
    value: Optional[float] = Field(None, ge=0.0, description="키 (unit 단위)")

    # 계산 내역 (m, 단위 변환 전)
    torso_length: Optional[float] = Field(None, description="head→waist 길이 (m)")
    leg_length: Optional[float] = Field(None, description="선택된 다리 길이 (m)")
    leg: Optional[SideEnum] = Field(None, description="길이 계산에 사용한 다리")
    tracking_id: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == HeightStatus.ok

    def sentinel(self) -> float:
        """Legacy float 반환값: 키 또는 -1.0(no body) / -2.0(not tracked)"""
        if self.status == HeightStatus.no_body:
            return NO_BODY_SENTINEL
        if self.status == HeightStatus.not_tracked:
            return NOT_TRACKED_SENTINEL
        return float(self.value)

    @classmethod
    def no_body(cls, unit: MeasurementSystem = MeasurementSystem.meters) -> "HeightResult":
        return cls(status=HeightStatus.no_body, unit=unit)

    @classmethod
    def not_tracked(
        cls,
        unit: MeasurementSystem = MeasurementSystem.meters,
        tracking_id: Optional[int] = None,
    ) -> "HeightResult":
        return cls(status=HeightStatus.not_tracked, unit=unit, tracking_id=tracking_id)
