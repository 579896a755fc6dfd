"""
관절 → 화면 픽셀 좌표 변환
body-space [-max, +max] → [0, pixel]
"""
from typing import Optional

from bodyheight.config.settings import settings
from bodyheight.schemas.joint_dto import CameraSpacePoint, Joint


def scale(max_pixel: int, max_body: float, position: float) -> float:
    """
    Args:
        max_pixel: 화면 width 또는 height
        max_body: body-space 경계 (X 또는 Y)
        position: 원래 좌표 (X 또는 Y)

    Returns:
        [0, max_pixel] 로 클램프된 픽셀 좌표
    """
    value = ((max_pixel / max_body) / 2) * position + (max_pixel / 2)

    if value > max_pixel:
        return float(max_pixel)
    if value < 0:
        return 0.0
    return value


def scale_to(
    joint: Joint,
    width: int,
    height: int,
    max_x: Optional[float] = None,
    max_y: Optional[float] = None,
) -> Joint:
    """
    관절 x, y 를 화면 크기에 맞게 변환한 새 Joint 반환
    - y 는 뒤집는다 (화면 y 는 아래로 증가)
    - z, tracking_state 는 그대로
    - max_x / max_y 생략 시 settings.DISPLAY_MAX_X / DISPLAY_MAX_Y (기본 1.0)
    """
    max_x = settings.DISPLAY_MAX_X if max_x is None else max_x
    max_y = settings.DISPLAY_MAX_Y if max_y is None else max_y

    if width < 0 or height < 0:
        raise ValueError(f"width/height must be >= 0, got {width}x{height}")
    if max_x <= 0 or max_y <= 0:
        raise ValueError(f"max_x/max_y must be > 0, got {max_x}, {max_y}")

    position = CameraSpacePoint(
        x=scale(width, max_x, joint.position.x),
        y=scale(height, max_y, -joint.position.y),
        z=joint.position.z,
    )
    return joint.model_copy(update={"position": position})
