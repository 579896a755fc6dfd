"""
Pytest Configuration & Shared Fixtures

이 파일은 모든 테스트에서 재사용 가능한 fixture를 정의합니다.
"""
import pytest

from bodyheight.config.settings import settings
from bodyheight.domain.height.calculator import HeightCalculator
from bodyheight.utils.enums.enums import MeasurementSystem, TrackingState
from bodyheight.constants import JointType
from tests.test_helpers import make_body


# ========================================
# Domain Object Fixtures
# ========================================

@pytest.fixture
def standing_body():
    """모든 관절이 tracked 인 서 있는 바디"""
    return make_body()


@pytest.fixture
def left_favoured_body():
    """오른쪽 무릎이 inferred → 왼쪽 다리가 더 정확"""
    return make_body(states={JointType.KneeRight: TrackingState.inferred})


@pytest.fixture
def untracked_body():
    """트래킹이 끊긴 바디"""
    return make_body(is_tracked=False)


# ========================================
# Calculator Fixtures
# ========================================

@pytest.fixture
def metric_calculator():
    return HeightCalculator(MeasurementSystem.meters)


@pytest.fixture
def imperial_calculator():
    return HeightCalculator(MeasurementSystem.imperial)


@pytest.fixture
def imperial_settings(monkeypatch):
    """settings.MEASUREMENT_SYSTEM 을 imperial 로 임시 교체"""
    monkeypatch.setattr(settings, "MEASUREMENT_SYSTEM", MeasurementSystem.imperial, raising=True)
    return settings
