from __future__ import annotations
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# helpers
from bodyheight.config.env_utils import env_bool, env_choice, env_float, env_path
from bodyheight.common.exceptions import ConfigurationError
from bodyheight.constants import (
    DEFAULT_MAX_BODY_EXTENT,
    HEAD_DIVERGENCE,
)
from bodyheight.utils.enums.enums import MeasurementSystem


# ─────────────────────────────────────────────────────────
# Project root 탐색
#   - .git / pyproject.toml / requirements.txt 중 하나가 보이는 최상단을 루트로 간주
#   - 실패 시 BASE_DIR 환경변수 → 현재 작업 디렉토리
#   - 라이브러리로 설치된 경우에도 import 가 실패하면 안 된다
# ─────────────────────────────────────────────────────────
def find_project_root() -> Path:
    cur = Path(__file__).resolve()
    for parent in cur.parents:
        if any(
            (parent / m).exists()
            for m in (".git", "pyproject.toml", "requirements.txt")
        ):
            return parent
    env_root = os.getenv("BASE_DIR")
    if env_root:
        return Path(env_root).resolve()
    return Path.cwd()


ROOT: Path = find_project_root()

# ─────────────────────────────────────────────────────────
# .env 로딩
#   - ENV_FILE 지정 시 우선
#   - 없으면 ROOT/.env.<ENV> → 없으면 ROOT/.env
# ─────────────────────────────────────────────────────────
_DEFAULT_ENV = os.getenv("ENV", "test")
_env_file_candidate = ROOT / f".env.{_DEFAULT_ENV}"
_ENV_FILE = env_path("ENV_FILE", None) or (
    _env_file_candidate if _env_file_candidate.exists() else (ROOT / ".env")
)
load_dotenv(dotenv_path=_ENV_FILE, override=False)


def parse_measurement_system(value: str) -> MeasurementSystem:
    """문자열 → MeasurementSystem. 'metric' 은 meters 의 별칭."""
    key = str(value).strip().lower()
    if key == "metric":
        key = MeasurementSystem.meters.value
    try:
        return MeasurementSystem(key)
    except ValueError as e:
        allowed = ", ".join(m.value for m in MeasurementSystem)
        raise ConfigurationError(
            f"MEASUREMENT_SYSTEM must be one of [{allowed}], got {value!r}"
        ) from e


def parse_log_level(value: str) -> int:
    level = logging.getLevelName(str(value).strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"LOG_LEVEL is not a valid logging level: {value!r}")
    return level


class Settings:
    # ── App / Runtime ─────────────────────────────────────
    ENV: str = os.getenv("ENV", _DEFAULT_ENV)
    DEBUG_MODE: bool = env_bool("DEBUG_MODE", False)
    LOG_LEVEL: int = parse_log_level(
        os.getenv("LOG_LEVEL", "DEBUG" if DEBUG_MODE else "INFO")
    )

    # ── Base Paths ────────────────────────────────────────
    ROOT: Path = ROOT

    # ── Height estimation ─────────────────────────────────
    # 기본 단위는 meters. imperial 이면 feet 로 변환해서 반환
    MEASUREMENT_SYSTEM: MeasurementSystem = parse_measurement_system(
        env_choice("MEASUREMENT_SYSTEM", MeasurementSystem.meters.value)
    )
    # 머리 관절이 정수리까지 닿지 않는 만큼 보정 (m)
    HEAD_DIVERGENCE: float = env_float("HEAD_DIVERGENCE", HEAD_DIVERGENCE)

    # ── Display scaling (body-space 경계) ─────────────────
    DISPLAY_MAX_X: float = env_float("DISPLAY_MAX_X", DEFAULT_MAX_BODY_EXTENT)
    DISPLAY_MAX_Y: float = env_float("DISPLAY_MAX_Y", DEFAULT_MAX_BODY_EXTENT)

    def __init__(self) -> None:
        if self.HEAD_DIVERGENCE < 0:
            raise ConfigurationError(
                f"HEAD_DIVERGENCE must be >= 0, got {self.HEAD_DIVERGENCE}"
            )
        for name in ("DISPLAY_MAX_X", "DISPLAY_MAX_Y"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be > 0, got {getattr(self, name)}")


# 전역 싱글톤처럼 사용
settings = Settings()
