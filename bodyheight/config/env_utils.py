import os
from pathlib import Path
from typing import Optional

"""환경 변수에서 bool 타입을 안전하게 읽는다."""


def env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")


"""환경 변수에서 float 값을 읽는다. 파싱 실패 시 ValueError."""


def env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not str(v).strip():
        return float(default)
    try:
        return float(v)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {v!r}") from e


"""환경 변수에서 소문자 문자열을 읽는다 (enum 값 매칭용)."""


def env_choice(name: str, default: str) -> str:
    v = os.getenv(name)
    if not v or not v.strip():
        return default
    return v.strip().lower()


"""환경 변수에서 파일 경로를 Path 객체로 변환."""


def env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    v = os.getenv(name)
    return Path(v) if v else default
