"""관계 수치 계산

전부 순수 함수 — 외부 의존 없음.
"""

import math
from datetime import datetime, timezone

RANK_MIN = 0.0
RANK_MAX = 100.0
VARIABLE_MIN = -100.0
VARIABLE_MAX = 100.0
COMPATIBILITY_MIN = -100.0
COMPATIBILITY_MAX = 100.0

# compatibility > 0 이면 상호작용 효과 증폭, 그 외에는 감쇠
POSITIVE_COMPATIBILITY_FACTOR = 1.5
NEUTRAL_COMPATIBILITY_FACTOR = 0.5


def utc_now() -> datetime:
    """기본 시계. 타임존 포함 UTC."""
    return datetime.now(timezone.utc)


def clamp_rank(value: float) -> float:
    """0 ~ 100 클램프. NaN은 하한으로."""
    if math.isnan(value):
        return RANK_MIN
    return max(RANK_MIN, min(RANK_MAX, value))


def clamp_variable(value: float) -> float:
    """-100 ~ +100 클램프. NaN은 0으로."""
    if math.isnan(value):
        return 0.0
    return max(VARIABLE_MIN, min(VARIABLE_MAX, value))


def clamp_compatibility(value: float) -> float:
    """-100 ~ +100 클램프. NaN은 0으로."""
    if math.isnan(value):
        return 0.0
    return max(COMPATIBILITY_MIN, min(COMPATIBILITY_MAX, value))


def rank_change(quality: float, compatibility: float) -> float:
    """상호작용 1회의 rank 변동량.

    compatibility가 양수일 때만 1.5배, 0 이하는 0.5배. NaN quality는 변동 없음.
    """
    if math.isnan(quality):
        return 0.0
    factor = (
        POSITIVE_COMPATIBILITY_FACTOR
        if compatibility > 0
        else NEUTRAL_COMPATIBILITY_FACTOR
    )
    return quality * factor


def initial_rank_from_quality(quality: float) -> float:
    """첫 상호작용으로 생성되는 관계의 초기 rank.

    음수 quality는 절반만 반영 (결과적으로 0으로 클램프된다).
    """
    raw = quality if quality > 0 else quality / 2
    return clamp_rank(raw)
