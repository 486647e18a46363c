"""관계 유형 재분류 판정

rank/compatibility 기반 상태 머신. 위에서 아래로 평가, 첫 매치 반환.
"""

from typing import List, Optional, Tuple

from creature_sim.core.social.enums import (
    FAMILY_TYPES,
    PROTECTED_TYPES,
    SocialRelationType,
)

# compatibility >= 0: rank < threshold → type
POSITIVE_RANK_LADDER: List[Tuple[float, SocialRelationType]] = [
    (5.0, SocialRelationType.PASSING_ACQUAINTANCE),
    (15.0, SocialRelationType.LONG_TERM_ACQUAINTANCE),
    (30.0, SocialRelationType.FRIENDLY_TERMS),
    (50.0, SocialRelationType.FRIEND),
    (70.0, SocialRelationType.CLOSE_FRIEND),
]
# 최상단은 LOVER로 자동 승격하지 않는다
_POSITIVE_DEFAULT = SocialRelationType.KINDRED_SPIRIT

# compatibility < 0: rank > threshold → type. 높은 임계값부터 평가.
NEGATIVE_RANK_LADDER: List[Tuple[float, SocialRelationType]] = [
    (50.0, SocialRelationType.ENEMY),
    (15.0, SocialRelationType.GRUDGE),
]


def is_reclassifiable(
    relation_type: SocialRelationType, has_family_details: bool = False
) -> bool:
    """자동 재분류 허용 여부. 가족/신앙/사제 관계는 고정."""
    if relation_type in FAMILY_TYPES or has_family_details:
        return False
    return relation_type not in PROTECTED_TYPES


def _match_positive(rank: float) -> SocialRelationType:
    for threshold, relation_type in POSITIVE_RANK_LADDER:
        if rank < threshold:
            return relation_type
    return _POSITIVE_DEFAULT


def _match_negative(rank: float) -> Optional[SocialRelationType]:
    for threshold, relation_type in NEGATIVE_RANK_LADDER:
        if rank > threshold:
            return relation_type
    return None


def classify_relationship(
    current_type: SocialRelationType,
    rank: float,
    compatibility: float,
    has_family_details: bool = False,
) -> SocialRelationType:
    """현재 수치에 맞는 관계 유형 반환.

    재분류 불가 관계이거나 음수 compatibility에서 rank <= 15이면
    current_type을 그대로 돌려준다.
    """
    if not is_reclassifiable(current_type, has_family_details):
        return current_type

    if compatibility >= 0:
        return _match_positive(rank)

    return _match_negative(rank) or current_type
