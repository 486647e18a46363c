"""관계 시스템 열거형 및 유형 그룹"""

from enum import Enum
from typing import FrozenSet


class SocialRelationType(str, Enum):
    """관계 유형 (닫힌 집합)"""

    # 혈연/가족
    SPOUSE = "SPOUSE"
    LOVER = "LOVER"
    PARENT = "PARENT"
    CHILD = "CHILD"
    SIBLING = "SIBLING"
    GRANDPARENT = "GRANDPARENT"
    GRANDCHILD = "GRANDCHILD"
    AUNT_UNCLE = "AUNT_UNCLE"
    NIECE_NEPHEW = "NIECE_NEPHEW"
    COUSIN = "COUSIN"
    FAMILY = "FAMILY"  # legacy

    # 신앙
    DEITY = "DEITY"
    WORSHIPPER = "WORSHIPPER"

    # 사제
    APPRENTICE = "APPRENTICE"
    MASTER = "MASTER"
    FORMER_APPRENTICE = "FORMER_APPRENTICE"
    FORMER_MASTER = "FORMER_MASTER"

    # 동물
    PET = "PET"
    OWNER = "OWNER"
    BONDED_ANIMAL = "BONDED_ANIMAL"
    ANIMAL_TRAINER = "ANIMAL_TRAINER"

    # 비혈연 개인 관계
    KINDRED_SPIRIT = "KINDRED_SPIRIT"
    COMPANION = "COMPANION"
    CLOSE_FRIEND = "CLOSE_FRIEND"
    FRIEND = "FRIEND"
    FRIENDLY_TERMS = "FRIENDLY_TERMS"
    LONG_TERM_ACQUAINTANCE = "LONG_TERM_ACQUAINTANCE"
    PASSING_ACQUAINTANCE = "PASSING_ACQUAINTANCE"
    GRUDGE = "GRUDGE"
    ENEMY = "ENEMY"
    RIVAL = "RIVAL"  # legacy
    ACQUAINTANCE = "ACQUAINTANCE"  # legacy


class RelationshipVariable(str, Enum):
    """관계 변수 5채널 (각 -100 ~ +100)"""

    LOYALTY = "LOYALTY"
    TRUST = "TRUST"
    FEAR = "FEAR"
    LOVE = "LOVE"
    RESPECT = "RESPECT"


_T = SocialRelationType

FAMILY_TYPES: FrozenSet[SocialRelationType] = frozenset(
    {
        _T.SPOUSE,
        _T.LOVER,
        _T.PARENT,
        _T.CHILD,
        _T.SIBLING,
        _T.GRANDPARENT,
        _T.GRANDCHILD,
        _T.AUNT_UNCLE,
        _T.NIECE_NEPHEW,
        _T.COUSIN,
        _T.FAMILY,
    }
)

# 자동 재분류 대상에서 제외되는 신앙/사제 관계
PROTECTED_TYPES: FrozenSet[SocialRelationType] = frozenset(
    {
        _T.DEITY,
        _T.WORSHIPPER,
        _T.MASTER,
        _T.APPRENTICE,
        _T.FORMER_MASTER,
        _T.FORMER_APPRENTICE,
    }
)

FRIEND_TYPES: FrozenSet[SocialRelationType] = frozenset(
    {_T.FRIEND, _T.CLOSE_FRIEND, _T.KINDRED_SPIRIT}
)

ENEMY_TYPES: FrozenSet[SocialRelationType] = frozenset(
    {_T.GRUDGE, _T.ENEMY, _T.RIVAL}
)


def is_family_type(relation_type: SocialRelationType) -> bool:
    return relation_type in FAMILY_TYPES
