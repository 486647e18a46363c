"""Creature 특성/기술 데이터

관계 시스템은 궁합 계산에 id, 충돌 목록, 레벨, 열정만 사용한다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SkillPassion(str, Enum):
    """기술 열정 단계"""

    NONE = "NONE"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    BURNING = "BURNING"


@dataclass
class Trait:
    """성격 특성. conflicting_traits: 함께 가질 수 없는 trait id 목록."""

    id: str
    name: str = ""
    conflicting_traits: List[str] = field(default_factory=list)


@dataclass
class Skill:
    id: str
    name: str = ""
    level: int = 0  # 0 ~ 20
    passion: SkillPassion = SkillPassion.NONE
