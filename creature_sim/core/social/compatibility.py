"""두 creature 간 궁합 점수

trait/skill 스냅샷 기반 순수 계산. 원본 creature 객체는 읽기만 한다.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple

from creature_sim.core.creature.traits import SkillPassion
from creature_sim.core.social.calculations import clamp_compatibility

SHARED_TRAIT_BONUS = 10
CONFLICTING_TRAIT_PENALTY = -15
SIMILAR_SKILL_BONUS = 5
SIMILAR_SKILL_LEVEL_GAP = 3  # 레벨 차이 < 3
SHARED_PASSION_BONUS = 15


@dataclass(frozen=True)
class CompatibilityProfile:
    """궁합 계산용 스냅샷"""

    trait_ids: FrozenSet[str]
    trait_conflicts: Tuple[Tuple[str, FrozenSet[str]], ...]  # (trait_id, 충돌 id들)
    skills: Dict[str, Tuple[int, SkillPassion]]  # skill_id → (level, passion)

    @classmethod
    def from_creature(cls, creature: Any) -> "CompatibilityProfile":
        traits = list(creature.traits)
        return cls(
            trait_ids=frozenset(t.id for t in traits),
            trait_conflicts=tuple(
                (t.id, frozenset(t.conflicting_traits)) for t in traits
            ),
            skills={s.id: (s.level, SkillPassion(s.passion)) for s in creature.skills},
        )


def score_profiles(
    owner: CompatibilityProfile, target: CompatibilityProfile
) -> float:
    """owner 관점 궁합 점수 (-100 ~ +100).

    - 공통 trait: +10
    - owner trait의 충돌 목록에 target trait: 매치당 -15
    - 공통 skill: 레벨 차 < 3 이면 +5, 같은 열정(NONE 제외)이면 +15
    """
    score = 0
    for trait_id, conflicts in owner.trait_conflicts:
        if trait_id in target.trait_ids:
            score += SHARED_TRAIT_BONUS
        score += CONFLICTING_TRAIT_PENALTY * len(conflicts & target.trait_ids)

    for skill_id, (level, passion) in owner.skills.items():
        other = target.skills.get(skill_id)
        if other is None:
            continue
        other_level, other_passion = other
        if abs(level - other_level) < SIMILAR_SKILL_LEVEL_GAP:
            score += SIMILAR_SKILL_BONUS
        if passion == other_passion and passion != SkillPassion.NONE:
            score += SHARED_PASSION_BONUS

    return clamp_compatibility(score)


def calculate_compatibility(owner: Any, target: Any) -> float:
    """creature 2개 → 궁합 점수. 부작용 없음."""
    return score_profiles(
        CompatibilityProfile.from_creature(owner),
        CompatibilityProfile.from_creature(target),
    )
