"""사회 시뮬레이션 헬퍼

시나리오 기반 상호작용, 일일 상호작용 라운드, 상호작용 대상 선택, 가족/일괄 관계 생성.
양방향 처리는 여기서 두 번의 방향성 호출로 명시적으로 수행한다.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Sequence, Tuple

from creature_sim.core.social.calculations import utc_now
from creature_sim.core.social.enums import RelationshipVariable, SocialRelationType
from creature_sim.core.social.models import FamilyDetails, SocialRelation

if TYPE_CHECKING:
    from creature_sim.core.creature.models import Creature

_T = SocialRelationType

# (owner, target_id, quality, reason) → 갱신된 관계
InteractFn = Callable[["Creature", str, float, Optional[str]], SocialRelation]
# (owner, target_id, type, family_details) → 생성된 관계
BondFn = Callable[
    ["Creature", str, SocialRelationType, Optional[FamilyDetails]], SocialRelation
]


@dataclass(frozen=True)
class Scenario:
    """상호작용 시나리오. quality는 [low, high] 정수 구간, sign으로 부호 결정."""

    name: str
    low: int
    high: int
    sign: int
    reason: str
    reverse_reason: Optional[str] = None  # 상대 쪽 reason (없으면 reason)


SCENARIOS: Dict[str, Scenario] = {
    "friendly_chat": Scenario("friendly_chat", 3, 7, 1, "Had a pleasant conversation"),
    "argument": Scenario("argument", 3, 7, -1, "Got into an argument"),
    "compliment": Scenario(
        "compliment",
        8,
        12,
        1,
        "Gave a heartfelt compliment",
        "Received a heartfelt compliment",
    ),
    "insult": Scenario("insult", 8, 12, -1, "Hurled an insult", "Was insulted"),
    "deep_conversation": Scenario(
        "deep_conversation", 5, 9, 1, "Had a deep and meaningful conversation"
    ),
}

# deep_conversation 후 기존 관계 변수 직접 보정
DEEP_CONVERSATION_BONUS: Tuple[Tuple[RelationshipVariable, float], ...] = (
    (RelationshipVariable.TRUST, 10),
    (RelationshipVariable.RESPECT, 8),
)

# 일일 라운드 시나리오 풀
_WARM_TYPES = frozenset(
    {_T.FRIEND, _T.CLOSE_FRIEND, _T.KINDRED_SPIRIT, _T.SPOUSE, _T.LOVER}
)
_HOSTILE_TYPES = frozenset({_T.GRUDGE, _T.ENEMY})
WARM_POOL = ("friendly_chat", "compliment", "deep_conversation")
HOSTILE_POOL = ("argument", "insult")
NEUTRAL_POOL = ("friendly_chat", "argument", "deep_conversation")
STRANGER_POOL = ("friendly_chat", "deep_conversation")
WARM_ARGUMENT_CHANCE = 0.1
HOSTILE_RECONCILE_CHANCE = 0.05

# 대상 선택 욕구 점수
SOCIAL_DESIRE: Dict[SocialRelationType, int] = {
    _T.SPOUSE: 20,
    _T.LOVER: 20,
    _T.CHILD: 15,
    _T.PARENT: 15,
    _T.FRIEND: 10,
    _T.CLOSE_FRIEND: 18,
    _T.KINDRED_SPIRIT: 18,
    _T.GRUDGE: -10,
    _T.ENEMY: -20,
}
_DEFAULT_DESIRE = 5
_STRANGER_DESIRE = 3
_MAX_ABSENCE_BONUS = 7

# 일괄 관계 생성 시 가족 메타데이터
BOND_FAMILY_DETAILS: Dict[SocialRelationType, Tuple[bool, int]] = {
    _T.SPOUSE: (False, 0),
    _T.LOVER: (False, 0),
    _T.SIBLING: (True, 0),
    _T.PARENT: (True, 1),
    _T.CHILD: (True, -1),
}


def _process_interaction(
    owner: Creature, target_id: str, quality: float, reason: Optional[str]
) -> SocialRelation:
    return owner.process_interaction(target_id, quality, reason)


def _set_bond(
    owner: Creature,
    target_id: str,
    relation_type: SocialRelationType,
    family_details: Optional[FamilyDetails],
) -> SocialRelation:
    return owner.relationships.set_relationship(
        target_id, relation_type, family_details=family_details
    )


def roll_quality(scenario: Scenario, rng: random.Random) -> int:
    return scenario.sign * rng.randint(scenario.low, scenario.high)


def simulate_social_interaction(
    first: Creature,
    second: Creature,
    scenario_name: str,
    rng: Optional[random.Random] = None,
    interact: Optional[InteractFn] = None,
) -> int:
    """두 creature 간 시나리오 1회. 양쪽 모두 같은 quality로 처리. quality 반환.

    interact: 방향성 상호작용 1회 처리기. 생략 시 owner.process_interaction.
    """
    scenario = SCENARIOS.get(scenario_name)
    if scenario is None:
        raise ValueError(f"Unknown scenario: {scenario_name}")

    interact = interact or _process_interaction
    quality = roll_quality(scenario, rng or random.Random())
    interact(first, second.id, quality, scenario.reason)
    interact(second, first.id, quality, scenario.reverse_reason or scenario.reason)

    if scenario.name == "deep_conversation":
        for owner, other in ((first, second), (second, first)):
            relation = owner.get_relationship(other.id)
            if relation is None:
                continue
            for channel, bonus in DEEP_CONVERSATION_BONUS:
                relation.set_variable_value(
                    channel, relation.get_variable_value(channel) + bonus
                )

    return quality


def _scenario_pool(
    creature: Creature, target: Creature, rng: random.Random
) -> List[str]:
    relation = creature.get_relationship(target.id)
    if relation is None:
        return list(STRANGER_POOL)
    if relation.type in _WARM_TYPES:
        pool = list(WARM_POOL)
        if rng.random() < WARM_ARGUMENT_CHANCE:
            pool.append("argument")
        return pool
    if relation.type in _HOSTILE_TYPES:
        pool = list(HOSTILE_POOL)
        if rng.random() < HOSTILE_RECONCILE_CHANCE:
            pool.append("deep_conversation")
        return pool
    return list(NEUTRAL_POOL)


def simulate_daily_interactions(
    creatures: Sequence[Creature],
    rng: Optional[random.Random] = None,
    interact: Optional[InteractFn] = None,
) -> List[Tuple[str, str, str, int]]:
    """하루치 상호작용. creature마다 1~3회 무작위 상대와 시나리오 실행.

    Returns:
        (actor_id, target_id, scenario, quality) 기록 목록
    """
    rng = rng or random.Random()
    log: List[Tuple[str, str, str, int]] = []

    for creature in creatures:
        others = [c for c in creatures if c.id != creature.id]
        if not others:
            continue
        for _ in range(rng.randint(1, 3)):
            target = rng.choice(others)
            scenario = rng.choice(_scenario_pool(creature, target, rng))
            quality = simulate_social_interaction(
                creature, target, scenario, rng, interact
            )
            log.append((creature.id, target.id, scenario, quality))

    return log


def social_desire(
    creature: Creature, target: Creature, now: Optional[datetime] = None
) -> int:
    """creature가 target과 어울리고 싶은 정도."""
    relation = creature.get_relationship(target.id)
    if relation is None:
        return _STRANGER_DESIRE

    desire = SOCIAL_DESIRE.get(relation.type, _DEFAULT_DESIRE)
    days_since = ((now or utc_now()) - relation.last_interaction).days
    return desire + min(max(days_since, 0), _MAX_ABSENCE_BONUS)


def choose_social_target(
    creature: Creature,
    candidates: Sequence[Creature],
    now: Optional[datetime] = None,
) -> Optional[Creature]:
    """욕구 점수 최고 대상. 최고점이 0 이하이면 None."""
    now = now or utc_now()
    scored = [
        (social_desire(creature, target, now), target)
        for target in candidates
        if target.id != creature.id
    ]
    if not scored:
        return None

    best_desire, best = max(scored, key=lambda pair: pair[0])
    return best if best_desire > 0 else None


def create_family_unit(father: Creature, mother: Creature, child: Creature) -> None:
    """부모 2 + 자식 1 가족 관계 6개 생성 (양방향 명시)."""
    for owner, partner in ((father, mother), (mother, father)):
        owner.form_familial_relationship(
            partner.id,
            _T.SPOUSE,
            FamilyDetails(is_blood_related=False, generation_difference=0),
        )

    for parent, label in ((father, "Father"), (mother, "Mother")):
        parent.form_familial_relationship(
            child.id,
            _T.CHILD,
            FamilyDetails(
                is_blood_related=True,
                generation_difference=-1,
                relationship_description="Eldest Son",
            ),
        )
        child.form_familial_relationship(
            parent.id,
            _T.PARENT,
            FamilyDetails(
                is_blood_related=True,
                generation_difference=1,
                relationship_description=label,
            ),
        )


def bond_family_details(relation_type: SocialRelationType) -> Optional[FamilyDetails]:
    entry = BOND_FAMILY_DETAILS.get(relation_type)
    if entry is None:
        return None
    is_blood_related, generation_difference = entry
    return FamilyDetails(
        is_blood_related=is_blood_related,
        generation_difference=generation_difference,
    )


def create_social_bonds(
    creatures: Sequence[Creature],
    relation_type: SocialRelationType,
    bond: Optional[BondFn] = None,
) -> int:
    """선택된 creature 전원 사이에 같은 유형 관계 생성.

    자기 자신과 이미 관계가 있는 대상은 건너뛴다. 생성 수 반환.
    bond: 방향성 관계 1개 생성기. 생략 시 RelationshipManager.set_relationship.
    """
    bond = bond or _set_bond
    created = 0
    for owner in creatures:
        for target in creatures:
            if owner.id == target.id or owner.get_relationship(target.id) is not None:
                continue
            bond(owner, target.id, relation_type, bond_family_details(relation_type))
            created += 1
    return created
