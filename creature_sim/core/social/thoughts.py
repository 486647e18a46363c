"""관계 이벤트 → Thought 생성

상호작용/사망 통지 시 소유 creature에 적용할 thought 내용을 결정한다.
적용(중첩, 만료)은 creature 쪽 책임.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from creature_sim.core.creature.thoughts import Thought
from creature_sim.core.social.enums import SocialRelationType

_T = SocialRelationType

DEATH_THOUGHT_DURATION = 10000


@dataclass(frozen=True)
class InteractionThoughtRule:
    """유형 그룹별 상호작용 thought 규칙"""

    id_prefix: str
    base_mood: float
    duration: int
    stack_limit: int
    labels: Dict[SocialRelationType, str]
    multipliers: Dict[SocialRelationType, float]

    def build(self, relation_type: SocialRelationType, target_id: str) -> Thought:
        mood = self.base_mood * self.multipliers.get(relation_type, 1.0)
        return Thought(
            id=f"{self.id_prefix}_{target_id}",
            name=self.labels[relation_type],
            mood_effect=mood,
            duration=self.duration,
            remaining_time=self.duration,
            stack_count=1,
            stack_limit=self.stack_limit,
        )


_PLEASANT_CHAT = InteractionThoughtRule(
    id_prefix="pleasant_conversation",
    base_mood=5,
    duration=1000,
    stack_limit=3,
    labels={
        _T.FRIEND: "Had a nice chat with a friend",
        _T.CLOSE_FRIEND: "Had a nice chat with a close friend",
        _T.KINDRED_SPIRIT: "Had a nice chat with a kindred spirit",
    },
    multipliers={_T.CLOSE_FRIEND: 1.5, _T.KINDRED_SPIRIT: 2.0},
)

_LOVED_ONE = InteractionThoughtRule(
    id_prefix="time_with_loved_one",
    base_mood=8,
    duration=1500,
    stack_limit=2,
    labels={
        _T.SPOUSE: "Spent time with spouse",
        _T.FAMILY: "Spent time with spouse",
        _T.LOVER: "Spent time with lover",
    },
    multipliers={},
)

_UNPLEASANT_ENCOUNTER = InteractionThoughtRule(
    id_prefix="unpleasant_encounter",
    base_mood=-5,
    duration=1000,
    stack_limit=3,
    labels={
        _T.GRUDGE: "Had to deal with someone I dislike",
        _T.RIVAL: "Had to deal with someone I dislike",
        _T.ENEMY: "Had to deal with an enemy",
    },
    multipliers={_T.ENEMY: 1.5},
)

_FRIEND_ARGUMENT = InteractionThoughtRule(
    id_prefix="argument_with_friend",
    base_mood=-7,
    duration=1500,
    stack_limit=2,
    labels={
        _T.FRIEND: "Argued with a friend",
        _T.CLOSE_FRIEND: "Argued with a close friend",
    },
    multipliers={_T.CLOSE_FRIEND: 1.5},
)

POSITIVE_RULES: Tuple[InteractionThoughtRule, ...] = (_PLEASANT_CHAT, _LOVED_ONE)
NEGATIVE_RULES: Tuple[InteractionThoughtRule, ...] = (
    _UNPLEASANT_ENCOUNTER,
    _FRIEND_ARGUMENT,
)

# 사망 통지: type → (기분 변화, 라벨)
DEATH_EFFECTS: Dict[SocialRelationType, Tuple[float, str]] = {
    _T.SPOUSE: (-40, "Spouse died"),
    _T.FAMILY: (-40, "Spouse died"),
    _T.LOVER: (-30, "Lover died"),
    _T.CHILD: (-40, "Child died"),
    _T.PARENT: (-30, "Parent died"),
    _T.SIBLING: (-25, "Sibling died"),
    _T.PET: (-20, "Pet died"),
    _T.CLOSE_FRIEND: (-20, "Close friend died"),
    _T.KINDRED_SPIRIT: (-20, "Close friend died"),
    _T.FRIEND: (-15, "Friend died"),
    _T.GRUDGE: (-5, "Someone I disliked died"),
    _T.ENEMY: (-5, "Someone I disliked died"),
    _T.RIVAL: (-5, "Someone I disliked died"),
}
_DEFAULT_DEATH_EFFECT: Tuple[float, str] = (-5, "Acquaintance died")


def build_interaction_thought(
    relation_type: SocialRelationType, target_id: str, quality: float
) -> Optional[Thought]:
    """상호작용 결과 thought. 해당 규칙이 없거나 quality == 0 이면 None."""
    if quality > 0:
        rules = POSITIVE_RULES
    elif quality < 0:
        rules = NEGATIVE_RULES
    else:
        return None

    for rule in rules:
        if relation_type in rule.labels:
            return rule.build(relation_type, target_id)
    return None


def build_death_thought(
    relation_type: SocialRelationType, target_id: str
) -> Thought:
    """사망 통지 thought. id는 유형+대상으로 고정되어 중복 사망 시 충돌한다."""
    mood_effect, label = DEATH_EFFECTS.get(relation_type, _DEFAULT_DEATH_EFFECT)
    return Thought(
        id=f"death_of_{relation_type.value.lower()}_{target_id}",
        name=label,
        mood_effect=mood_effect,
        duration=DEATH_THOUGHT_DURATION,
        remaining_time=DEATH_THOUGHT_DURATION,
        stack_count=1,
        stack_limit=1,
    )
