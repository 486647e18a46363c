"""Creature — 관계 시스템의 협력 객체

관계 엔진이 요구하는 계약만 구현한다:
- apply_thought(thought): thought 중첩/만료 + 기분 재계산
- traits, skills: 궁합 계산용 읽기 전용 목록
"""

from __future__ import annotations

import copy
import random
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from creature_sim.core.creature.thoughts import Thought
from creature_sim.core.creature.traits import Skill, Trait
from creature_sim.core.social.manager import Clock, RelationshipManager
from creature_sim.core.social.models import FamilyDetails, SocialRelation
from creature_sim.core.social.enums import SocialRelationType

BASE_MOOD = 50.0
MOOD_MIN = 0.0
MOOD_MAX = 100.0


@dataclass
class Creature:
    """시뮬레이션 creature

    relationships: 생성 시 1회 만들어지는 RelationshipManager (creature와 수명 동일)
    """

    id: str
    name: str
    traits: List[Trait] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    social_relations: List[SocialRelation] = field(default_factory=list)
    thoughts: List[Thought] = field(default_factory=list)
    mood: float = BASE_MOOD

    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)
    clock: Optional[Clock] = field(default=None, repr=False, compare=False)
    relationships: RelationshipManager = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.relationships = RelationshipManager(self, rng=self.rng, clock=self.clock)

    # ── 기분 ─────────────────────────────────────────────────

    def apply_thought(self, thought: Thought) -> None:
        """같은 id가 있으면 stack_limit까지 중첩, 없으면 추가. 이후 기분 재계산."""
        existing = self.get_thought(thought.id)
        if existing is not None:
            if existing.stack_count < existing.stack_limit:
                existing.stack_count += 1
                existing.remaining_time = max(existing.remaining_time, thought.duration)
        else:
            self.thoughts.append(
                Thought(
                    id=thought.id,
                    name=thought.name,
                    mood_effect=thought.mood_effect,
                    duration=thought.duration,
                    remaining_time=thought.duration,
                    stack_count=1,
                    stack_limit=thought.stack_limit,
                )
            )
        self.calculate_mood()

    def get_thought(self, thought_id: str) -> Optional[Thought]:
        for thought in self.thoughts:
            if thought.id == thought_id:
                return thought
        return None

    def calculate_mood(self) -> float:
        """50 + Σ(mood_effect × stack_count), 0 ~ 100 클램프."""
        total = BASE_MOOD + sum(t.mood_effect * t.stack_count for t in self.thoughts)
        self.mood = max(MOOD_MIN, min(MOOD_MAX, total))
        return self.mood

    def advance_thoughts(self, ticks: int) -> List[Thought]:
        """thought 남은 시간 감소. 만료된 thought 목록 반환."""
        expired: List[Thought] = []
        for thought in self.thoughts:
            thought.remaining_time -= ticks
            if thought.remaining_time <= 0:
                expired.append(thought)
        if expired:
            self.thoughts = [t for t in self.thoughts if t.remaining_time > 0]
        self.calculate_mood()
        return expired

    # ── 관계 위임 ────────────────────────────────────────────

    def get_relationship(self, target_id: str) -> Optional[SocialRelation]:
        return self.relationships.get_relationship(target_id)

    def get_all_relationships(self) -> List[SocialRelation]:
        return self.relationships.get_all_relationships()

    def process_interaction(
        self, target_id: str, quality: float, reason: Optional[str] = None
    ) -> SocialRelation:
        return self.relationships.process_interaction(target_id, quality, reason)

    def handle_death_notification(self, creature_id: str) -> Optional[Thought]:
        return self.relationships.process_related_creature_death(creature_id)

    def form_familial_relationship(
        self,
        target_id: str,
        relation_type: SocialRelationType,
        family_details: FamilyDetails,
    ) -> SocialRelation:
        return self.relationships.form_familial_relationship(
            target_id, relation_type, family_details
        )

    def get_friends(self) -> List[SocialRelation]:
        return self.relationships.get_friends()

    def get_family_members(self) -> List[SocialRelation]:
        return self.relationships.get_family_members()

    def get_enemies(self) -> List[SocialRelation]:
        return self.relationships.get_enemies()

    # ── 복제 ─────────────────────────────────────────────────

    def duplicate(
        self, new_id: Optional[str] = None, name_suffix: str = " (Copy)"
    ) -> Creature:
        """trait/skill/thought를 복사한 새 creature. 관계는 비운다."""
        return Creature(
            id=new_id or str(uuid.uuid4()),
            name=f"{self.name}{name_suffix}",
            traits=copy.deepcopy(self.traits),
            skills=copy.deepcopy(self.skills),
            thoughts=copy.deepcopy(self.thoughts),
            mood=self.mood,
            rng=self.rng,
            clock=self.clock,
        )

