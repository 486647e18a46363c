"""RelationshipManager — creature 1마리의 관계 목록 관리 창구

다른 서브시스템은 이 클래스를 통해서만 관계를 읽고 변경한다.
관계는 방향성 간선: 상대 쪽 간선은 호출자가 명시적으로 만든다.
"""

from __future__ import annotations

import math
import random
from datetime import datetime
from typing import TYPE_CHECKING, Callable, List, Optional

from creature_sim.core.creature.thoughts import Thought
from creature_sim.core.logging import get_logger
from creature_sim.core.social.calculations import (
    clamp_compatibility,
    initial_rank_from_quality,
    utc_now,
)
from creature_sim.core.social.compatibility import calculate_compatibility
from creature_sim.core.social.enums import (
    ENEMY_TYPES,
    FRIEND_TYPES,
    SocialRelationType,
    is_family_type,
)
from creature_sim.core.social.models import FamilyDetails, SocialRelation
from creature_sim.core.social.thoughts import (
    build_death_thought,
    build_interaction_thought,
)

if TYPE_CHECKING:
    from creature_sim.core.creature.models import Creature

logger = get_logger(__name__)

Clock = Callable[[], datetime]

INTERACTION_OPINION_EXPIRY_DAYS = 30


class RelationshipManager:
    """creature의 social_relations 리스트를 소유하는 관리자

    상태는 creature 참조뿐. rng/clock은 테스트용으로 주입 가능.
    """

    def __init__(
        self,
        creature: Creature,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._creature = creature
        self._rng = rng or random.Random()
        self._clock = clock or utc_now

    @property
    def creature(self) -> Creature:
        return self._creature

    @property
    def _relations(self) -> List[SocialRelation]:
        return self._creature.social_relations

    # ── 조회 ─────────────────────────────────────────────────

    def get_all_relationships(self) -> List[SocialRelation]:
        return self._relations

    def get_relationship(self, target_id: str) -> Optional[SocialRelation]:
        for relation in self._relations:
            if relation.target_id == target_id:
                return relation
        return None

    def get_friends(self) -> List[SocialRelation]:
        return [r for r in self._relations if r.type in FRIEND_TYPES]

    def get_family_members(self) -> List[SocialRelation]:
        return [r for r in self._relations if r.is_family_relationship()]

    def get_enemies(self) -> List[SocialRelation]:
        return [r for r in self._relations if r.type in ENEMY_TYPES]

    # ── 생성/갱신 ────────────────────────────────────────────

    def set_relationship(
        self,
        target_id: str,
        type: SocialRelationType,
        value: Optional[float] = None,
        compatibility: Optional[float] = None,
        family_details: Optional[FamilyDetails] = None,
    ) -> SocialRelation:
        """관계 upsert.

        기존 관계가 가족 유형이고 새 유형이 가족이 아니면 기존 유형 유지.
        생략된 필드는 이전 값 유지. 기존 객체를 제자리에서 갱신한다.
        """
        existing = self.get_relationship(target_id)
        if existing is None:
            relation = SocialRelation(
                target_id=target_id,
                type=type,
                relationship_rank=value if value is not None else 0.0,
                compatibility=compatibility if compatibility is not None else 0.0,
                family_details=family_details,
                last_interaction=self._clock(),
            )
            self._relations.append(relation)
            logger.debug(
                f"Relationship created: {self._creature.id}→{target_id} "
                f"type={relation.type.value}"
            )
            return relation

        if existing.is_family_relationship() and not is_family_type(type):
            logger.debug(
                f"Family type kept: {self._creature.id}→{target_id} "
                f"{existing.type.value} (requested {type.value})"
            )
        else:
            existing.type = type
        if value is not None:
            existing.value = value
        if compatibility is not None and not math.isnan(compatibility):
            existing.compatibility = clamp_compatibility(compatibility)
        if family_details is not None:
            existing.family_details = family_details
        return existing

    def form_familial_relationship(
        self,
        target_id: str,
        relation_type: SocialRelationType,
        family_details: FamilyDetails,
    ) -> SocialRelation:
        return self.set_relationship(
            target_id, relation_type, family_details=family_details
        )

    def remove_relationship(self, target_id: str) -> bool:
        """명시적 삭제. 삭제했으면 True."""
        relation = self.get_relationship(target_id)
        if relation is None:
            return False
        self._relations.remove(relation)
        return True

    def clear_relationships(self) -> int:
        """전체 삭제 (creature 복제 등 일괄 작업용). 삭제 수 반환."""
        count = len(self._relations)
        self._relations.clear()
        return count

    # ── 상호작용 ─────────────────────────────────────────────

    def process_interaction(
        self, target_id: str, quality: float, reason: Optional[str] = None
    ) -> SocialRelation:
        """상호작용 처리: 관계 조회/생성 → interact → 의견 수정치 → thought 적용"""
        relation = self.get_relationship(target_id)
        if relation is None:
            compatibility = self._rng.randint(-100, 100)
            relation = self.set_relationship(
                target_id,
                (
                    SocialRelationType.PASSING_ACQUAINTANCE
                    if compatibility >= 0
                    else SocialRelationType.GRUDGE
                ),
                value=initial_rank_from_quality(quality),
                compatibility=compatibility,
            )

        now = self._clock()
        relation.interact(quality, now=now)

        if reason:
            relation.add_opinion_modifier(
                reason, quality, INTERACTION_OPINION_EXPIRY_DAYS, now=now
            )

        thought = build_interaction_thought(relation.type, target_id, quality)
        if thought is not None:
            self._creature.apply_thought(thought)

        return relation

    def calculate_compatibility(self, target_creature: Creature) -> float:
        return calculate_compatibility(self._creature, target_creature)

    # ── 사망 통지 ────────────────────────────────────────────

    def process_related_creature_death(self, target_id: str) -> Optional[Thought]:
        """관계 있는 creature 사망 → 장기 thought 1건 적용. 관계 없으면 무시."""
        relation = self.get_relationship(target_id)
        if relation is None:
            return None

        thought = build_death_thought(relation.type, target_id)
        self._creature.apply_thought(thought)
        logger.debug(
            f"Death thought applied: {self._creature.id} ← {thought.id} "
            f"({thought.mood_effect})"
        )
        return thought
