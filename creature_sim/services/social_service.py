"""Social Service — Core 관계 엔진과 creature 저장소를 연결

id → Creature 해석, 호출자 입력 검증, EventBus 발행, 변경 로그를 담당한다.
관계 수치 계산은 전부 Core(RelationshipManager)에 위임.
"""

import random
import uuid
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from creature_sim.core.creature.models import Creature
from creature_sim.core.creature.thoughts import Thought
from creature_sim.core.creature.traits import Skill, Trait
from creature_sim.core.event_bus import EventBus, SimEvent
from creature_sim.core.event_types import EventTypes
from creature_sim.core.logging import get_logger
from creature_sim.core.social.calculations import utc_now
from creature_sim.core.social.enums import SocialRelationType
from creature_sim.core.social.models import FamilyDetails, SocialRelation
from creature_sim.core.social.simulation import (
    choose_social_target,
    create_social_bonds,
    simulate_daily_interactions,
    simulate_social_interaction,
)
from creature_sim.services.creature_repository import CreatureRepository

logger = get_logger(__name__)

_SOURCE = "social_service"


class SocialService:
    """creature 등록, 관계 upsert, 상호작용, 사망 전파, 시뮬레이션 라운드

    EventBus 구독: creature_died (외부 서브시스템의 사망 통지).
    """

    def __init__(
        self,
        repository: CreatureRepository,
        event_bus: EventBus,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._repo = repository
        self._bus = event_bus
        self._rng = rng or random.Random()
        self._clock = clock or utc_now
        self._bus.subscribe(EventTypes.CREATURE_DIED, self._on_creature_died)

    @property
    def repository(self) -> CreatureRepository:
        return self._repo

    def close(self) -> None:
        """EventBus 구독 해제 (앱 종료 시)"""
        self._bus.unsubscribe(EventTypes.CREATURE_DIED, self._on_creature_died)

    # ── creature ─────────────────────────────────────────────

    def create_creature(
        self,
        name: str,
        traits: Optional[List[Trait]] = None,
        skills: Optional[List[Skill]] = None,
        creature_id: Optional[str] = None,
    ) -> Creature:
        """새 creature 생성 + 등록. 서비스의 rng/clock을 공유한다."""
        creature = Creature(
            id=creature_id or str(uuid.uuid4()),
            name=name,
            traits=traits or [],
            skills=skills or [],
            rng=self._rng,
            clock=self._clock,
        )
        self.register_creature(creature)
        return creature

    def register_creature(self, creature: Creature) -> None:
        if self._repo.lookup(creature.id) is not None:
            raise ValueError(f"Creature already registered: {creature.id}")
        self._repo.add(creature)
        self._bus.emit(
            SimEvent(
                event_type=EventTypes.CREATURE_REGISTERED,
                data={"creature_id": creature.id},
                source=_SOURCE,
            )
        )
        logger.info(f"Creature registered: {creature.name} ({creature.id})")

    def get_creature(self, creature_id: str) -> Creature:
        return self._repo.get(creature_id)

    def duplicate_creature(self, creature_id: str) -> Creature:
        """복제본 등록. 복제본의 관계 목록은 비어 있다."""
        original = self._repo.get(creature_id)
        copy = original.duplicate()
        self.register_creature(copy)
        logger.info(f"Creature duplicated: {creature_id} → {copy.id}")
        return copy

    # ── 관계 조회 ────────────────────────────────────────────

    def get_relationships(self, creature_id: str) -> List[SocialRelation]:
        return self._repo.get(creature_id).get_all_relationships()

    def get_relationship(
        self, creature_id: str, target_id: str
    ) -> Optional[SocialRelation]:
        return self._repo.get(creature_id).get_relationship(target_id)

    # ── 관계 upsert ──────────────────────────────────────────

    def set_relationship(
        self,
        creature_id: str,
        target_id: str,
        relation_type: SocialRelationType,
        value: Optional[float] = None,
        compatibility: Optional[float] = None,
        family_details: Optional[FamilyDetails] = None,
    ) -> SocialRelation:
        owner, _ = self._resolve_pair(creature_id, target_id)
        return self._set_one_way(
            owner,
            target_id,
            relation_type,
            value=value,
            compatibility=compatibility,
            family_details=family_details,
        )

    def _set_one_way(
        self,
        owner: Creature,
        target_id: str,
        relation_type: SocialRelationType,
        family_details: Optional[FamilyDetails] = None,
        value: Optional[float] = None,
        compatibility: Optional[float] = None,
    ) -> SocialRelation:
        relation = owner.relationships.set_relationship(
            target_id,
            relation_type,
            value=value,
            compatibility=compatibility,
            family_details=family_details,
        )

        self._bus.emit(
            SimEvent(
                event_type=EventTypes.RELATIONSHIP_SET,
                data={
                    "source_id": owner.id,
                    "target_id": target_id,
                    "requested_type": relation_type.value,
                    "type": relation.type.value,
                },
                source=f"{_SOURCE}:{owner.id}",
            )
        )
        logger.info(
            f"Relationship set: {owner.id}→{target_id} "
            f"type={relation.type.value} rank={relation.relationship_rank:.1f}"
        )
        return relation

    # ── 상호작용 ─────────────────────────────────────────────

    def interact(
        self,
        creature_id: str,
        target_id: str,
        quality: float,
        reason: Optional[str] = None,
        reciprocal: bool = False,
    ) -> Tuple[SocialRelation, Optional[SocialRelation]]:
        """상호작용 처리. reciprocal=True면 상대 방향도 독립적으로 처리.

        Returns:
            (정방향 관계, 역방향 관계 또는 None)
        """
        owner, target = self._resolve_pair(creature_id, target_id)
        forward = self._interact_one_way(owner, target_id, quality, reason)
        backward = (
            self._interact_one_way(target, creature_id, quality, reason)
            if reciprocal
            else None
        )
        return forward, backward

    def _interact_one_way(
        self,
        owner: Creature,
        target_id: str,
        quality: float,
        reason: Optional[str],
    ) -> SocialRelation:
        existing = owner.get_relationship(target_id)
        old_type = existing.type if existing is not None else None

        relation = owner.process_interaction(target_id, quality, reason)

        self._bus.emit(
            SimEvent(
                event_type=EventTypes.SOCIAL_INTERACTION,
                data={
                    "source_id": owner.id,
                    "target_id": target_id,
                    "quality": quality,
                    "reason": reason,
                },
                source=f"{_SOURCE}:{owner.id}",
            )
        )

        if old_type is not None and old_type != relation.type:
            self._bus.emit(
                SimEvent(
                    event_type=EventTypes.RELATIONSHIP_CHANGED,
                    data={
                        "source_id": owner.id,
                        "target_id": target_id,
                        "field": "type",
                        "old_value": old_type.value,
                        "new_value": relation.type.value,
                    },
                    source=f"{_SOURCE}:{owner.id}",
                )
            )

        logger.info(
            f"Interaction: {owner.id}→{target_id} quality={quality} "
            f"rank={relation.relationship_rank:.1f} type={relation.type.value}, "
            f"reason={reason}"
        )
        return relation

    def calculate_compatibility(self, creature_id: str, other_id: str) -> float:
        owner, other = self._resolve_pair(creature_id, other_id)
        return owner.relationships.calculate_compatibility(other)

    # ── 사망 전파 ────────────────────────────────────────────

    def process_creature_death(self, dead_id: str) -> List[Tuple[str, Thought]]:
        """등록된 모든 creature 중 dead_id와 관계 있는 쪽에 사망 통지.

        dead_id 자체는 등록되어 있지 않아도 된다 (이미 제거된 creature).

        Returns:
            (관찰자 id, 적용된 thought) 목록
        """
        notified: List[Tuple[str, Thought]] = []
        for observer in self._repo.all():
            if observer.id == dead_id:
                continue
            thought = observer.handle_death_notification(dead_id)
            if thought is not None:
                notified.append((observer.id, thought))

        self._bus.emit(
            SimEvent(
                event_type=EventTypes.DEATH_NOTIFIED,
                data={
                    "creature_id": dead_id,
                    "observer_ids": [observer_id for observer_id, _ in notified],
                },
                source=_SOURCE,
            )
        )
        logger.info(
            f"Death propagated: {dead_id} → {len(notified)} observers notified"
        )
        return notified

    def _on_creature_died(self, event: SimEvent) -> None:
        """외부 사망 이벤트 → 사망 전파"""
        dead_id = event.data.get("creature_id")
        if not dead_id:
            logger.warning("social: creature_id 없는 creature_died 수신")
            return
        self.process_creature_death(dead_id)

    # ── 시뮬레이션 ───────────────────────────────────────────

    def simulate_scenario(self, creature_id: str, other_id: str, scenario: str) -> int:
        first, second = self._resolve_pair(creature_id, other_id)
        quality = simulate_social_interaction(
            first, second, scenario, self._rng, self._interact_one_way
        )
        logger.info(
            f"Scenario simulated: {creature_id}↔{other_id} "
            f"scenario={scenario} quality={quality}"
        )
        return quality

    def simulate_day(self) -> List[Tuple[str, str, str, int]]:
        log = simulate_daily_interactions(
            self._repo.all(), self._rng, self._interact_one_way
        )
        logger.info(f"Daily interactions simulated: {len(log)} interactions")
        return log

    def choose_social_target(self, creature_id: str) -> Optional[Creature]:
        creature = self._repo.get(creature_id)
        return choose_social_target(creature, self._repo.all(), self._clock())

    def create_social_bonds(
        self, creature_ids: Sequence[str], relation_type: SocialRelationType
    ) -> int:
        """선택된 creature 전원 간 관계 일괄 생성. 2마리 미만이면 ValueError."""
        unique_ids = list(dict.fromkeys(creature_ids))
        if len(unique_ids) < 2:
            raise ValueError("At least two creatures are required to create bonds")
        creatures = [self._repo.get(cid) for cid in unique_ids]
        created = create_social_bonds(creatures, relation_type, self._set_one_way)
        logger.info(
            f"Social bonds created: {created} × {relation_type.value} "
            f"among {len(creatures)} creatures"
        )
        return created

    # ── 내부 헬퍼 ────────────────────────────────────────────

    def _resolve_pair(
        self, creature_id: str, target_id: str
    ) -> Tuple[Creature, Creature]:
        """자기 자신 대상이면 ValueError, 미등록이면 CreatureNotFoundError"""
        if creature_id == target_id:
            raise ValueError(f"Creature cannot target itself: {creature_id}")
        return self._repo.get(creature_id), self._repo.get(target_id)
