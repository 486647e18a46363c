"""관계 시스템 도메인 모델

DB 무관 순수 데이터 클래스. 한 인스턴스는 소유 creature → target 방향의 관계 1개.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from creature_sim.core.logging import get_logger
from creature_sim.core.social.calculations import (
    clamp_compatibility,
    clamp_rank,
    clamp_variable,
    rank_change,
    utc_now,
)
from creature_sim.core.social.classification import classify_relationship
from creature_sim.core.social.enums import (
    RelationshipVariable,
    SocialRelationType,
    is_family_type,
)
from creature_sim.core.social.opinions import (
    OpinionModifier,
    aggregate_channels,
    infer_channels,
    prune_expired,
)

logger = get_logger(__name__)


def _empty_variables() -> Dict[RelationshipVariable, float]:
    return {channel: 0.0 for channel in RelationshipVariable}


@dataclass
class FamilyDetails:
    """혈연 관계 메타데이터"""

    is_blood_related: bool
    generation_difference: int  # 양수 = 윗세대, 음수 = 아랫세대
    relationship_description: Optional[str] = None  # 예: "eldest son"


@dataclass
class SocialRelation:
    """소유 creature가 target을 바라보는 방향성 관계

    relationship_rank: 0 ~ 100 (value는 같은 저장소의 별칭)
    compatibility: -100 ~ +100
    """

    target_id: str
    type: SocialRelationType
    relationship_rank: float = 0.0
    compatibility: float = 0.0
    family_details: Optional[FamilyDetails] = None

    variables: Dict[RelationshipVariable, float] = field(
        default_factory=_empty_variables
    )
    opinion_modifiers: List[OpinionModifier] = field(default_factory=list)

    last_interaction: datetime = field(default_factory=utc_now)
    interaction_count: int = 0

    def __post_init__(self) -> None:
        self.relationship_rank = clamp_rank(self.relationship_rank)
        self.compatibility = clamp_compatibility(self.compatibility)

    # ── rank 별칭 ────────────────────────────────────────────

    @property
    def value(self) -> float:
        return self.relationship_rank

    @value.setter
    def value(self, new_value: float) -> None:
        if math.isnan(new_value):
            return
        self.relationship_rank = clamp_rank(new_value)

    # ── 변수 채널 ────────────────────────────────────────────

    def get_variable_value(self, channel: RelationshipVariable) -> float:
        return self.variables.get(channel, 0.0)

    def set_variable_value(self, channel: RelationshipVariable, value: float) -> None:
        if math.isnan(value):
            return
        self.variables[channel] = clamp_variable(value)

    def is_family_relationship(self) -> bool:
        return is_family_type(self.type)

    # ── 상호작용 ─────────────────────────────────────────────

    def interact(self, quality: float, now: Optional[datetime] = None) -> None:
        """상호작용 1회 반영 → rank 갱신 → 유형 재분류.

        quality 범위 제한 없음. 결과 rank만 0 ~ 100으로 클램프.
        """
        self.interaction_count += 1
        self.last_interaction = now or utc_now()
        self.value = self.relationship_rank + rank_change(quality, self.compatibility)
        self.reclassify()

    def reclassify(self) -> SocialRelationType:
        """현재 rank/compatibility로 유형 재판정. 변경 후 유형 반환."""
        new_type = classify_relationship(
            self.type,
            self.relationship_rank,
            self.compatibility,
            has_family_details=self.family_details is not None,
        )
        if new_type != self.type:
            logger.debug(
                f"Relationship reclassified: →{self.target_id} "
                f"{self.type.value}→{new_type.value} "
                f"(rank={self.relationship_rank:.1f}, compat={self.compatibility:.0f})"
            )
            self.type = new_type
        return self.type

    # ── 의견 수정치 ──────────────────────────────────────────

    def add_opinion_modifier(
        self,
        reason: str,
        value: float,
        expiry_days: Optional[float] = None,
        channels: Optional[Iterable[RelationshipVariable]] = None,
        now: Optional[datetime] = None,
    ) -> OpinionModifier:
        """원장에 항목 추가 후 변수 채널 전체 재계산.

        expiry_days=0 은 "지금" 만료: 이번 재계산에는 포함, 이후 재계산에서 제거.
        channels 생략 시 reason 키워드로 추론.
        """
        now = now or utc_now()
        expiry_date = (
            now + timedelta(days=expiry_days) if expiry_days is not None else None
        )
        modifier = OpinionModifier(
            reason=reason,
            value=value,
            channels=(
                frozenset(channels) if channels is not None else infer_channels(reason)
            ),
            expiry_date=expiry_date,
        )
        self.opinion_modifiers.append(modifier)
        self.refresh_variables(now)
        return modifier

    def refresh_variables(self, now: Optional[datetime] = None) -> None:
        """만료 항목 정리 → 채널 합계로 변수 5개 덮어쓰기."""
        self.opinion_modifiers = prune_expired(self.opinion_modifiers, now or utc_now())
        for channel, total in aggregate_channels(self.opinion_modifiers).items():
            self.set_variable_value(channel, total)
