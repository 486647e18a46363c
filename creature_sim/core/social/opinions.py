"""의견 수정치 원장 (Opinion Modifier Ledger)

각 수정치는 영향을 주는 채널 집합을 명시적으로 가진다.
채널이 주어지지 않으면 추가 시점에 reason 텍스트의 키워드로 한 번 추론한다.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from creature_sim.core.social.calculations import clamp_variable
from creature_sim.core.social.enums import RelationshipVariable

# 채널별 키워드 (대소문자 무시 부분 문자열 매칭)
CHANNEL_KEYWORDS: Dict[RelationshipVariable, Tuple[str, ...]] = {
    RelationshipVariable.LOYALTY: ("loyal", "betrayal"),
    RelationshipVariable.TRUST: ("trust", "honest", "lie"),
    RelationshipVariable.FEAR: ("intimidate", "threaten", "power"),
    RelationshipVariable.LOVE: ("love", "affection", "kind"),
    RelationshipVariable.RESPECT: ("respect", "admire"),
}


@dataclass(frozen=True)
class OpinionModifier:
    """원장 항목 1건"""

    reason: str
    value: float
    channels: FrozenSet[RelationshipVariable] = field(default_factory=frozenset)
    expiry_date: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        """만료일이 now보다 과거이면 만료. 만료일 당일은 유효."""
        return self.expiry_date is not None and self.expiry_date < now


def infer_channels(reason: str) -> FrozenSet[RelationshipVariable]:
    """reason 텍스트 → 채널 집합. 매칭 없으면 빈 집합."""
    text = reason.lower()
    return frozenset(
        channel
        for channel, keywords in CHANNEL_KEYWORDS.items()
        if any(keyword in text for keyword in keywords)
    )


def prune_expired(
    modifiers: Iterable[OpinionModifier], now: datetime
) -> List[OpinionModifier]:
    """만료 항목 제거 (순서 유지)."""
    return [mod for mod in modifiers if not mod.is_expired(now)]


def aggregate_channels(
    modifiers: Iterable[OpinionModifier],
) -> Dict[RelationshipVariable, float]:
    """채널별 단순 합계 후 -100 ~ +100 클램프. 5채널 모두 포함. NaN 항목은 무시."""
    sums: Dict[RelationshipVariable, float] = {
        channel: 0.0 for channel in RelationshipVariable
    }
    for mod in modifiers:
        if math.isnan(mod.value):
            continue
        for channel in mod.channels:
            sums[channel] += mod.value
    return {channel: clamp_variable(total) for channel, total in sums.items()}
