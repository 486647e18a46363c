"""관계 시뮬레이션 Core 패키지 — 공개 API"""

from creature_sim.core.social.enums import (
    ENEMY_TYPES,
    FAMILY_TYPES,
    FRIEND_TYPES,
    PROTECTED_TYPES,
    RelationshipVariable,
    SocialRelationType,
    is_family_type,
)
from creature_sim.core.social.calculations import (
    clamp_compatibility,
    clamp_rank,
    clamp_variable,
    initial_rank_from_quality,
    rank_change,
    utc_now,
)
from creature_sim.core.social.classification import (
    classify_relationship,
    is_reclassifiable,
)
from creature_sim.core.social.opinions import (
    OpinionModifier,
    aggregate_channels,
    infer_channels,
    prune_expired,
)
from creature_sim.core.social.models import FamilyDetails, SocialRelation
from creature_sim.core.social.compatibility import (
    CompatibilityProfile,
    calculate_compatibility,
    score_profiles,
)
from creature_sim.core.social.thoughts import (
    build_death_thought,
    build_interaction_thought,
)
from creature_sim.core.social.manager import RelationshipManager

__all__ = [
    "ENEMY_TYPES",
    "FAMILY_TYPES",
    "FRIEND_TYPES",
    "PROTECTED_TYPES",
    "RelationshipVariable",
    "SocialRelationType",
    "is_family_type",
    "clamp_compatibility",
    "clamp_rank",
    "clamp_variable",
    "initial_rank_from_quality",
    "rank_change",
    "utc_now",
    "classify_relationship",
    "is_reclassifiable",
    "OpinionModifier",
    "aggregate_channels",
    "infer_channels",
    "prune_expired",
    "FamilyDetails",
    "SocialRelation",
    "CompatibilityProfile",
    "calculate_compatibility",
    "score_profiles",
    "build_death_thought",
    "build_interaction_thought",
    "RelationshipManager",
]
