"""API request/response schemas."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from creature_sim.core.creature.traits import SkillPassion
from creature_sim.core.social.enums import RelationshipVariable, SocialRelationType


# === Request Schemas ===


class TraitIn(BaseModel):
    """특성 입력"""

    id: str = Field(..., min_length=1)
    name: str = ""
    conflicting_traits: List[str] = Field(default_factory=list)


class SkillIn(BaseModel):
    """기술 입력"""

    id: str = Field(..., min_length=1)
    name: str = ""
    level: int = Field(0, ge=0, le=20)
    passion: SkillPassion = SkillPassion.NONE


class CreateCreatureRequest(BaseModel):
    """creature 등록 요청"""

    name: str = Field(..., min_length=1, max_length=100)
    creature_id: Optional[str] = Field(None, min_length=1, max_length=64)
    traits: List[TraitIn] = Field(default_factory=list)
    skills: List[SkillIn] = Field(default_factory=list)


class FamilyDetailsIn(BaseModel):
    is_blood_related: bool
    generation_difference: int
    relationship_description: Optional[str] = None


class SetRelationshipRequest(BaseModel):
    """관계 upsert 요청. 생략 필드는 기존 값 유지."""

    type: SocialRelationType
    value: Optional[float] = Field(None, allow_inf_nan=False)
    compatibility: Optional[float] = Field(None, allow_inf_nan=False)
    family_details: Optional[FamilyDetailsIn] = None


class InteractionRequest(BaseModel):
    """상호작용 요청. quality 범위 제한 없음 (엔진이 클램프), NaN/무한대는 거부."""

    target_id: str = Field(..., min_length=1)
    quality: float = Field(..., allow_inf_nan=False)
    reason: Optional[str] = None
    reciprocal: bool = False


# === Response Schemas ===


class FamilyDetailsOut(BaseModel):
    is_blood_related: bool
    generation_difference: int
    relationship_description: Optional[str] = None


class OpinionModifierOut(BaseModel):
    reason: str
    value: float
    channels: List[RelationshipVariable]
    expiry_date: Optional[datetime] = None


class RelationshipOut(BaseModel):
    """관계 1건"""

    target_id: str
    type: SocialRelationType
    value: float
    relationship_rank: float
    compatibility: float
    variables: Dict[RelationshipVariable, float]
    opinion_modifiers: List[OpinionModifierOut] = []
    last_interaction: datetime
    interaction_count: int
    family_details: Optional[FamilyDetailsOut] = None


class ThoughtOut(BaseModel):
    id: str
    name: str
    mood_effect: float
    remaining_time: int
    stack_count: int
    stack_limit: int


class CreatureOut(BaseModel):
    """creature 요약"""

    id: str
    name: str
    mood: float
    trait_ids: List[str] = []
    skill_ids: List[str] = []
    relationship_count: int = 0
    thoughts: List[ThoughtOut] = []


class InteractionResponse(BaseModel):
    forward: RelationshipOut
    backward: Optional[RelationshipOut] = None


class DeathResponse(BaseModel):
    creature_id: str
    notified: List[str] = []


class CompatibilityResponse(BaseModel):
    creature_id: str
    other_id: str
    compatibility: float
