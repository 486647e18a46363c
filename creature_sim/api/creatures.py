"""Creature / social relationship API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from creature_sim.api.schemas import (
    CompatibilityResponse,
    CreateCreatureRequest,
    CreatureOut,
    DeathResponse,
    FamilyDetailsOut,
    InteractionRequest,
    InteractionResponse,
    OpinionModifierOut,
    RelationshipOut,
    SetRelationshipRequest,
    ThoughtOut,
)
from creature_sim.core.creature.models import Creature
from creature_sim.core.creature.traits import Skill, Trait
from creature_sim.core.logging import get_logger
from creature_sim.core.social.models import FamilyDetails, SocialRelation
from creature_sim.services.creature_repository import CreatureNotFoundError
from creature_sim.services.social_service import SocialService

logger = get_logger(__name__)

router = APIRouter(prefix="/creatures", tags=["creatures"])


def get_social_service(request: Request) -> SocialService:
    """SocialService 인스턴스 반환 (의존성 주입)"""
    service: SocialService = request.app.state.social_service
    return service


def _build_relationship_out(relation: SocialRelation) -> RelationshipOut:
    """SocialRelation → RelationshipOut"""
    family = relation.family_details
    return RelationshipOut(
        target_id=relation.target_id,
        type=relation.type,
        value=relation.value,
        relationship_rank=relation.relationship_rank,
        compatibility=relation.compatibility,
        variables=dict(relation.variables),
        opinion_modifiers=[
            OpinionModifierOut(
                reason=mod.reason,
                value=mod.value,
                channels=sorted(mod.channels, key=lambda c: c.value),
                expiry_date=mod.expiry_date,
            )
            for mod in relation.opinion_modifiers
        ],
        last_interaction=relation.last_interaction,
        interaction_count=relation.interaction_count,
        family_details=(
            FamilyDetailsOut(
                is_blood_related=family.is_blood_related,
                generation_difference=family.generation_difference,
                relationship_description=family.relationship_description,
            )
            if family is not None
            else None
        ),
    )


def _build_creature_out(creature: Creature) -> CreatureOut:
    """Creature → CreatureOut"""
    return CreatureOut(
        id=creature.id,
        name=creature.name,
        mood=creature.mood,
        trait_ids=[t.id for t in creature.traits],
        skill_ids=[s.id for s in creature.skills],
        relationship_count=len(creature.social_relations),
        thoughts=[
            ThoughtOut(
                id=t.id,
                name=t.name,
                mood_effect=t.mood_effect,
                remaining_time=t.remaining_time,
                stack_count=t.stack_count,
                stack_limit=t.stack_limit,
            )
            for t in creature.thoughts
        ],
    )


def _not_found(exc: CreatureNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))


@router.post("", response_model=CreatureOut, status_code=201)
def create_creature(
    request: CreateCreatureRequest,
    service: SocialService = Depends(get_social_service),
) -> CreatureOut:
    """creature 등록"""
    try:
        creature = service.create_creature(
            name=request.name,
            traits=[
                Trait(
                    id=t.id,
                    name=t.name,
                    conflicting_traits=list(t.conflicting_traits),
                )
                for t in request.traits
            ],
            skills=[
                Skill(id=s.id, name=s.name, level=s.level, passion=s.passion)
                for s in request.skills
            ],
            creature_id=request.creature_id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return _build_creature_out(creature)


@router.get("/{creature_id}", response_model=CreatureOut)
def get_creature(
    creature_id: str,
    service: SocialService = Depends(get_social_service),
) -> CreatureOut:
    try:
        return _build_creature_out(service.get_creature(creature_id))
    except CreatureNotFoundError as exc:
        raise _not_found(exc)


@router.get("/{creature_id}/relationships", response_model=List[RelationshipOut])
def list_relationships(
    creature_id: str,
    service: SocialService = Depends(get_social_service),
) -> List[RelationshipOut]:
    try:
        relations = service.get_relationships(creature_id)
    except CreatureNotFoundError as exc:
        raise _not_found(exc)
    return [_build_relationship_out(r) for r in relations]


@router.get(
    "/{creature_id}/relationships/{target_id}", response_model=RelationshipOut
)
def get_relationship(
    creature_id: str,
    target_id: str,
    service: SocialService = Depends(get_social_service),
) -> RelationshipOut:
    try:
        relation = service.get_relationship(creature_id, target_id)
    except CreatureNotFoundError as exc:
        raise _not_found(exc)
    if relation is None:
        raise HTTPException(
            status_code=404,
            detail=f"Relationship not found: {creature_id} → {target_id}",
        )
    return _build_relationship_out(relation)


@router.put(
    "/{creature_id}/relationships/{target_id}", response_model=RelationshipOut
)
def set_relationship(
    creature_id: str,
    target_id: str,
    request: SetRelationshipRequest,
    service: SocialService = Depends(get_social_service),
) -> RelationshipOut:
    """관계 upsert"""
    family = request.family_details
    try:
        relation = service.set_relationship(
            creature_id,
            target_id,
            request.type,
            value=request.value,
            compatibility=request.compatibility,
            family_details=(
                FamilyDetails(
                    is_blood_related=family.is_blood_related,
                    generation_difference=family.generation_difference,
                    relationship_description=family.relationship_description,
                )
                if family is not None
                else None
            ),
        )
    except CreatureNotFoundError as exc:
        raise _not_found(exc)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return _build_relationship_out(relation)


@router.post("/{creature_id}/interactions", response_model=InteractionResponse)
def interact(
    creature_id: str,
    request: InteractionRequest,
    service: SocialService = Depends(get_social_service),
) -> InteractionResponse:
    """상호작용 처리 (reciprocal=True면 양방향 독립 처리)"""
    try:
        forward, backward = service.interact(
            creature_id,
            request.target_id,
            request.quality,
            reason=request.reason,
            reciprocal=request.reciprocal,
        )
    except CreatureNotFoundError as exc:
        raise _not_found(exc)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return InteractionResponse(
        forward=_build_relationship_out(forward),
        backward=_build_relationship_out(backward) if backward is not None else None,
    )


@router.post("/{creature_id}/death", response_model=DeathResponse)
def report_death(
    creature_id: str,
    service: SocialService = Depends(get_social_service),
) -> DeathResponse:
    """사망 통지 → 관계 있는 creature 전원에 thought 적용"""
    try:
        service.get_creature(creature_id)
    except CreatureNotFoundError as exc:
        raise _not_found(exc)
    notified = service.process_creature_death(creature_id)
    logger.info(f"Death reported via API: {creature_id}")
    return DeathResponse(
        creature_id=creature_id,
        notified=[observer_id for observer_id, _ in notified],
    )


@router.get(
    "/{creature_id}/compatibility/{other_id}", response_model=CompatibilityResponse
)
def compatibility(
    creature_id: str,
    other_id: str,
    service: SocialService = Depends(get_social_service),
) -> CompatibilityResponse:
    try:
        score = service.calculate_compatibility(creature_id, other_id)
    except CreatureNotFoundError as exc:
        raise _not_found(exc)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return CompatibilityResponse(
        creature_id=creature_id, other_id=other_id, compatibility=score
    )
