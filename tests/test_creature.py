"""Creature 테스트 (thought 중첩, 기분, 복제)"""

import pytest

from creature_sim.core.creature import Skill, Thought, Trait
from creature_sim.core.social.enums import SocialRelationType


def _thought(thought_id: str = "sunny_day", **kwargs) -> Thought:
    defaults = {
        "id": thought_id,
        "name": "Sunny day",
        "mood_effect": 4,
        "duration": 100,
        "stack_limit": 2,
    }
    defaults.update(kwargs)
    return Thought(**defaults)


class TestApplyThought:
    def test_new_thought_is_copied(self, make_creature):
        creature = make_creature("alice")
        template = _thought()
        creature.apply_thought(template)

        stored = creature.get_thought("sunny_day")
        assert stored is not template
        assert stored.remaining_time == 100
        assert stored.stack_count == 1
        assert creature.mood == pytest.approx(54.0)

    def test_stacks_up_to_limit(self, make_creature):
        creature = make_creature("alice")
        for _ in range(5):
            creature.apply_thought(_thought())
        assert creature.get_thought("sunny_day").stack_count == 2
        assert creature.mood == pytest.approx(58.0)

    def test_stacking_refreshes_remaining_time(self, make_creature):
        creature = make_creature("alice")
        creature.apply_thought(_thought())
        creature.advance_thoughts(60)
        assert creature.get_thought("sunny_day").remaining_time == 40
        creature.apply_thought(_thought())
        assert creature.get_thought("sunny_day").remaining_time == 100

    def test_mood_is_clamped(self, make_creature):
        creature = make_creature("alice")
        creature.apply_thought(_thought("tragedy", mood_effect=-80, stack_limit=1))
        assert creature.mood == 0.0
        creature.apply_thought(_thought("miracle", mood_effect=200, stack_limit=1))
        assert creature.mood == 100.0


class TestAdvanceThoughts:
    def test_expired_thoughts_removed(self, make_creature):
        creature = make_creature("alice")
        creature.apply_thought(_thought("short", duration=10))
        creature.apply_thought(_thought("long", duration=1000))

        expired = creature.advance_thoughts(10)

        assert [t.id for t in expired] == ["short"]
        assert [t.id for t in creature.thoughts] == ["long"]
        assert creature.mood == pytest.approx(54.0)

    def test_nothing_expired(self, make_creature):
        creature = make_creature("alice")
        creature.apply_thought(_thought())
        assert creature.advance_thoughts(1) == []
        assert len(creature.thoughts) == 1


class TestDuplicate:
    def test_duplicate_copies_profile_not_relations(self, make_creature):
        creature = make_creature(
            "alice",
            name="Alice",
            traits=[Trait("kind", "Kind", ["cruel"])],
            skills=[Skill("art", "Art", level=4)],
        )
        creature.apply_thought(_thought())
        creature.relationships.set_relationship("bob", SocialRelationType.FRIEND)

        copy = creature.duplicate(new_id="alice-2")

        assert copy.id == "alice-2"
        assert copy.name == "Alice (Copy)"
        assert copy.traits == creature.traits
        assert copy.traits[0] is not creature.traits[0]
        assert copy.skills == creature.skills
        assert [t.id for t in copy.thoughts] == ["sunny_day"]
        assert copy.mood == creature.mood
        assert copy.social_relations == []
        assert copy.relationships.creature is copy

    def test_duplicate_generates_id(self, make_creature):
        creature = make_creature("alice")
        copy = creature.duplicate()
        assert copy.id != creature.id
        assert copy.id


class TestRelationshipManagerBinding:
    def test_manager_bound_to_creature(self, make_creature):
        creature = make_creature("alice")
        assert creature.relationships.creature is creature

    def test_relations_live_on_creature(self, make_creature):
        creature = make_creature("alice")
        rel = creature.relationships.set_relationship("bob", SocialRelationType.RIVAL)
        assert creature.social_relations == [rel]
        assert creature.get_relationship("bob") is rel
