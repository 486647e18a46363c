"""Creature 협력 객체 패키지 — 관계 시스템이 참조하는 데이터

Creature 본체는 creature_sim.core.creature.models 에서 import 한다.
"""

from creature_sim.core.creature.thoughts import Thought
from creature_sim.core.creature.traits import Skill, SkillPassion, Trait

__all__ = [
    "Skill",
    "SkillPassion",
    "Thought",
    "Trait",
]
