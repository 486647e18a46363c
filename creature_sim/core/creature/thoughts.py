"""Thought — creature 기분에 영향을 주는 시한부 효과"""

from dataclasses import dataclass


@dataclass
class Thought:
    """기분 효과 1건.

    같은 id의 thought는 stack_limit까지 중첩된다 (Creature.apply_thought).
    """

    id: str
    name: str
    mood_effect: float
    duration: int  # tick
    remaining_time: int = 0
    stack_count: int = 1
    stack_limit: int = 1
