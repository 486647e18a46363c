"""Creature 저장소 인터페이스

SocialService는 모듈 전역 싱글턴 대신 주입된 저장소로 creature를 찾는다.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from creature_sim.core.creature.models import Creature


class CreatureNotFoundError(LookupError):
    """등록되지 않은 creature id"""

    def __init__(self, creature_id: str) -> None:
        super().__init__(f"Creature not found: {creature_id}")
        self.creature_id = creature_id


class CreatureRepository(ABC):
    """creature 조회/등록 계약"""

    @abstractmethod
    def lookup(self, creature_id: str) -> Optional[Creature]:
        """id → Creature. 없으면 None."""
        ...

    @abstractmethod
    def add(self, creature: Creature) -> None:
        ...

    @abstractmethod
    def remove(self, creature_id: str) -> Optional[Creature]:
        ...

    @abstractmethod
    def all(self) -> List[Creature]:
        ...

    def get(self, creature_id: str) -> Creature:
        """id → Creature. 없으면 CreatureNotFoundError."""
        creature = self.lookup(creature_id)
        if creature is None:
            raise CreatureNotFoundError(creature_id)
        return creature

    def __len__(self) -> int:
        return len(self.all())


class InMemoryCreatureRepository(CreatureRepository):
    """등록 순서를 유지하는 dict 기반 저장소"""

    def __init__(self) -> None:
        self._creatures: Dict[str, Creature] = {}

    def lookup(self, creature_id: str) -> Optional[Creature]:
        return self._creatures.get(creature_id)

    def add(self, creature: Creature) -> None:
        self._creatures[creature.id] = creature

    def remove(self, creature_id: str) -> Optional[Creature]:
        return self._creatures.pop(creature_id, None)

    def all(self) -> List[Creature]:
        return list(self._creatures.values())
