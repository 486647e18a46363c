"""EventBus - 서비스와 구독자 간 이벤트 통신

규칙:
- 이벤트는 식별자(ID)와 원시 값만 전달한다 (Creature 객체 금지)
- 전파 깊이 최대 MAX_DEPTH 단계
- 하나의 전파 체인 안에서 동일 source의 동일 이벤트 중복 발행 금지
- 최상위 emit이 끝나면 체인은 자동으로 초기화된다 (별도 reset 호출 없음)
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Set

from creature_sim.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5  # 한 체인 내 이벤트 전파 최대 깊이


@dataclass
class SimEvent:
    """이벤트 데이터 컨테이너

    Args:
        event_type: 이벤트 유형 (예: "social_interaction", "creature_died")
        data: 이벤트 데이터 (ID 위주)
        source: 발행한 서비스 이름
    """

    event_type: str
    data: Dict[str, Any]
    source: str

    # 내부 추적용
    _depth: int = field(default=0, repr=False)


EventHandler = Callable[[SimEvent], None]


class EventBus:
    """동기식 이벤트 버스

    사용 패턴:
        bus = EventBus()
        bus.subscribe("creature_died", service.handle_creature_died)
        bus.emit(SimEvent(event_type="creature_died", data={"creature_id": "c-1"}, source="api"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._current_depth: int = 0
        self._emitted_in_chain: Set[str] = set()  # "source:event_type"

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """이벤트 구독 등록"""
        self._handlers[event_type].append(handler)
        logger.debug(f"EventBus 구독: {event_type} → {handler.__qualname__}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        """이벤트 구독 해제"""
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(
                    f"EventBus 구독 해제: {event_type} → {handler.__qualname__}"
                )
            except ValueError:
                logger.warning(f"핸들러 미등록: {event_type} → {handler.__qualname__}")

    def emit(self, event: SimEvent) -> None:
        """이벤트 발행. 등록된 핸들러를 동기 호출.

        안전장치:
        1. 전파 깊이 MAX_DEPTH 초과 시 무시
        2. 같은 체인 안에서 동일 source의 동일 event_type 재발행 시 무시
        """
        if self._current_depth >= MAX_DEPTH:
            logger.warning(
                f"EventBus 전파 깊이 초과 ({MAX_DEPTH}): "
                f"{event.source}:{event.event_type} 무시됨"
            )
            return

        chain_key = f"{event.source}:{event.event_type}"
        if chain_key in self._emitted_in_chain:
            logger.warning(f"EventBus 중복 이벤트 차단: {chain_key}")
            return

        self._emitted_in_chain.add(chain_key)
        event._depth = self._current_depth

        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug(f"EventBus: {event.event_type} 구독자 없음")
        else:
            logger.debug(
                f"EventBus 전파: {event.event_type} (source={event.source}, "
                f"depth={self._current_depth}, handlers={len(handlers)})"
            )

        self._current_depth += 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        f"EventBus 핸들러 에러: {handler.__qualname__} "
                        f"(event={event.event_type})"
                    )
        finally:
            self._current_depth -= 1
            if self._current_depth == 0:
                self._emitted_in_chain.clear()
