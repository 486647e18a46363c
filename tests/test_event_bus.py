"""EventBus 테스트"""

from creature_sim.core.event_bus import MAX_DEPTH, EventBus, SimEvent


class TestSubscribeEmit:
    def test_basic_emit(self):
        bus = EventBus()
        received = []
        bus.subscribe("test_event", lambda e: received.append(e))
        bus.emit(SimEvent(event_type="test_event", data={"id": "1"}, source="test"))
        assert len(received) == 1
        assert received[0].data["id"] == "1"

    def test_multiple_handlers_in_order(self):
        bus = EventBus()
        results = []
        bus.subscribe("evt", lambda e: results.append("a"))
        bus.subscribe("evt", lambda e: results.append("b"))
        bus.emit(SimEvent(event_type="evt", data={}, source="test"))
        assert results == ["a", "b"]

    def test_no_handlers(self):
        """구독자 없는 이벤트 발행 — 에러 없이 무시"""
        bus = EventBus()
        bus.emit(SimEvent(event_type="no_one_listens", data={}, source="test"))

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        handler = lambda e: received.append(e)  # noqa: E731
        bus.subscribe("evt", handler)
        bus.unsubscribe("evt", handler)
        bus.emit(SimEvent(event_type="evt", data={}, source="test"))
        assert received == []

    def test_unsubscribe_nonexistent(self):
        """미등록 핸들러 해제 — 경고만, 에러 없음, 기존 구독 유지"""
        bus = EventBus()
        received = []
        bus.subscribe("evt", lambda e: received.append(e))
        bus.unsubscribe("evt", lambda e: None)
        bus.emit(SimEvent(event_type="evt", data={}, source="test"))
        assert len(received) == 1


class TestDepthLimit:
    def test_max_depth_prevents_infinite_loop(self):
        bus = EventBus()
        call_count = 0

        def recursive_handler(event: SimEvent):
            nonlocal call_count
            call_count += 1
            # 다른 source로 발행해서 중복 체크를 우회
            bus.emit(
                SimEvent(event_type="chain", data={}, source=f"handler_{call_count}")
            )

        bus.subscribe("chain", recursive_handler)
        bus.emit(SimEvent(event_type="chain", data={}, source="origin"))

        assert call_count == MAX_DEPTH

    def test_depth_recorded_on_event(self):
        bus = EventBus()
        depths = []

        def outer(event: SimEvent):
            depths.append(event._depth)
            bus.emit(SimEvent(event_type="inner", data={}, source="outer"))

        bus.subscribe("outer", outer)
        bus.subscribe("inner", lambda e: depths.append(e._depth))
        bus.emit(SimEvent(event_type="outer", data={}, source="test"))
        assert depths == [0, 1]


class TestDuplicatePrevention:
    def test_same_source_same_event_blocked_within_chain(self):
        bus = EventBus()
        count = 0

        def handler(event: SimEvent):
            nonlocal count
            count += 1
            # 같은 source에서 같은 이벤트 재발행 시도
            bus.emit(SimEvent(event_type="evt", data={}, source="same_source"))

        bus.subscribe("evt", handler)
        bus.emit(SimEvent(event_type="evt", data={}, source="same_source"))
        assert count == 1  # 두 번째는 중복으로 차단

    def test_different_source_allowed(self):
        bus = EventBus()
        received = []

        bus.subscribe("evt", lambda e: received.append(e.source))
        bus.emit(SimEvent(event_type="evt", data={}, source="source_a"))
        bus.emit(SimEvent(event_type="evt", data={}, source="source_b"))
        assert received == ["source_a", "source_b"]

    def test_chain_clears_after_top_level_emit(self):
        """최상위 emit 종료 후 같은 source 재발행 허용"""
        bus = EventBus()
        received = []
        bus.subscribe("evt", lambda e: received.append(1))
        bus.emit(SimEvent(event_type="evt", data={}, source="s"))
        bus.emit(SimEvent(event_type="evt", data={}, source="s"))
        assert len(received) == 2


class TestHandlerError:
    def test_handler_exception_doesnt_stop_others(self):
        bus = EventBus()
        results = []

        def bad_handler(e):
            raise ValueError("boom")

        def good_handler(e):
            results.append("ok")

        bus.subscribe("evt", bad_handler)
        bus.subscribe("evt", good_handler)
        bus.emit(SimEvent(event_type="evt", data={}, source="test"))
        assert results == ["ok"]

    def test_bus_usable_after_handler_error(self):
        bus = EventBus()
        results = []

        def bad_handler(e):
            raise RuntimeError("boom")

        bus.subscribe("bad", bad_handler)
        bus.subscribe("good", lambda e: results.append(e.event_type))
        bus.emit(SimEvent(event_type="bad", data={}, source="test"))
        bus.emit(SimEvent(event_type="good", data={}, source="test"))
        assert results == ["good"]
