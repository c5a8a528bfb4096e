import asyncio

from animated_router.core.events import Event, EventBus, EventType, route_changed_event, shutdown_event


def test_subscribe_and_emit():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.ROUTE_CHANGED, received.append)

    event = route_changed_event("/fade")
    bus.emit(event)
    bus.emit(shutdown_event())

    assert received == [event]
    assert event.data == {"route": "/fade"}
    assert event.source == "router"


def test_unsubscribe():
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventType.SHUTDOWN, received.append)
    unsubscribe()
    bus.emit(shutdown_event())
    assert received == []


def test_subscribe_all_sees_every_type():
    bus = EventBus()
    received = []
    bus.subscribe_all(lambda e: received.append(e.type))
    bus.emit(route_changed_event("/"))
    bus.emit(shutdown_event(source="simulator"))
    assert received == [EventType.ROUTE_CHANGED, EventType.SHUTDOWN]


def test_handler_errors_are_contained():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.SHUTDOWN, broken)
    bus.subscribe(EventType.SHUTDOWN, received.append)
    bus.emit(shutdown_event())
    assert len(received) == 1


def test_sync_emit_skips_async_handlers():
    bus = EventBus()
    called = []

    async def handler(event):
        called.append(event)

    bus.subscribe(EventType.SHUTDOWN, handler)
    bus.emit(shutdown_event())
    assert called == []


def test_queued_events_dispatch_on_process():
    bus = EventBus()
    sync_seen = []
    async_seen = []

    async def async_handler(event):
        async_seen.append(event.data["route"])

    bus.subscribe(EventType.ROUTE_CHANGED, lambda e: sync_seen.append(e.data["route"]))
    bus.subscribe(EventType.ROUTE_CHANGED, async_handler)

    bus.queue_event(route_changed_event("/a"))
    bus.queue_event(route_changed_event("/b"))
    assert bus.pending == 2
    assert sync_seen == []

    asyncio.run(bus.process_queue())

    assert bus.pending == 0
    assert sync_seen == ["/a", "/b"]
    assert async_seen == ["/a", "/b"]


def test_failing_async_handler_is_logged(caplog):
    bus = EventBus()

    async def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.SHUTDOWN, broken)
    bus.queue_event(shutdown_event())
    asyncio.run(bus.process_queue())
    assert "Error in async handler: boom" in caplog.text


def test_history_is_bounded_and_filterable():
    bus = EventBus(history_limit=5)
    for index in range(8):
        bus.emit(route_changed_event(f"/{index}"))
    bus.emit(Event(EventType.SHUTDOWN, data={"reason": "x"}))

    history = bus.get_history(limit=100)
    assert len(history) == 5
    assert history[-1].type == EventType.SHUTDOWN

    routes = bus.get_history(EventType.ROUTE_CHANGED, limit=2)
    assert [e.data["route"] for e in routes] == ["/6", "/7"]

    bus.clear_history()
    assert bus.get_history() == []
