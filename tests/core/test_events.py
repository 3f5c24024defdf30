"""Tests for event bus."""

from cubeview.core.events import EventBus, EventType


def test_subscribe_publish():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.MATERIAL_EDITED, lambda **kw: received.append(kw))
    bus.publish(EventType.MATERIAL_EDITED, material=None, field="opacity", value=0.5)
    assert len(received) == 1
    assert received[0] == {"material": None, "field": "opacity", "value": 0.5}


def test_unsubscribe():
    bus = EventBus()
    received = []
    handler = lambda **kw: received.append(kw)
    bus.subscribe(EventType.FRAME_RENDERED, handler)
    bus.unsubscribe(EventType.FRAME_RENDERED, handler)
    bus.publish(EventType.FRAME_RENDERED, frame=1, dt=0.016)
    assert len(received) == 0


def test_multiple_subscribers():
    bus = EventBus()
    a, b = [], []
    bus.subscribe(EventType.FRAME_RENDERED, lambda **kw: a.append(1))
    bus.subscribe(EventType.FRAME_RENDERED, lambda **kw: b.append(1))
    bus.publish(EventType.FRAME_RENDERED, frame=1, dt=0.016)
    assert len(a) == 1
    assert len(b) == 1


def test_different_events_independent():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.MATERIAL_EDITED, lambda **kw: received.append("edit"))
    bus.publish(EventType.FRAME_RENDERED, frame=1, dt=0.016)
    assert len(received) == 0

