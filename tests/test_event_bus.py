from coincrush.events.bus import EventBus


def test_event_bus_delivers_until_unsubscribed():
    bus = EventBus()
    received = []

    def handler(sender, **kwargs):
        assert sender is bus
        received.append(kwargs)

    bus.subscribe("tile_click", handler)
    bus.emit("tile_click", index=4)
    bus.emit("never_subscribed", index=5)
    bus.unsubscribe("tile_click", handler)
    bus.emit("tile_click", index=6)

    assert received == [{"index": 4}]
