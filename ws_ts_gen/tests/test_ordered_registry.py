from ws_ts_gen.pipeline.analyzer import OrderedRegistry


def test_first_occurrence_wins():
    registry = OrderedRegistry()

    assert registry.register("ping", 1) is True
    assert registry.register("pong", 2) is True
    assert registry.register("ping", 3) is False

    assert registry.get("ping") == 1
    assert registry.items() == (("ping", 1), ("pong", 2))


def test_mapping_protocol():
    registry = OrderedRegistry()
    registry.register("b", "B")
    registry.register("a", "A")

    assert list(registry) == ["b", "a"]
    assert registry.keys() == ("b", "a")
    assert registry.values() == ("B", "A")
    assert len(registry) == 2
    assert "a" in registry
    assert "c" not in registry
    assert registry.get("c") is None
    assert repr(registry) == "OrderedRegistry(['b', 'a'])"
